from app.models.admin_user import AdminUser
from app.models.base import Base
from app.models.booked_date import BookedDate
from app.models.booking import Booking
from app.models.gallery_item import GalleryItem


__all__ = [
    "Base",
    "AdminUser",
    "Booking",
    "BookedDate",
    "GalleryItem",
]
