from __future__ import annotations

from enum import Enum


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"


class GalleryCategory(str, Enum):
    wedding = "wedding"
    corporate = "corporate"
    conference = "conference"
    social = "social"


GALLERY_CATEGORY_NAMES: dict[str, str] = {
    "all": "All Events",
    GalleryCategory.wedding.value: "Weddings",
    GalleryCategory.corporate.value: "Corporate",
    GalleryCategory.conference.value: "Conferences",
    GalleryCategory.social.value: "Social Events",
}

# Offered by the public booking form. Admin-created bookings accept free text.
EVENT_TYPES: tuple[str, ...] = (
    "Wedding Reception",
    "Corporate Meeting",
    "Conference",
    "Birthday Party",
    "Anniversary Celebration",
    "Product Launch",
    "Charity Event",
    "Other",
)
