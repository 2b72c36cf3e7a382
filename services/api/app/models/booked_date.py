from __future__ import annotations

import datetime as dt
from datetime import datetime, timezone
from uuid import uuid4

from app.models.base import Base
from sqlalchemy import Date, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookedDate(Base):
    __tablename__ = "booked_dates"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )

    date: Mapped[dt.date] = mapped_column(Date, unique=True, index=True, nullable=False)
    event_name: Mapped[str | None] = mapped_column(String(300), nullable=True)

    # Null for dates reserved outside any booking (e.g. maintenance days)
    booking_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("bookings.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    booking = relationship("Booking", back_populates="reserved_dates")
