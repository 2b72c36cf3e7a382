from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable

from app.crud.booked_dates import release_dates_for_booking, reserve_dates
from app.domain.availability import to_calendar_date
from app.domain.venue import BookingStatus
from app.models.booking import Booking
from sqlalchemy import select
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def event_name_for(booking: Booking) -> str:
    return f"{booking.event_type} - {booking.name}"


def create_booking(
    db: Session,
    *,
    name: str,
    email: str,
    phone: str,
    event_type: str,
    preferred_dates: Iterable[date | str],
    status: BookingStatus = BookingStatus.pending,
    venue_cost: int | None = None,
    additional_services: int | None = None,
    total_amount: int | None = None,
) -> Booking:
    booking = Booking(
        name=name,
        email=email,
        phone=phone,
        event_type=event_type,
        preferred_dates=[to_calendar_date(d).isoformat() for d in preferred_dates],
        status=status.value,
        venue_cost=venue_cost,
        additional_services=additional_services,
        total_amount=total_amount,
    )
    db.add(booking)
    db.flush()

    if status == BookingStatus.confirmed:
        reserve_dates(
            db,
            dates=[to_calendar_date(d) for d in booking.preferred_dates],
            event_name=event_name_for(booking),
            booking_id=booking.id,
        )

    db.commit()
    db.refresh(booking)
    logger.info(
        "booking created id=%s status=%s dates=%s",
        booking.id,
        booking.status,
        ",".join(booking.preferred_dates),
    )
    return booking


def get_booking(db: Session, *, booking_id: str) -> Booking | None:
    return db.get(Booking, booking_id)


def list_bookings(db: Session) -> list[Booking]:
    return list(
        db.execute(select(Booking).order_by(Booking.created_at.desc())).scalars().all()
    )


def list_upcoming_bookings(db: Session, *, today: date) -> list[Booking]:
    """Confirmed bookings with at least one date on or after ``today``."""
    confirmed = (
        db.execute(
            select(Booking)
            .where(Booking.status == BookingStatus.confirmed.value)
            .order_by(Booking.created_at.desc())
        )
        .scalars()
        .all()
    )
    return [
        b
        for b in confirmed
        if any(to_calendar_date(d) >= today for d in (b.preferred_dates or []))
    ]


def update_booking(db: Session, *, booking: Booking, changes: dict[str, Any]) -> Booking:
    if "preferred_dates" in changes and changes["preferred_dates"] is not None:
        changes["preferred_dates"] = [
            to_calendar_date(d).isoformat() for d in changes["preferred_dates"]
        ]

    for key, value in changes.items():
        setattr(booking, key, value)

    # Keep reserved dates in step with an edited confirmed booking.
    if "preferred_dates" in changes and booking.status == BookingStatus.confirmed.value:
        release_dates_for_booking(db, booking_id=booking.id)
        reserve_dates(
            db,
            dates=[to_calendar_date(d) for d in booking.preferred_dates],
            event_name=event_name_for(booking),
            booking_id=booking.id,
        )

    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def set_booking_status(
    db: Session, *, booking: Booking, status: BookingStatus
) -> Booking:
    previous = booking.status
    booking.status = status.value

    if status == BookingStatus.confirmed and previous != BookingStatus.confirmed.value:
        created = reserve_dates(
            db,
            dates=[to_calendar_date(d) for d in booking.preferred_dates],
            event_name=event_name_for(booking),
            booking_id=booking.id,
        )
        if len(created) < len(set(booking.preferred_dates)):
            logger.warning(
                "booking %s confirmed but some dates were already reserved", booking.id
            )
    elif status != BookingStatus.confirmed:
        release_dates_for_booking(db, booking_id=booking.id)

    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info("booking %s status %s -> %s", booking.id, previous, booking.status)
    return booking


def delete_booking(db: Session, *, booking: Booking) -> None:
    release_dates_for_booking(db, booking_id=booking.id)
    db.delete(booking)
    db.commit()
