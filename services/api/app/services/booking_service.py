from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from app.core.config import settings
from app.crud.booked_dates import booked_date_set
from app.crud.bookings import create_booking
from app.domain.availability import ConflictReport, check_availability
from app.domain.booking_flow import BookingFlow, ContactDetails
from app.models.booking import Booking
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def check_dates(db: Session, dates: Iterable[date], *, today: date) -> ConflictReport:
    return check_availability(
        list(dates),
        booked_date_set(db),
        today=today,
        horizon_days=settings.alternative_search_horizon_days,
        limit=settings.alternative_suggestion_limit,
    )


def submit_booking(
    db: Session,
    *,
    contact: ContactDetails,
    preferred_dates: Iterable[date],
    today: date,
) -> Booking:
    """Replay the visitor's selection against a fresh snapshot and persist it.

    Raises SubmissionRejected (no dates, conflict, missing fields) before any
    write happens.
    """
    flow = BookingFlow(
        booked_date_set(db),
        today=today,
        horizon_days=settings.alternative_search_horizon_days,
        limit=settings.alternative_suggestion_limit,
    )
    for d in preferred_dates:
        flow.add_date(d)

    def _persist(c: ContactDetails, dates: list[str]) -> Booking:
        return create_booking(
            db,
            name=c.name,
            email=c.email,
            phone=c.phone,
            event_type=c.event_type,
            preferred_dates=dates,
        )

    try:
        return flow.submit(contact, _persist)
    except Exception:
        if flow.last_error is not None:
            db.rollback()
            logger.exception("booking submission failed for %s", contact.email)
        raise
