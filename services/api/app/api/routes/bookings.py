from __future__ import annotations

import logging
from datetime import date

from app.api.deps import get_today
from app.api.rate_limit import rate_limiter
from app.core.config import settings
from app.db.session import get_db
from app.domain.booking_flow import ContactDetails, SubmissionRejected
from app.schemas.availability import ConflictReportOut
from app.schemas.booking import BookingIn, BookingOut
from app.services.booking_service import submit_booking
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["bookings"])


@router.post(
    "/bookings",
    response_model=BookingOut,
    status_code=201,
    dependencies=[
        Depends(
            rate_limiter(
                "bookings",
                limit=settings.rate_limit_bookings_per_window,
                window_seconds=settings.rate_limit_window_seconds,
            )
        )
    ],
)
def create_public_booking(
    payload: BookingIn,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    contact = ContactDetails(
        name=payload.name,
        email=str(payload.email),
        phone=payload.phone,
        event_type=payload.event_type,
    )

    try:
        return submit_booking(
            db, contact=contact, preferred_dates=payload.preferred_dates, today=today
        )
    except SubmissionRejected as e:
        if e.reason == "date_conflict" and e.report is not None:
            logger.info(
                "booking rejected: dates already booked %s",
                ",".join(d.isoformat() for d in e.report.conflicts),
            )
            raise HTTPException(
                status_code=409,
                detail={
                    "message": e.message,
                    "report": ConflictReportOut(
                        available=e.report.available,
                        alternatives=e.report.alternatives,
                        conflicts=e.report.conflicts,
                    ).model_dump(mode="json"),
                },
            )
        if e.reason == "missing_fields":
            raise HTTPException(status_code=422, detail=e.message)
        raise HTTPException(status_code=400, detail=e.message)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=503,
            detail="There was an error submitting your booking. Please try again.",
        )
