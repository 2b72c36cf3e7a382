from __future__ import annotations

from datetime import date

from app.api.deps import get_today
from app.crud.booked_dates import list_booked_dates
from app.db.session import get_db
from app.domain.venue import EVENT_TYPES
from app.schemas.availability import (
    AvailabilityCheckIn,
    BookedDatesOut,
    ConflictReportOut,
)
from app.services.booking_service import check_dates
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

router = APIRouter(prefix="/v1", tags=["availability"])


@router.get("/event-types", response_model=list[str])
def list_event_types():
    return list(EVENT_TYPES)


@router.get("/booked-dates", response_model=BookedDatesOut)
def get_booked_dates(db: Session = Depends(get_db)):
    return BookedDatesOut(dates=list_booked_dates(db))


@router.post("/availability/check", response_model=ConflictReportOut)
def check_availability_route(
    payload: AvailabilityCheckIn,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    if not payload.dates:
        raise HTTPException(status_code=400, detail="Please select at least one date")

    report = check_dates(db, payload.dates, today=today)
    return ConflictReportOut(
        available=report.available,
        alternatives=report.alternatives,
        conflicts=report.conflicts,
    )
