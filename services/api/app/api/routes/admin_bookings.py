from __future__ import annotations

from datetime import date

from app.api.deps import get_current_admin, get_today
from app.crud.booked_dates import booked_date_set, dates_reserved_elsewhere
from app.crud.bookings import (
    create_booking,
    delete_booking,
    get_booking,
    list_bookings,
    list_upcoming_bookings,
    set_booking_status,
    update_booking,
)
from app.db.session import get_db
from app.domain.venue import BookingStatus
from app.models.booking import Booking
from app.schemas.booking import (
    AdminBookingIn,
    BookingOut,
    BookingPatchIn,
    BookingStatusIn,
)
from app.services.documents import render_invoice, render_quotation
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

router = APIRouter(
    prefix="/v1/admin/bookings",
    tags=["admin-bookings"],
    dependencies=[Depends(get_current_admin)],
)


def _get_or_404(db: Session, booking_id: str) -> Booking:
    booking = get_booking(db, booking_id=booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.get("", response_model=list[BookingOut])
def list_all(db: Session = Depends(get_db)):
    return list_bookings(db)


@router.get("/upcoming", response_model=list[BookingOut])
def list_upcoming(db: Session = Depends(get_db), today: date = Depends(get_today)):
    return list_upcoming_bookings(db, today=today)


@router.post("", response_model=BookingOut, status_code=201)
def create_admin_booking(payload: AdminBookingIn, db: Session = Depends(get_db)):
    if payload.event_date in booked_date_set(db):
        raise HTTPException(status_code=409, detail="Date is already booked")

    return create_booking(
        db,
        name=payload.name,
        email=str(payload.email),
        phone=payload.phone,
        event_type=payload.event_type,
        preferred_dates=[payload.event_date],
        status=BookingStatus.confirmed,
        venue_cost=payload.venue_cost,
        additional_services=payload.additional_services,
        total_amount=payload.total_amount,
    )


@router.get("/{booking_id}", response_model=BookingOut)
def get_one(booking_id: str, db: Session = Depends(get_db)):
    return _get_or_404(db, booking_id)


@router.patch("/{booking_id}", response_model=BookingOut)
def edit_booking(
    booking_id: str, payload: BookingPatchIn, db: Session = Depends(get_db)
):
    booking = _get_or_404(db, booking_id)
    changes = payload.model_dump(exclude_unset=True)
    if "email" in changes and changes["email"] is not None:
        changes["email"] = str(changes["email"])
    # Required columns cannot be cleared.
    for key in ("name", "email", "phone", "event_type", "preferred_dates"):
        if key in changes and changes[key] is None:
            changes.pop(key)

    # A confirmed booking may not move onto a date someone else holds.
    if "preferred_dates" in changes and booking.status == BookingStatus.confirmed.value:
        taken = dates_reserved_elsewhere(
            db, dates=changes["preferred_dates"], booking_id=booking.id
        )
        if taken:
            raise HTTPException(
                status_code=409,
                detail="Date is already booked: "
                + ", ".join(d.isoformat() for d in taken),
            )

    return update_booking(db, booking=booking, changes=changes)


@router.post("/{booking_id}/status", response_model=BookingOut)
def change_status(
    booking_id: str, payload: BookingStatusIn, db: Session = Depends(get_db)
):
    booking = _get_or_404(db, booking_id)
    return set_booking_status(db, booking=booking, status=payload.status)


@router.delete("/{booking_id}", status_code=204)
def remove_booking(booking_id: str, db: Session = Depends(get_db)):
    booking = _get_or_404(db, booking_id)
    delete_booking(db, booking=booking)
    return None


def _attachment(filename: str, content: str) -> PlainTextResponse:
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{booking_id}/quotation", response_class=PlainTextResponse)
def download_quotation(booking_id: str, db: Session = Depends(get_db)):
    doc = render_quotation(_get_or_404(db, booking_id))
    return _attachment(doc.filename, doc.content)


@router.get("/{booking_id}/invoice", response_class=PlainTextResponse)
def download_invoice(booking_id: str, db: Session = Depends(get_db)):
    doc = render_invoice(_get_or_404(db, booking_id))
    return _attachment(doc.filename, doc.content)
