from __future__ import annotations

from datetime import date
from typing import Iterable

from app.models.booked_date import BookedDate
from sqlalchemy import delete, select
from sqlalchemy.orm import Session


def list_booked_dates(db: Session) -> list[date]:
    return list(db.execute(select(BookedDate.date).order_by(BookedDate.date.asc())).scalars())


def booked_date_set(db: Session) -> frozenset[date]:
    """Snapshot of every reserved date, as the availability checker consumes it."""
    return frozenset(list_booked_dates(db))


def reserve_dates(
    db: Session,
    *,
    dates: Iterable[date],
    event_name: str | None,
    booking_id: str | None = None,
) -> list[BookedDate]:
    """Insert booked_dates rows, skipping dates that are already reserved.

    Flushes but does not commit; the caller owns the transaction.
    """
    wanted = sorted(set(dates))
    if not wanted:
        return []

    taken = set(
        db.execute(select(BookedDate.date).where(BookedDate.date.in_(wanted))).scalars()
    )

    created: list[BookedDate] = []
    for d in wanted:
        if d in taken:
            continue
        row = BookedDate(date=d, event_name=event_name, booking_id=booking_id)
        db.add(row)
        created.append(row)

    db.flush()
    return created


def release_dates_for_booking(db: Session, *, booking_id: str) -> int:
    res = db.execute(delete(BookedDate).where(BookedDate.booking_id == booking_id))
    db.flush()
    return int(getattr(res, "rowcount", 0) or 0)


def dates_reserved_elsewhere(
    db: Session, *, dates: Iterable[date], booking_id: str | None
) -> list[date]:
    """Dates in ``dates`` already reserved by anything other than ``booking_id``."""
    wanted = sorted(set(dates))
    if not wanted:
        return []

    stmt = select(BookedDate.date).where(BookedDate.date.in_(wanted))
    if booking_id is not None:
        stmt = stmt.where(
            (BookedDate.booking_id.is_(None)) | (BookedDate.booking_id != booking_id)
        )
    return sorted(db.execute(stmt).scalars())
