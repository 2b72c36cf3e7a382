from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator

DEFAULT_HORIZON_DAYS = 365
DEFAULT_SUGGESTION_LIMIT = 5


def to_calendar_date(value: date | datetime | str) -> date:
    """Coerce a date-like value to a plain calendar date.

    Datetimes lose their time component; strings must be ``YYYY-MM-DD``
    (a trailing ``T...`` time part is tolerated and dropped).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip().split("T", 1)[0])
    raise TypeError(f"Unsupported date value: {value!r}")


def to_booked_set(values: Iterable[date | datetime | str]) -> frozenset[date]:
    return frozenset(to_calendar_date(v) for v in values)


class CandidateSelection:
    """Ordered, duplicate-free set of dates picked for one booking.

    The first date added is the anchor for alternative-date suggestions.
    """

    def __init__(self, dates: Iterable[date | datetime | str] = ()) -> None:
        self._dates: list[date] = []
        for d in dates:
            self.add(d)

    def add(self, value: date | datetime | str) -> bool:
        d = to_calendar_date(value)
        if d in self._dates:
            return False
        self._dates.append(d)
        return True

    def remove(self, value: date | datetime | str) -> bool:
        d = to_calendar_date(value)
        if d not in self._dates:
            return False
        self._dates.remove(d)
        return True

    def clear(self) -> None:
        self._dates.clear()

    @property
    def anchor(self) -> date | None:
        return self._dates[0] if self._dates else None

    def as_iso(self) -> list[str]:
        return [d.isoformat() for d in self._dates]

    def __iter__(self) -> Iterator[date]:
        return iter(self._dates)

    def __len__(self) -> int:
        return len(self._dates)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (date, str)):
            return False
        try:
            return to_calendar_date(value) in self._dates
        except ValueError:
            return False

    def __repr__(self) -> str:
        return f"CandidateSelection({self.as_iso()!r})"


@dataclass(frozen=True)
class ConflictReport:
    available: bool
    alternatives: list[date] = field(default_factory=list)
    # Selected dates that are already booked, in selection order.
    conflicts: list[date] = field(default_factory=list)


def generate_alternatives(
    anchor: date,
    booked: frozenset[date] | set[date],
    *,
    today: date,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[date]:
    """Suggest up to ``limit`` free dates after ``anchor``.

    Walks forward one day at a time from the day after the later of
    ``anchor`` and ``today``. A day qualifies when it is not booked. The walk
    stops after ``horizon_days`` days, so a densely booked calendar yields a
    short (possibly empty) list instead of scanning forever.
    """
    if horizon_days < 0:
        raise ValueError("horizon_days must be >= 0")
    if limit <= 0:
        return []

    # Nothing on or before today can qualify, so start past both.
    current = max(anchor, today)
    alternatives: list[date] = []

    for _ in range(horizon_days):
        current += timedelta(days=1)
        if current in booked:
            continue
        alternatives.append(current)
        if len(alternatives) >= limit:
            break

    return alternatives


def check_availability(
    candidates: CandidateSelection | Iterable[date],
    booked: frozenset[date] | set[date],
    *,
    today: date,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> ConflictReport:
    """Check a selection against the booked snapshot.

    When any selected date is booked, alternatives are seeded from the first
    selected date only, whichever dates actually conflicted. An empty
    selection is reported as available; callers guard against it.
    """
    selection = (
        candidates
        if isinstance(candidates, CandidateSelection)
        else CandidateSelection(candidates)
    )

    conflicts = [d for d in selection if d in booked]
    if not conflicts:
        return ConflictReport(available=True)

    # A conflict implies a non-empty selection.
    anchor = next(iter(selection))

    return ConflictReport(
        available=False,
        alternatives=generate_alternatives(
            anchor,
            booked,
            today=today,
            horizon_days=horizon_days,
            limit=limit,
        ),
        conflicts=conflicts,
    )
