from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Iterable

from app.domain.availability import (
    DEFAULT_HORIZON_DAYS,
    DEFAULT_SUGGESTION_LIMIT,
    CandidateSelection,
    ConflictReport,
    check_availability,
    to_booked_set,
)


class FlowState(str, Enum):
    empty = "empty"
    selecting = "selecting"
    available = "available"
    conflicted = "conflicted"
    submitting = "submitting"
    submitted = "submitted"
    submit_failed = "submit_failed"


class SubmissionRejected(Exception):
    """Submit attempted from a state that must not reach the store."""

    def __init__(
        self, reason: str, message: str, report: ConflictReport | None = None
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.report = report


@dataclass(frozen=True)
class ContactDetails:
    name: str
    email: str
    phone: str
    event_type: str

    def missing_fields(self) -> list[str]:
        return [
            f
            for f in ("name", "email", "phone", "event_type")
            if not (getattr(self, f) or "").strip()
        ]


# Receives the contact details and the ISO date list; raises on store failure.
Submitter = Callable[[ContactDetails, list[str]], Any]


class BookingFlow:
    """Drives one visitor's date selection through to submission.

    Every add/remove recomputes the conflict report over the whole selection
    against a frozen snapshot of booked dates.
    """

    def __init__(
        self,
        booked: Iterable[date | datetime | str],
        *,
        today: date,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> None:
        self._booked = to_booked_set(booked)
        self._today = today
        self._horizon_days = horizon_days
        self._limit = limit
        self.selection = CandidateSelection()
        self.report: ConflictReport | None = None
        self.state = FlowState.empty
        self.history: list[FlowState] = [FlowState.empty]
        self.result: Any = None
        self.last_error: Exception | None = None

    @property
    def booked(self) -> frozenset[date]:
        return self._booked

    def _set_state(self, state: FlowState) -> None:
        if state != self.state:
            self.history.append(state)
        self.state = state

    def _recheck(self) -> None:
        if not self.selection:
            self.report = None
            self._set_state(FlowState.empty)
            return

        if self.state == FlowState.empty:
            self._set_state(FlowState.selecting)

        self.report = check_availability(
            self.selection,
            self._booked,
            today=self._today,
            horizon_days=self._horizon_days,
            limit=self._limit,
        )
        self._set_state(
            FlowState.available if self.report.available else FlowState.conflicted
        )

    def add_date(self, value: date | datetime | str) -> ConflictReport | None:
        self.selection.add(value)
        self._recheck()
        return self.report

    def remove_date(self, value: date | datetime | str) -> ConflictReport | None:
        self.selection.remove(value)
        self._recheck()
        return self.report

    def refresh_booked(self, booked: Iterable[date | datetime | str]) -> None:
        """Swap in a freshly fetched snapshot; the report is recomputed."""
        self._booked = to_booked_set(booked)
        self._recheck()

    def reset(self) -> None:
        self.selection.clear()
        self.result = None
        self._recheck()

    def submit(self, contact: ContactDetails, submitter: Submitter) -> Any:
        if self.state == FlowState.empty:
            raise SubmissionRejected(
                "no_dates", "Please select at least one date"
            )
        if self.state == FlowState.conflicted:
            raise SubmissionRejected(
                "date_conflict",
                "Some of your selected dates are already booked. "
                "Please choose different dates.",
                report=self.report,
            )
        if self.state != FlowState.available:
            raise SubmissionRejected(
                "invalid_state", f"Cannot submit from state {self.state.value}"
            )

        missing = contact.missing_fields()
        if missing:
            raise SubmissionRejected(
                "missing_fields",
                "All fields are required to complete your booking: "
                + ", ".join(missing),
            )

        self._set_state(FlowState.submitting)
        try:
            self.result = submitter(contact, self.selection.as_iso())
        except Exception as exc:
            self.last_error = exc
            self._set_state(FlowState.submit_failed)
            # Keep the selection so the visitor can retry.
            self._set_state(FlowState.available)
            raise

        self.last_error = None
        self._set_state(FlowState.submitted)
        return self.result
