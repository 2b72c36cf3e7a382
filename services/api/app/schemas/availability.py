from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class AvailabilityCheckIn(BaseModel):
    dates: list[date] = Field(default_factory=list)


class ConflictReportOut(BaseModel):
    available: bool
    alternatives: list[date] = Field(default_factory=list)
    conflicts: list[date] = Field(default_factory=list)


class BookedDatesOut(BaseModel):
    dates: list[date]
