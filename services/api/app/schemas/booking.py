from __future__ import annotations

from datetime import date, datetime

from app.domain.venue import EVENT_TYPES, BookingStatus
from pydantic import BaseModel, EmailStr, Field, field_validator


def _not_blank(v: str) -> str:
    s = v.strip()
    if not s:
        raise ValueError("must not be blank")
    return s


class BookingIn(BaseModel):
    name: str = Field(max_length=200)
    email: EmailStr
    phone: str = Field(max_length=50)
    event_type: str
    preferred_dates: list[date] = Field(default_factory=list)

    @field_validator("name", "phone")
    @classmethod
    def required_text(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("event_type")
    @classmethod
    def known_event_type(cls, v: str) -> str:
        s = _not_blank(v)
        if s not in EVENT_TYPES:
            raise ValueError(f"event_type must be one of: {', '.join(EVENT_TYPES)}")
        return s


class AdminBookingIn(BaseModel):
    name: str = Field(max_length=200)
    email: EmailStr
    phone: str = Field(max_length=50)
    event_type: str = Field(max_length=100)
    event_date: date
    venue_cost: int | None = Field(default=None, ge=0)
    additional_services: int | None = Field(default=None, ge=0)
    total_amount: int | None = Field(default=None, ge=0)

    @field_validator("name", "phone", "event_type")
    @classmethod
    def required_text(cls, v: str) -> str:
        return _not_blank(v)


class BookingPatchIn(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    event_type: str | None = Field(default=None, max_length=100)
    preferred_dates: list[date] | None = None
    venue_cost: int | None = Field(default=None, ge=0)
    additional_services: int | None = Field(default=None, ge=0)
    total_amount: int | None = Field(default=None, ge=0)

    @field_validator("name", "phone", "event_type")
    @classmethod
    def required_text(cls, v: str | None) -> str | None:
        return None if v is None else _not_blank(v)


class BookingStatusIn(BaseModel):
    status: BookingStatus


class BookingOut(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    event_type: str
    preferred_dates: list[str]
    status: str
    venue_cost: int | None = None
    additional_services: int | None = None
    total_amount: int | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
