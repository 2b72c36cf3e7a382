from __future__ import annotations

from datetime import datetime

from app.domain.venue import GalleryCategory
from pydantic import BaseModel, Field, field_validator


class GalleryItemIn(BaseModel):
    title: str = Field(max_length=200)
    description: str = Field(max_length=1000)
    category: GalleryCategory

    @field_validator("title", "description")
    @classmethod
    def required_text(cls, v: str) -> str:
        s = v.strip()
        if not s:
            raise ValueError("must not be blank")
        return s


class GalleryItemPatchIn(BaseModel):
    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    category: GalleryCategory | None = None

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str | None) -> str | None:
        if v is None:
            return None
        s = v.strip()
        if not s:
            raise ValueError("must not be blank")
        return s


class GalleryItemOut(BaseModel):
    id: int
    title: str
    description: str
    category: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class GalleryCategoryOut(BaseModel):
    id: str
    name: str
