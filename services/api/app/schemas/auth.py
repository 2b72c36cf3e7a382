from __future__ import annotations

from pydantic import BaseModel, Field


class AdminLoginIn(BaseModel):
    username: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=1, max_length=72)


class AdminOut(BaseModel):
    id: str
    username: str

    class Config:
        from_attributes = True
