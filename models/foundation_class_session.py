# models/foundation_class_session.py

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, lenient_datetime


class SessionCreate(CamelModel):
    start_date: datetime
    end_date: datetime
    day: str
    time: str
    location: str
    capacity: int = Field(20, ge=0)
    enrolled_count: int = Field(0, ge=0)
    active: bool = True

    @field_validator("start_date", "end_date", mode="before")
    def parse_dates(cls, v):
        return lenient_datetime(v)


class SessionUpdate(CamelModel):
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    day: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    enrolled_count: Optional[int] = Field(None, ge=0)
    active: Optional[bool] = None

    @field_validator("start_date", "end_date", mode="before")
    def parse_dates(cls, v):
        return lenient_datetime(v)
