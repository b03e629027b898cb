from datetime import datetime
from typing import Optional

from pydantic import field_validator

from .base import CamelModel, lenient_datetime


# -------------------------------------------------
# Shared Fields
# -------------------------------------------------
class EventBase(CamelModel):
    description: Optional[str] = None
    end_date: Optional[datetime] = None

    # Display strings; derived from startDate when omitted
    date: Optional[str] = None
    time: Optional[str] = None

    ministry: Optional[str] = None
    location: Optional[str] = None
    capacity: Optional[int] = None
    registration_url: Optional[str] = None
    organizer: Optional[str] = None
    contact_email: Optional[str] = None
    featured: Optional[bool] = None
    is_recurring: Optional[bool] = None
    recurrence_pattern: Optional[str] = None

    image: Optional[str] = None
    image_url: Optional[str] = None


# -------------------------------------------------
# Create Event
# -------------------------------------------------
class EventCreate(EventBase):
    """
    startDate accepts ISO timestamps ("2025-01-01T00:00:00Z")
    as well as human strings ("April 30, 2025 7:00 PM").
    """

    title: str
    start_date: datetime
    featured: bool = False
    is_recurring: bool = False

    @field_validator("start_date", "end_date", mode="before")
    def parse_dates(cls, v):
        return lenient_datetime(v)


# -------------------------------------------------
# Update Event (partial)
# -------------------------------------------------
class EventUpdate(EventBase):
    title: Optional[str] = None
    start_date: Optional[datetime] = None

    @field_validator("start_date", "end_date", mode="before")
    def parse_dates(cls, v):
        return lenient_datetime(v)
