from datetime import datetime
from typing import Optional

from pydantic import field_validator

from .base import CamelModel, lenient_datetime


# -------------------------------------------------
# Create Sermon
# -------------------------------------------------
class SermonCreate(CamelModel):
    title: str
    speaker: str
    date: datetime
    description: Optional[str] = None
    video_id: Optional[str] = None
    duration: Optional[str] = None

    # media id (stored as imageId) or a direct URL
    image: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("date", mode="before")
    def parse_date_value(cls, v):
        return lenient_datetime(v)


# -------------------------------------------------
# Update Sermon (partial)
# -------------------------------------------------
class SermonUpdate(CamelModel):
    title: Optional[str] = None
    speaker: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
    video_id: Optional[str] = None
    duration: Optional[str] = None
    image: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("date", mode="before")
    def parse_date_value(cls, v):
        return lenient_datetime(v)
