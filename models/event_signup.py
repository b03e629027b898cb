# models/event_signup.py

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from .base import CamelModel, lenient_datetime
from .enums import SignupEventType


# -------------------------------------------------
# Event Signup Request (public submission)
# -------------------------------------------------
class EventSignupCreate(CamelModel):
    event_id: str
    event_type: SignupEventType
    full_name: str
    email: str
    phone: str

    # baptism
    testimony: Optional[str] = None
    previous_religion: Optional[str] = None

    # babyDedication
    child_name: Optional[str] = None
    child_date_of_birth: Optional[datetime] = None
    parent_names: Optional[str] = None

    message: Optional[str] = None

    @field_validator("event_id", mode="before")
    def event_id_to_str(cls, v):
        return str(v) if v is not None else v

    @field_validator("child_date_of_birth", mode="before")
    def parse_child_dob(cls, v):
        return lenient_datetime(v)


class SignupStatusUpdate(CamelModel):
    status: Any = None
