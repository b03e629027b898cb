# models/membership.py

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from .base import CamelModel, lenient_datetime


# -------------------------------------------------
# Membership Renewal (public submission)
# -------------------------------------------------
class MemberRenewalCreate(CamelModel):
    """
    Typed view of a renewal body that already passed the rule table in
    core.validation. `renewalDate` and `status` are set by the API.
    """

    full_name: str
    email: str
    phone: str
    birthday: datetime
    member_since: str
    ministry_involvement: Optional[str] = None
    address_change: bool = False
    new_address: Optional[str] = None
    agree_to_terms: bool

    @field_validator("birthday", mode="before")
    def parse_birthday(cls, v):
        return lenient_datetime(v)


# -------------------------------------------------
# Status change (admin)
# -------------------------------------------------
class RenewalStatusUpdate(CamelModel):
    # any JSON value; the status validators answer 400 for non-strings
    status: Any = None
