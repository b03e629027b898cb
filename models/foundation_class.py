# models/foundation_class.py

from typing import Any, Optional

from .base import CamelModel


# -------------------------------------------------
# Registration (public submission)
# -------------------------------------------------
class FoundationClassRegistrationCreate(CamelModel):
    """`registrationDate` and `status` are set by the API."""

    full_name: str
    email: str
    phone: str
    preferred_session: str
    questions: Optional[str] = None


class RegistrationStatusUpdate(CamelModel):
    status: Any = None
