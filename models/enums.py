from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    admin = "admin"
    editor = "editor"
    user = "user"


# -----------------------------------------------------
# MEMBERSHIP RENEWAL STATUS
# -----------------------------------------------------
class RenewalStatus(BaseStrEnum):
    pending = "pending"
    approved = "approved"
    declined = "declined"


# -----------------------------------------------------
# FOUNDATION CLASS REGISTRATION STATUS
# -----------------------------------------------------
class FoundationClassStatus(BaseStrEnum):
    """registered → attending → completed / cancelled"""

    registered = "registered"
    attending = "attending"
    completed = "completed"
    cancelled = "cancelled"


# -----------------------------------------------------
# EVENT SIGNUP
# -----------------------------------------------------
class SignupEventType(BaseStrEnum):
    baptism = "baptism"
    baby_dedication = "babyDedication"
    other = "other"


class SignupStatus(BaseStrEnum):
    pending = "pending"
    approved = "approved"
    declined = "declined"


# -----------------------------------------------------
# CELL GROUP JOIN REQUEST STATUS
# -----------------------------------------------------
class JoinRequestStatus(BaseStrEnum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
