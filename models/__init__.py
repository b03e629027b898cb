# -------------------------
# Base
# -------------------------
from .base import CamelModel, lenient_datetime

# -------------------------
# Enums
# -------------------------
from .enums import (
    UserRole,
    RenewalStatus,
    FoundationClassStatus,
    SignupEventType,
    SignupStatus,
    JoinRequestStatus,
)

# -------------------------
# Auth Models
# -------------------------
from .auth import LoginRequest, LoginResponse, AuthUser

# -------------------------
# Website Content
# -------------------------
from .sermon import SermonCreate, SermonUpdate
from .event import EventBase, EventCreate, EventUpdate
from .leader import LeaderCreate, LeaderUpdate, LeaderContact, SocialMedia
from .cell_group import CellGroupCreate, CellGroupUpdate, Coordinates
from .zone import ZoneCreate, ZoneUpdate, ZoneElder
from .media import MediaUpdate
from .foundation_class_session import SessionCreate, SessionUpdate

# -------------------------
# Member Requests
# -------------------------
from .membership import MemberRenewalCreate, RenewalStatusUpdate
from .foundation_class import FoundationClassRegistrationCreate, RegistrationStatusUpdate
from .event_signup import EventSignupCreate, SignupStatusUpdate
from .join_request import JoinRequestCreate, JoinRequestStatusUpdate
from .notification import NotificationRequest, Recipient

__all__ = [
    # base
    "CamelModel",
    "lenient_datetime",

    # enums
    "UserRole",
    "RenewalStatus",
    "FoundationClassStatus",
    "SignupEventType",
    "SignupStatus",
    "JoinRequestStatus",

    # auth
    "LoginRequest",
    "LoginResponse",
    "AuthUser",

    # content
    "SermonCreate",
    "SermonUpdate",
    "EventBase",
    "EventCreate",
    "EventUpdate",
    "LeaderCreate",
    "LeaderUpdate",
    "LeaderContact",
    "SocialMedia",
    "CellGroupCreate",
    "CellGroupUpdate",
    "Coordinates",
    "ZoneCreate",
    "ZoneUpdate",
    "ZoneElder",
    "MediaUpdate",
    "SessionCreate",
    "SessionUpdate",

    # requests
    "MemberRenewalCreate",
    "RenewalStatusUpdate",
    "FoundationClassRegistrationCreate",
    "RegistrationStatusUpdate",
    "EventSignupCreate",
    "SignupStatusUpdate",
    "JoinRequestCreate",
    "JoinRequestStatusUpdate",
    "NotificationRequest",
    "Recipient",
]
