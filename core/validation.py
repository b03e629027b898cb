# core/validation.py

"""
Rule-table validation for the request workflows
(membership renewals, foundation class registrations, event signups)
and their status transitions.

Used by the API routes before persisting and by the client services
before issuing a network call.
"""

import re
from typing import Any, Callable, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from core.date_utils import parse_date


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$")

RuleType = Literal["string", "email", "phone", "date", "boolean"]


class FieldRule(BaseModel):
    type: RuleType
    field_name: str
    required: bool = False
    conditional_required: Optional[Callable[[dict], bool]] = None
    conditional_message: str = "is required"
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    enum: Optional[List[str]] = None
    must_be_true: bool = False


class ValidationResult(BaseModel):
    is_valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


class StatusCheck(BaseModel):
    is_valid: bool
    error: Optional[str] = None


# -----------------------------------------------------
# Allowed statuses per workflow
# -----------------------------------------------------
MEMBERSHIP_STATUSES = ["pending", "approved", "declined"]
FOUNDATION_CLASS_STATUSES = ["registered", "attending", "completed", "cancelled"]
EVENT_SIGNUP_STATUSES = ["pending", "approved", "declined"]
JOIN_REQUEST_STATUSES = ["pending", "approved", "rejected"]

EVENT_SIGNUP_TYPES = ["baptism", "babyDedication", "other"]


# -----------------------------------------------------
# Rule tables
# -----------------------------------------------------
MEMBERSHIP_RENEWAL_RULES: Dict[str, FieldRule] = {
    "fullName": FieldRule(type="string", required=True, min_length=3, max_length=100, field_name="Full Name"),
    "email": FieldRule(type="email", required=True, field_name="Email"),
    "phone": FieldRule(type="phone", required=True, field_name="Phone Number"),
    "birthday": FieldRule(type="date", required=True, field_name="Birthday"),
    "memberSince": FieldRule(type="string", required=True, field_name="Member Since"),
    "ministryInvolvement": FieldRule(type="string", max_length=500, field_name="Ministry Involvement"),
    "addressChange": FieldRule(type="boolean", field_name="Address Change"),
    "newAddress": FieldRule(
        type="string",
        max_length=200,
        field_name="New Address",
        conditional_required=lambda data: data.get("addressChange") is True,
        conditional_message="is required when address change is selected",
    ),
    "agreeToTerms": FieldRule(type="boolean", required=True, must_be_true=True, field_name="Agreement to Terms"),
    "status": FieldRule(type="string", enum=MEMBERSHIP_STATUSES, field_name="Status"),
}

FOUNDATION_CLASS_RULES: Dict[str, FieldRule] = {
    "fullName": FieldRule(type="string", required=True, min_length=3, max_length=100, field_name="Full Name"),
    "email": FieldRule(type="email", required=True, field_name="Email"),
    "phone": FieldRule(type="phone", required=True, field_name="Phone Number"),
    "preferredSession": FieldRule(type="string", required=True, field_name="Preferred Session"),
    "questions": FieldRule(type="string", max_length=1000, field_name="Questions"),
    "status": FieldRule(type="string", enum=FOUNDATION_CLASS_STATUSES, field_name="Status"),
}

EVENT_SIGNUP_RULES: Dict[str, FieldRule] = {
    "eventId": FieldRule(type="string", required=True, field_name="Event"),
    "eventType": FieldRule(type="string", required=True, enum=EVENT_SIGNUP_TYPES, field_name="Event Type"),
    "fullName": FieldRule(type="string", required=True, min_length=3, max_length=100, field_name="Full Name"),
    "email": FieldRule(type="email", required=True, field_name="Email"),
    "phone": FieldRule(type="phone", required=True, field_name="Phone Number"),
    "testimony": FieldRule(
        type="string",
        max_length=2000,
        field_name="Testimony",
        conditional_required=lambda data: data.get("eventType") == "baptism",
        conditional_message="is required for baptism",
    ),
    "previousReligion": FieldRule(type="string", max_length=200, field_name="Previous Religion"),
    "childName": FieldRule(
        type="string",
        max_length=100,
        field_name="Child's Name",
        conditional_required=lambda data: data.get("eventType") == "babyDedication",
        conditional_message="is required for baby dedication",
    ),
    "childDateOfBirth": FieldRule(
        type="date",
        field_name="Child's Date of Birth",
        conditional_required=lambda data: data.get("eventType") == "babyDedication",
        conditional_message="is required for baby dedication",
    ),
    "parentNames": FieldRule(
        type="string",
        max_length=200,
        field_name="Parent Names",
        conditional_required=lambda data: data.get("eventType") == "babyDedication",
        conditional_message="is required for baby dedication",
    ),
    "message": FieldRule(type="string", max_length=1000, field_name="Message"),
    "status": FieldRule(type="string", enum=EVENT_SIGNUP_STATUSES, field_name="Status"),
}


# -----------------------------------------------------
# Generic validator
# -----------------------------------------------------
def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _check_type(value: Any, rule: FieldRule) -> Optional[str]:
    name = rule.field_name

    if rule.type == "string":
        if _is_empty(value):
            return None
        if not isinstance(value, str):
            return f"{name} must be text"
        if rule.min_length is not None and len(value) < rule.min_length:
            return f"{name} must be at least {rule.min_length} characters"
        if rule.max_length is not None and len(value) > rule.max_length:
            return f"{name} must be less than {rule.max_length} characters"
        if rule.enum is not None and value not in rule.enum:
            return f"{name} must be one of: {', '.join(rule.enum)}"
        return None

    if rule.type == "email":
        if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
            return f"{name} must be a valid email address"
        return None

    if rule.type == "phone":
        if not isinstance(value, str) or not PHONE_PATTERN.match(value):
            return f"{name} must be a valid phone number"
        return None

    if rule.type == "date":
        if parse_date(value) is None:
            return f"{name} must be a valid date"
        return None

    if rule.type == "boolean":
        if rule.must_be_true and value is not True:
            return f"You must agree to the {name}"
        if not isinstance(value, bool):
            return f"{name} must be a boolean value"
        return None

    return None


def validate_record(record: dict, rules: Dict[str, FieldRule]) -> ValidationResult:
    """
    Check `record` against a rule table.

    Per field: conditional-required, then required, then the optional-empty
    skip, then the type check. Only the first failing check is reported.
    """
    record = record or {}
    errors: Dict[str, str] = {}

    for field, rule in rules.items():
        value = record.get(field)

        if rule.conditional_required and rule.conditional_required(record) and _is_empty(value):
            errors[field] = f"{rule.field_name} {rule.conditional_message}"
            continue

        if _is_empty(value):
            if rule.required:
                errors[field] = f"{rule.field_name} is required"
            continue

        error = _check_type(value, rule)
        if error:
            errors[field] = error

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_membership_renewal(renewal: dict) -> ValidationResult:
    return validate_record(renewal, MEMBERSHIP_RENEWAL_RULES)


def validate_foundation_class_registration(registration: dict) -> ValidationResult:
    return validate_record(registration, FOUNDATION_CLASS_RULES)


def validate_event_signup(signup: dict) -> ValidationResult:
    return validate_record(signup, EVENT_SIGNUP_RULES)


# -----------------------------------------------------
# Status transitions
# -----------------------------------------------------
def validate_status(status: Any, allowed: List[str]) -> StatusCheck:
    if not isinstance(status, str) or status not in allowed:
        return StatusCheck(is_valid=False, error=f"Status must be one of: {', '.join(allowed)}")
    return StatusCheck(is_valid=True)


def validate_membership_status_change(status: Any) -> StatusCheck:
    return validate_status(status, MEMBERSHIP_STATUSES)


def validate_foundation_class_status_change(status: Any) -> StatusCheck:
    return validate_status(status, FOUNDATION_CLASS_STATUSES)


def validate_event_signup_status_change(status: Any) -> StatusCheck:
    return validate_status(status, EVENT_SIGNUP_STATUSES)


def validate_join_request_status_change(status: Any) -> StatusCheck:
    return validate_status(status, JOIN_REQUEST_STATUSES)
