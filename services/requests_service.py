# services/requests_service.py

from typing import Callable, Dict, Optional

from core.logging_config import logger
from core.validation import (
    ValidationResult,
    validate_event_signup,
    validate_event_signup_status_change,
    validate_foundation_class_registration,
    validate_foundation_class_status_change,
    validate_membership_renewal,
    validate_membership_status_change,
)
from services.api_service import ApiService


class ValidationError(Exception):
    """Raised before any network call when a payload fails its rule table."""

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors = errors or {}


def _check(result: ValidationResult, label: str):
    if not result.is_valid:
        raise ValidationError(f"Invalid {label}", result.errors)


def _check_status(checker: Callable, status: str):
    check = checker(status)
    if not check.is_valid:
        raise ValidationError(f"Validation error: {check.error}", {"status": check.error})


class RequestsService(ApiService):
    """Membership renewals, foundation class registrations and event signups."""

    # -----------------------------------------------------
    # Membership renewals
    # -----------------------------------------------------
    def submit_membership_renewal(self, renewal: dict) -> dict:
        _check(validate_membership_renewal(renewal), "membership renewal")
        return self.post("/api/membership/renew", json=renewal)

    def get_membership_renewals(self) -> list:
        return self.get("/api/membership/renewals")

    def get_membership_renewal(self, renewal_id: str) -> dict:
        return self.get(f"/api/membership/renewals/{renewal_id}")

    def update_membership_renewal_status(self, renewal_id: str, status: str) -> dict:
        _check_status(validate_membership_status_change, status)
        logger.info(f"Updating renewal {renewal_id} to {status}")
        return self.put(f"/api/membership/renewals/{renewal_id}", json={"status": status})

    def delete_membership_renewal(self, renewal_id: str) -> dict:
        return self.delete(f"/api/membership/renewals/{renewal_id}")

    # -----------------------------------------------------
    # Foundation class registrations
    # -----------------------------------------------------
    def submit_foundation_class_registration(self, registration: dict) -> dict:
        _check(validate_foundation_class_registration(registration), "foundation class registration")
        return self.post("/api/foundation-classes/register", json=registration)

    def get_foundation_class_registrations(self) -> list:
        return self.get("/api/foundation-classes/registrations")

    def get_foundation_class_registration(self, registration_id: str) -> dict:
        return self.get(f"/api/foundation-classes/registrations/{registration_id}")

    def update_foundation_class_status(self, registration_id: str, status: str) -> dict:
        _check_status(validate_foundation_class_status_change, status)
        logger.info(f"Updating registration {registration_id} to {status}")
        return self.put(f"/api/foundation-classes/registrations/{registration_id}", json={"status": status})

    def delete_foundation_class_registration(self, registration_id: str) -> dict:
        return self.delete(f"/api/foundation-classes/registrations/{registration_id}")

    # -----------------------------------------------------
    # Event signup requests
    # -----------------------------------------------------
    def submit_event_signup(self, signup: dict) -> dict:
        _check(validate_event_signup(signup), "event signup request")
        return self.post("/api/event-signup-requests", json=signup)

    def get_event_signup_requests(self, event_type: Optional[str] = None, event_id: Optional[str] = None) -> list:
        if event_type:
            return self.get(f"/api/event-signup-requests/type/{event_type}")
        if event_id:
            return self.get(f"/api/event-signup-requests/event/{event_id}")
        return self.get("/api/event-signup-requests")

    def update_event_signup_status(self, request_id: str, status: str) -> dict:
        _check_status(validate_event_signup_status_change, status)
        return self.put(f"/api/event-signup-requests/{request_id}", json={"status": status})

    def delete_event_signup_request(self, request_id: str) -> dict:
        return self.delete(f"/api/event-signup-requests/{request_id}")
