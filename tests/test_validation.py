# tests/test_validation.py

"""
Tests for the workflow rule tables and status checks.
"""

import pytest

from core.validation import (
    validate_event_signup,
    validate_event_signup_status_change,
    validate_foundation_class_registration,
    validate_foundation_class_status_change,
    validate_join_request_status_change,
    validate_membership_renewal,
    validate_membership_status_change,
)


def _renewal(**overrides):
    data = {
        "fullName": "John Doe",
        "email": "john@example.com",
        "phone": "1234567890",
        "birthday": "1990-01-01",
        "memberSince": "2020",
        "agreeToTerms": True,
    }
    data.update(overrides)
    return data


def _signup(**overrides):
    data = {
        "eventId": "evt-1",
        "eventType": "other",
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "0977123456",
    }
    data.update(overrides)
    return data


# -----------------------------------------------------
# Membership renewal
# -----------------------------------------------------
def test_valid_renewal():
    result = validate_membership_renewal(_renewal())
    assert result.is_valid
    assert result.errors == {}


def test_address_change_requires_new_address():
    result = validate_membership_renewal(_renewal(addressChange=True, newAddress=""))
    assert not result.is_valid
    assert result.errors["newAddress"] == "New Address is required when address change is selected"


def test_address_change_with_address_is_valid():
    result = validate_membership_renewal(_renewal(addressChange=True, newAddress="12 Church Road"))
    assert result.is_valid


def test_terms_must_be_accepted():
    result = validate_membership_renewal(_renewal(agreeToTerms=False))
    assert result.errors["agreeToTerms"] == "You must agree to the Agreement to Terms"


def test_missing_required_fields_reported_once_each():
    result = validate_membership_renewal({})
    assert set(result.errors) == {"fullName", "email", "phone", "birthday", "memberSince", "agreeToTerms"}
    assert result.errors["fullName"] == "Full Name is required"


@pytest.mark.parametrize("field,value,message", [
    ("fullName", "Jo", "Full Name must be at least 3 characters"),
    ("email", "not-an-email", "Email must be a valid email address"),
    ("phone", "12", "Phone Number must be a valid phone number"),
    ("birthday", "someday", "Birthday must be a valid date"),
    ("birthday", "Sunday", "Birthday must be a valid date"),
    ("birthday", "10am", "Birthday must be a valid date"),
    ("birthday", "March", "Birthday must be a valid date"),
    ("birthday", "5", "Birthday must be a valid date"),
    ("status", "graduated", "Status must be one of: pending, approved, declined"),
])
def test_renewal_field_errors(field, value, message):
    result = validate_membership_renewal(_renewal(**{field: value}))
    assert result.errors[field] == message


def test_phone_formats():
    for phone in ("123-456-7890", "(123) 456-7890", "+1234567890", "123.456.7890"):
        assert validate_membership_renewal(_renewal(phone=phone)).is_valid, phone


def test_long_text_rejected():
    result = validate_membership_renewal(_renewal(ministryInvolvement="x" * 501))
    assert result.errors["ministryInvolvement"] == "Ministry Involvement must be less than 500 characters"


# -----------------------------------------------------
# Foundation classes
# -----------------------------------------------------
def test_foundation_class_registration():
    ok = validate_foundation_class_registration({
        "fullName": "Mary Banda",
        "email": "mary@example.com",
        "phone": "0977123456",
        "preferredSession": "June 2024",
    })
    assert ok.is_valid

    missing = validate_foundation_class_registration({"fullName": "Mary Banda"})
    assert missing.errors["preferredSession"] == "Preferred Session is required"


# -----------------------------------------------------
# Event signups
# -----------------------------------------------------
def test_baptism_requires_testimony():
    result = validate_event_signup(_signup(eventType="baptism"))
    assert result.errors == {"testimony": "Testimony is required for baptism"}

    assert validate_event_signup(_signup(eventType="baptism", testimony="Saved in 2019")).is_valid


def test_baby_dedication_requires_child_details():
    result = validate_event_signup(_signup(eventType="babyDedication"))
    assert set(result.errors) == {"childName", "childDateOfBirth", "parentNames"}

    ok = validate_event_signup(_signup(
        eventType="babyDedication",
        childName="Baby Doe",
        childDateOfBirth="2024-02-14",
        parentNames="John & Jane Doe",
    ))
    assert ok.is_valid


def test_other_signup_needs_no_conditionals():
    assert validate_event_signup(_signup()).is_valid


def test_unknown_event_type_rejected():
    result = validate_event_signup(_signup(eventType="wedding"))
    assert result.errors["eventType"] == "Event Type must be one of: baptism, babyDedication, other"


# -----------------------------------------------------
# Status transitions
# -----------------------------------------------------
def test_status_changes():
    assert validate_membership_status_change("approved").is_valid
    assert not validate_membership_status_change("graduated").is_valid
    assert not validate_membership_status_change(None).is_valid

    assert validate_foundation_class_status_change("completed").is_valid
    assert not validate_foundation_class_status_change("approved").is_valid

    assert validate_event_signup_status_change("declined").is_valid
    assert validate_join_request_status_change("rejected").is_valid
    assert not validate_join_request_status_change("declined").is_valid


def test_non_string_status_is_rejected():
    for status in (5, True, ["approved"], {"value": "approved"}):
        assert not validate_membership_status_change(status).is_valid
        assert not validate_join_request_status_change(status).is_valid


def test_status_error_message():
    check = validate_foundation_class_status_change("done")
    assert check.error == "Status must be one of: registered, attending, completed, cancelled"


def test_child_date_of_birth_must_be_a_full_date():
    result = validate_event_signup(_signup(
        eventType="babyDedication",
        childName="Baby Doe",
        childDateOfBirth="Sunday",
        parentNames="John & Jane Doe",
    ))
    assert result.errors == {"childDateOfBirth": "Child's Date of Birth must be a valid date"}
