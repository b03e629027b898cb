# core/date_utils.py

"""
Date helpers shared by the response formatter and the validators.

Display format is "Month D, YYYY" (e.g. "June 2, 2024"). Values are shown
in their own timezone offset; naive datetimes are shown as-is.
"""

from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as date_parser

from core.logging_config import logger


DATE_UNAVAILABLE = "Date unavailable"

# Same time of day so date-only strings still parse to midnight
_FILL_A = datetime(2000, 1, 1)
_FILL_B = datetime(2001, 2, 2)

DATE_FIELD_NAMES = frozenset({
    "birthday",
    "renewalDate",
    "submittedAt",
    "registrationDate",
    "childDateOfBirth",
    "date",
    "startDate",
    "endDate",
    "createdAt",
    "updatedAt",
})


def format_date_to_string(value: Any) -> Optional[str]:
    """Format a real date/datetime as "Month D, YYYY"; anything else → None."""
    if not isinstance(value, date):
        return None
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_time_to_string(value: Any) -> Optional[str]:
    """Format a datetime as a 12-hour clock string ("9:00 AM")."""
    if not isinstance(value, datetime):
        return None
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def parse_date(value: Any) -> Optional[datetime]:
    """
    Leniently turn a value into a datetime.
    Accepts datetimes, dates, ISO strings and human strings ("June 2, 2024").
    Returns None instead of raising.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    # dateutil fills missing parts from `default`; two different defaults
    # expose partial strings ("Sunday", "10am", "March", "5")
    try:
        first = date_parser.parse(text, default=_FILL_A)
        second = date_parser.parse(text, default=_FILL_B)
    except (ValueError, OverflowError):
        return None
    return first if first == second else None


def extract_original_date(obj: Any, field: str) -> Optional[datetime]:
    """
    Recover a real datetime for `field`.
    The backing original document (`_doc`) wins over the current value,
    since the current value may have been overwritten in a shallow copy.
    """
    if not isinstance(obj, dict) or not field:
        return None

    original = obj.get("_doc")
    if isinstance(original, dict) and isinstance(original.get(field), date):
        return original[field]

    if isinstance(obj.get(field), date):
        return obj[field]

    return None


def process_date_field(obj: Any, field: str) -> str:
    """
    Normalize obj[field] to a display string, never raising.

    Order: original-document recovery, datetime formatting, string re-parse,
    pre-formatted pass-through, then the "Date unavailable" sentinel.
    """
    if not isinstance(obj, dict) or not field:
        return DATE_UNAVAILABLE

    try:
        original = extract_original_date(obj, field)
        if original is not None:
            return format_date_to_string(original)

        value = obj.get(field)
        if isinstance(value, str):
            parsed = parse_date(value)
            if parsed is not None:
                return format_date_to_string(parsed)
            # Already formatted ("Month D, YYYY")
            if "," in value and any(ch.isalpha() for ch in value):
                return value

    except Exception as e:
        logger.warning(f"Error processing date field {field}: {e}")

    return DATE_UNAVAILABLE


def is_date_field(name: str) -> bool:
    return name in DATE_FIELD_NAMES
