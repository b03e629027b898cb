from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from core.date_utils import parse_date


class CamelModel(BaseModel):
    """
    Snake_case in Python, camelCase on the wire and in the database
    (fullName, memberSince, startDate, ...).
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def to_row(self, *, exclude_unset: bool = False) -> dict:
        """Dump with camelCase keys, ready for Supabase."""
        return self.model_dump(by_alias=True, exclude_unset=exclude_unset)


def lenient_datetime(v: Any) -> Optional[datetime]:
    """Shared `mode="before"` hook: accept ISO and human date strings."""
    if v is None or v == "":
        return None
    parsed = parse_date(v)
    if parsed is None:
        raise ValueError("must be a valid date")
    return parsed
