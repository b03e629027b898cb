# models/join_request.py

from typing import Any, Optional

from pydantic import field_validator

from .base import CamelModel


class JoinRequestCreate(CamelModel):
    cell_group_id: str
    name: str
    email: str
    phone: str
    whatsapp: Optional[str] = None
    message: Optional[str] = None

    @field_validator("cell_group_id", mode="before")
    def cell_group_to_str(cls, v):
        return str(v) if v is not None else v


class JoinRequestStatusUpdate(CamelModel):
    status: Any = None
