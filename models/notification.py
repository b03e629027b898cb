# models/notification.py

from typing import Any, Dict, Optional

from pydantic import BaseModel


class Recipient(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class NotificationRequest(BaseModel):
    type: Optional[str] = None
    recipient: Optional[Recipient] = None
    data: Dict[str, Any] = {}
