# models/media.py

from typing import Optional

from .base import CamelModel


class MediaUpdate(CamelModel):
    """Metadata edits only; the stored file itself is immutable."""

    title: Optional[str] = None
    category: Optional[str] = None
