from typing import Optional

from .base import CamelModel


class ZoneElder(CamelModel):
    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    contact: Optional[str] = None
    phone: Optional[str] = None
    image_url: Optional[str] = None


class ZoneCreate(CamelModel):
    name: str
    location: str
    description: Optional[str] = None
    elder: Optional[ZoneElder] = None
    icon_name: Optional[str] = None
    image: Optional[str] = None
    cover_image: Optional[str] = None
    cover_image_url: Optional[str] = None


class ZoneUpdate(CamelModel):
    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    elder: Optional[ZoneElder] = None
    icon_name: Optional[str] = None
    image: Optional[str] = None
    cover_image: Optional[str] = None
    cover_image_url: Optional[str] = None
