from typing import Optional

from pydantic import BaseModel

from .base import CamelModel


class SocialMedia(BaseModel):
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None


class LeaderContact(CamelModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    social_media: Optional[SocialMedia] = None


class LeaderCreate(CamelModel):
    name: str
    title: str
    position: Optional[str] = None
    bio: Optional[str] = None
    order: int = 999
    contact: Optional[LeaderContact] = None
    image: Optional[str] = None
    image_url: Optional[str] = None


class LeaderUpdate(CamelModel):
    name: Optional[str] = None
    title: Optional[str] = None
    position: Optional[str] = None
    bio: Optional[str] = None
    order: Optional[int] = None
    contact: Optional[LeaderContact] = None
    image: Optional[str] = None
    image_url: Optional[str] = None
