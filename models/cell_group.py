from typing import List, Optional

from pydantic import BaseModel

from .base import CamelModel


class Coordinates(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None


class CellGroupBase(CamelModel):
    leader_contact: Optional[str] = None
    meeting_day: Optional[str] = None
    meeting_time: Optional[str] = None
    description: Optional[str] = None
    capacity: Optional[str] = None
    tags: Optional[List[str]] = None
    coordinates: Optional[Coordinates] = None

    image: Optional[str] = None
    image_url: Optional[str] = None
    leader_image: Optional[str] = None
    leader_image_url: Optional[str] = None


class CellGroupCreate(CellGroupBase):
    name: str
    leader: str
    location: str
    zone_id: Optional[str] = None


class CellGroupUpdate(CellGroupBase):
    name: Optional[str] = None
    leader: Optional[str] = None
    location: Optional[str] = None
    zone_id: Optional[str] = None
