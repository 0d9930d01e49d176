from typing import List, Optional
from pydantic import Field

from hotel.models.enums import RoomType
from hotel.schemas.common import HotelModel, PatchModel, Timestamped


class RoomBase(HotelModel):
    name: str = Field(min_length=1)
    type: RoomType
    price: int = Field(ge=0)  # per night
    capacity: int = Field(ge=0)
    amenities: List[str] = []
    images: List[str] = []
    available: bool = True
    description: str = ""


class RoomCreate(RoomBase):
    pass


class Room(Timestamped, RoomBase):
    pass


class RoomUpdate(PatchModel):
    name: Optional[str] = None
    type: Optional[RoomType] = None
    price: Optional[int] = None
    capacity: Optional[int] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    available: Optional[bool] = None
    description: Optional[str] = None
