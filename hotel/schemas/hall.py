from typing import List, Optional
from pydantic import Field

from hotel.schemas.common import HotelModel, PatchModel, Timestamped


class HallBase(HotelModel):
    name: str = Field(min_length=1)
    capacity: int = Field(ge=0)

    # Flat price per event
    price: int = Field(ge=0)

    amenities: List[str] = []
    images: List[str] = []
    available: bool = True
    description: str = ""


class HallCreate(HallBase):
    pass


class PartyHall(Timestamped, HallBase):
    pass


class HallUpdate(PatchModel):
    name: Optional[str] = None
    capacity: Optional[int] = None
    price: Optional[int] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    available: Optional[bool] = None
    description: Optional[str] = None
