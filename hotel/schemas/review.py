from datetime import date
from typing import Optional
from pydantic import Field

from hotel.schemas.common import HotelModel, PatchModel, Timestamped


class ReviewCreate(HotelModel):
    customer_name: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    comment: str = ""
    image: Optional[str] = None
    room_type: Optional[str] = None  # free text, e.g. "Crystal Hall"


class Review(Timestamped, ReviewCreate):
    date: date
    approved: bool = False


class ReviewUpdate(PatchModel):
    customer_name: Optional[str] = None
    rating: Optional[int] = None
    comment: Optional[str] = None
    image: Optional[str] = None
    room_type: Optional[str] = None
    approved: Optional[bool] = None


class ReviewListOut(HotelModel):
    reviews: list[Review]
    average_rating: float
    total: int
