from datetime import date
from typing import Optional
from pydantic import EmailStr, Field, model_validator

from hotel.models.enums import BookingStatus, BookingType, PaymentStatus
from hotel.schemas.common import HotelModel, PatchModel, Timestamped


class BookingBase(HotelModel):
    customer_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    check_in: date
    check_out: date
    room_id: Optional[str] = None
    hall_id: Optional[str] = None
    type: BookingType
    guests: int = Field(ge=1)
    total_amount: float = Field(ge=0)
    status: BookingStatus = BookingStatus.PENDING
    payment_id: Optional[str] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING

    @model_validator(mode="after")
    def check_reference_and_dates(self):
        if self.type == BookingType.ROOM and (not self.room_id or self.hall_id):
            raise ValueError("Room bookings must reference a roomId and no hallId")
        if self.type == BookingType.HALL and (not self.hall_id or self.room_id):
            raise ValueError("Hall bookings must reference a hallId and no roomId")
        if self.check_out < self.check_in:
            raise ValueError("checkOut cannot be before checkIn")
        return self

    @property
    def item_id(self) -> str:
        return self.room_id if self.type == BookingType.ROOM else self.hall_id


class BookingCreate(BookingBase):
    pass


class Booking(Timestamped, BookingBase):
    pass


class BookingUpdate(PatchModel):
    customer_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: Optional[int] = None
    total_amount: Optional[float] = None
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None


class CheckoutRequest(HotelModel):
    """What a guest fills in before paying."""

    customer_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    type: BookingType
    item_id: str = Field(min_length=1)
    check_in: date
    check_out: Optional[date] = None  # hall events are single-day
    guests: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_dates(self):
        if self.check_out is not None and self.check_out < self.check_in:
            raise ValueError("checkOut cannot be before checkIn")
        return self
