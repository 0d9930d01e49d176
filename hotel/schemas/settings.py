from typing import Optional
from pydantic import EmailStr, Field

from hotel.schemas.common import HotelModel, PatchModel


class HotelSettings(HotelModel):
    hotel_name: str = Field(min_length=1)
    address: str
    phone: str
    email: EmailStr
    description: str
    check_in_time: str  # "HH:MM"
    check_out_time: str
    cancellation_policy: str
    tax_rate: float = Field(ge=0, le=100)  # percentage


class SettingsUpdate(PatchModel):
    hotel_name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    description: Optional[str] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    cancellation_policy: Optional[str] = None
    tax_rate: Optional[float] = None
