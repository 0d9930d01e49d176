from typing import Optional
from pydantic import Field

from hotel.models.enums import PaymentMethod, PaymentStatus
from hotel.schemas.common import HotelModel, PatchModel, Timestamped


class PaymentCreate(HotelModel):
    booking_id: str = Field(min_length=1)
    amount: float = Field(ge=0)
    status: PaymentStatus = PaymentStatus.PENDING
    payment_method: PaymentMethod = PaymentMethod.RAZORPAY
    transaction_id: Optional[str] = None


class Payment(Timestamped, PaymentCreate):
    pass


class PaymentUpdate(PatchModel):
    amount: Optional[float] = None
    status: Optional[PaymentStatus] = None
    payment_method: Optional[PaymentMethod] = None
    transaction_id: Optional[str] = None


class PaymentOutcome(HotelModel):
    approved: bool
    transaction_id: Optional[str] = None
    reason: Optional[str] = None
