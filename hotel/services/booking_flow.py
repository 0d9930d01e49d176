"""Guest checkout: price the stay, authorize payment, record the booking."""
import asyncio
import uuid
from typing import Optional

from pydantic import BaseModel

from hotel.core.config import PAYMENT_TIMEOUT_SECONDS
from hotel.core.errors import EntityNotFoundError, PaymentError, ValidationError
from hotel.core.logging_config import get_logger
from hotel.models.enums import BookingStatus, BookingType, PaymentStatus
from hotel.schemas.booking import Booking, CheckoutRequest
from hotel.schemas.payment import Payment, PaymentOutcome
from hotel.services.payment_gateway import PaymentGateway
from hotel.services.store import HotelStore
from hotel.utils.pricing import calculate_booking_total

logger = get_logger()


class CheckoutResult(BaseModel):
    booking: Booking
    payment: Optional[Payment] = None
    outcome: PaymentOutcome


class BookingFlow:
    def __init__(self, store: HotelStore, gateway: PaymentGateway, timeout: float = PAYMENT_TIMEOUT_SECONDS):
        self.store = store
        self.gateway = gateway
        self.timeout = timeout

    def _find_item(self, booking_type: BookingType, item_id: str):
        if booking_type == BookingType.ROOM:
            return self.store.get_room(item_id)
        return self.store.get_hall(item_id)

    def quote(self, request: CheckoutRequest) -> float:
        """Validate the request against its room/hall and return the total."""
        item = self._find_item(request.type, request.item_id)
        if item is None:
            raise EntityNotFoundError(request.type.value.capitalize(), request.item_id)
        if not item.available:
            raise ValidationError(f"{item.name} is not available for booking")
        if request.guests > item.capacity:
            raise ValidationError(f"{item.name} holds at most {item.capacity} guests")

        return calculate_booking_total(item.price, request.type, request.check_in, request.check_out)

    async def _authorize(self, amount: float) -> PaymentOutcome:
        try:
            return await asyncio.wait_for(self.gateway.authorize(amount), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.bind(log_type="payment").warning(f"Payment timed out after {self.timeout}s | amount={amount}")
            return PaymentOutcome(approved=False, transaction_id=f"timeout_{uuid.uuid4().hex[:12]}", reason="timeout")
        except PaymentError as e:
            logger.bind(log_type="payment").error(f"Payment gateway error | amount={amount} | {e.message}")
            return PaymentOutcome(approved=False, reason=e.message)

    async def checkout(self, request: CheckoutRequest) -> CheckoutResult:
        total = self.quote(request)

        outcome = await self._authorize(total)

        if outcome.approved:
            status, payment_status = BookingStatus.CONFIRMED, PaymentStatus.COMPLETED
        else:
            status, payment_status = BookingStatus.PENDING, PaymentStatus.FAILED

        # The room/hall may have been deleted while the payment was in flight
        if self._find_item(request.type, request.item_id) is None:
            logger.bind(log_type="booking").warning(
                f"{request.type.value} {request.item_id} removed during payment, booking recorded as cancelled"
            )
            status = BookingStatus.CANCELLED
            if outcome.approved:
                # Charged for an item that no longer exists
                payment_status = PaymentStatus.REFUNDED

        item_key = "room_id" if request.type == BookingType.ROOM else "hall_id"
        booking = self.store.add_booking({
            "customer_name": request.customer_name,
            "email": request.email,
            "phone": request.phone,
            "check_in": request.check_in,
            "check_out": request.check_out or request.check_in,
            item_key: request.item_id,
            "type": request.type,
            "guests": request.guests,
            "total_amount": total,
            "status": status,
            "payment_status": payment_status,
            "payment_id": outcome.transaction_id,
        })

        payments = self.store.payments_for_booking(booking.id)
        return CheckoutResult(booking=booking, payment=payments[0] if payments else None, outcome=outcome)
