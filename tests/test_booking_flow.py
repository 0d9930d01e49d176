"""
Checkout flow: pricing, payment outcomes, capacity, races with deletion
"""
import asyncio
from datetime import date

import pytest
from pydantic import ValidationError as SchemaError

from hotel.core.errors import EntityNotFoundError, ValidationError
from hotel.models.enums import BookingStatus, PaymentStatus
from hotel.schemas.booking import CheckoutRequest
from hotel.schemas.payment import PaymentOutcome
from hotel.services.booking_flow import BookingFlow
from hotel.services.payment_gateway import PaymentGateway, SimulatedPaymentGateway
from hotel.services.views import booking_stats, payment_stats


def make_request(**overrides):
    data = {
        "customerName": "Priya Sharma",
        "email": "priya.sharma@gmail.com",
        "phone": "+91 98765 43210",
        "type": "room",
        "itemId": "2",
        "checkIn": "2024-03-01",
        "checkOut": "2024-03-04",
        "guests": 2,
    }
    data.update(overrides)
    return CheckoutRequest.model_validate(data)


class TestApprovedCheckout:
    def test_room_checkout_confirms_and_records_payment(self, store, flow):
        result = asyncio.run(flow.checkout(make_request()))

        booking = result.booking
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.payment_status == PaymentStatus.COMPLETED
        assert booking.total_amount == 7500
        assert booking.room_id == "2"
        assert booking.payment_id.startswith("pay_")

        assert result.payment is not None
        assert result.payment.transaction_id == booking.payment_id
        assert result.payment.amount == 7500
        assert store.list_payments() == [result.payment]

    def test_hall_checkout_is_flat_and_single_day(self, flow):
        request = make_request(type="hall", itemId="1", checkOut=None, guests=180)
        result = asyncio.run(flow.checkout(request))

        assert result.booking.total_amount == 25000
        assert result.booking.hall_id == "1"
        assert result.booking.check_out == date(2024, 3, 1)

    def test_quote_matches_checkout(self, flow):
        assert flow.quote(make_request(checkOut="2024-03-01")) == 2500


class TestDeclinedCheckout:
    def test_declined_payment_leaves_booking_pending_failed(self, store):
        flow = BookingFlow(store, SimulatedPaymentGateway(delay=0, decline_all=True))
        result = asyncio.run(flow.checkout(make_request()))

        assert result.outcome.approved is False
        assert result.booking.status == BookingStatus.PENDING
        assert result.booking.payment_status == PaymentStatus.FAILED
        assert result.payment.status == PaymentStatus.FAILED

    def test_decline_over_amount(self, store):
        flow = BookingFlow(store, SimulatedPaymentGateway(delay=0, decline_over=20000))
        small = asyncio.run(flow.checkout(make_request()))
        large = asyncio.run(flow.checkout(make_request(type="hall", itemId="1", checkOut=None)))

        assert small.outcome.approved is True
        assert large.outcome.approved is False

    def test_gateway_error_is_a_failed_payment(self, store):
        flow = BookingFlow(store, SimulatedPaymentGateway(delay=0, fail=True))
        result = asyncio.run(flow.checkout(make_request()))

        assert result.booking.payment_status == PaymentStatus.FAILED
        assert result.booking.payment_id is None
        assert store.list_payments() == []

    def test_timeout_is_a_failed_payment(self, store):
        flow = BookingFlow(store, SimulatedPaymentGateway(delay=5), timeout=0.01)
        result = asyncio.run(flow.checkout(make_request()))

        assert result.outcome.reason == "timeout"
        assert result.booking.status == BookingStatus.PENDING
        assert result.booking.payment_status == PaymentStatus.FAILED
        assert result.payment.transaction_id.startswith("timeout_")


class TestRequestChecks:
    def test_unknown_item(self, flow, store):
        with pytest.raises(EntityNotFoundError):
            asyncio.run(flow.checkout(make_request(itemId="404")))
        assert store.list_bookings() == []

    def test_guests_over_capacity(self, flow, store):
        with pytest.raises(ValidationError):
            asyncio.run(flow.checkout(make_request(guests=3)))
        assert store.list_bookings() == []

    def test_unavailable_room(self, flow, store, admin):
        store.update_room(admin, "2", {"available": False})
        with pytest.raises(ValidationError):
            asyncio.run(flow.checkout(make_request()))

    def test_checkout_before_checkin_rejected_by_schema(self):
        with pytest.raises(SchemaError):
            make_request(checkIn="2024-03-04", checkOut="2024-03-01")


class DeletingGateway(PaymentGateway):
    """Deletes the room while the payment is in flight"""

    def __init__(self, store, admin, room_id):
        self.store = store
        self.admin = admin
        self.room_id = room_id

    async def authorize(self, amount):
        self.store.delete_room(self.admin, self.room_id)
        return PaymentOutcome(approved=True, transaction_id="pay_race")


def test_room_deleted_during_payment_records_cancelled_booking(store, admin):
    flow = BookingFlow(store, DeletingGateway(store, admin, "2"))
    result = asyncio.run(flow.checkout(make_request()))

    assert result.booking.status == BookingStatus.CANCELLED
    assert result.booking.payment_status == PaymentStatus.REFUNDED
    assert result.payment.status == PaymentStatus.REFUNDED
    assert result.payment.transaction_id == "pay_race"
    assert booking_stats(store)["revenue"] == payment_stats(store, today=date(2024, 3, 1))["revenue"] == 0
