"""
Pytest configuration and shared fixtures
"""
import os
import tempfile
from datetime import datetime, timedelta, timezone

# Must be set before hotel modules read their configuration
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="hotel-logs-"))
os.environ.setdefault("HOTEL_STORAGE_BACKEND", "memory")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from hotel.core.security import build_admin_credentials
from hotel.db.slots import MemorySlotStorage
from hotel.main import create_app
from hotel.services.auth import AuthGate
from hotel.services.booking_flow import BookingFlow
from hotel.services.payment_gateway import SimulatedPaymentGateway
from hotel.services.store import HotelStore

ADMIN_EMAIL = "admin@hotelinfinity.com"
ADMIN_PASSWORD = "admin123"


class TickingClock:
    """Deterministic clock: every call advances one second."""

    def __init__(self, start=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture(scope="session")
def credentials():
    """Hashing is slow; hash the admin password once per run"""
    return build_admin_credentials(ADMIN_EMAIL, ADMIN_PASSWORD, "Admin User")


@pytest.fixture
def storage():
    return MemorySlotStorage()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(storage, credentials, clock):
    return HotelStore(storage, auth=AuthGate(storage, credentials), clock=clock)


@pytest.fixture
def admin(store):
    """Log the admin in and return the session user"""
    assert store.auth.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    return store.auth.current_user


@pytest.fixture
def gateway():
    return SimulatedPaymentGateway(delay=0)


@pytest.fixture
def flow(store, gateway):
    return BookingFlow(store, gateway, timeout=1)


@pytest.fixture
def client(store, flow):
    app = create_app(store=store, booking_flow=flow)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client):
    response = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["access_token"]


def room_booking(room_id="1", **overrides):
    data = {
        "customerName": "Priya Sharma",
        "email": "priya.sharma@gmail.com",
        "phone": "+91 98765 43210",
        "checkIn": "2024-03-01",
        "checkOut": "2024-03-04",
        "roomId": room_id,
        "type": "room",
        "guests": 2,
        "totalAmount": 10500,
        "status": "pending",
        "paymentStatus": "pending",
    }
    data.update(overrides)
    return data


def hall_booking(hall_id="1", **overrides):
    data = {
        "customerName": "Rahul Verma",
        "email": "rahul.verma@gmail.com",
        "phone": "+91 91234 56789",
        "checkIn": "2024-04-10",
        "checkOut": "2024-04-10",
        "hallId": hall_id,
        "type": "hall",
        "guests": 150,
        "totalAmount": 25000,
        "status": "pending",
        "paymentStatus": "pending",
    }
    data.update(overrides)
    return data
