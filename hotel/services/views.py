"""Read-time projections over the store. Nothing here is cached or persisted."""
from datetime import date
from typing import Iterable, Optional

from hotel.models.enums import (
    BookingStatus,
    BookingType,
    PaymentStatus,
    REVENUE_STATUSES,
    RoomType,
)
from hotel.schemas.booking import Booking
from hotel.schemas.hall import PartyHall
from hotel.schemas.payment import Payment
from hotel.schemas.review import Review
from hotel.schemas.room import Room

# Catalog bands: (lower exclusive, upper inclusive)
ROOM_PRICE_BANDS = {"low": (None, 2000), "medium": (2000, 3000), "high": (3000, None)}
HALL_PRICE_BANDS = {"low": (None, 15000), "medium": (15000, 20000), "high": (20000, None)}
HALL_CAPACITY_BANDS = {"small": (None, 100), "medium": (100, 150), "large": (150, None)}


def _in_band(value, bands: dict, band: Optional[str]) -> bool:
    if not band or band == "all":
        return True
    low, high = bands[band]
    if low is not None and value <= low:
        return False
    if high is not None and value > high:
        return False
    return True


def _matches_search(item, search: Optional[str]) -> bool:
    if not search:
        return True
    term = search.lower()
    return term in item.name.lower() or term in item.description.lower()


# =====================================================================
# REVIEWS
# =====================================================================
def public_reviews(store) -> list[Review]:
    return [r for r in store.all_reviews() if r.approved]


def admin_reviews(store, status: str = "all") -> list[Review]:
    reviews = store.all_reviews()
    if status == "approved":
        return [r for r in reviews if r.approved]
    if status == "pending":
        return [r for r in reviews if not r.approved]
    return reviews


def average_rating(reviews: Iterable[Review]) -> float:
    """Mean rating over approved reviews, 0.0 when there are none."""
    ratings = [r.rating for r in reviews if r.approved]
    if not ratings:
        return 0.0
    return round(sum(ratings) / len(ratings), 1)


def rating_distribution(reviews: Iterable[Review]) -> dict[int, int]:
    counts = {star: 0 for star in range(5, 0, -1)}
    for r in reviews:
        counts[r.rating] += 1
    return counts


def review_stats(store) -> dict:
    reviews = store.all_reviews()
    approved = [r for r in reviews if r.approved]
    return {
        "total": len(reviews),
        "approved": len(approved),
        "pending": len(reviews) - len(approved),
        "average_rating": average_rating(approved),
        "rating_distribution": rating_distribution(approved),
    }


# =====================================================================
# CATALOG
# =====================================================================
def filter_rooms(
    rooms: Iterable[Room],
    search: Optional[str] = None,
    room_type: Optional[str] = None,
    price_band: Optional[str] = None,
) -> list[Room]:
    return [
        room for room in rooms
        if _matches_search(room, search)
        and (not room_type or room_type == "all" or room.type.value == room_type)
        and _in_band(room.price, ROOM_PRICE_BANDS, price_band)
    ]


def filter_halls(
    halls: Iterable[PartyHall],
    search: Optional[str] = None,
    capacity_band: Optional[str] = None,
    price_band: Optional[str] = None,
) -> list[PartyHall]:
    return [
        hall for hall in halls
        if _matches_search(hall, search)
        and _in_band(hall.capacity, HALL_CAPACITY_BANDS, capacity_band)
        and _in_band(hall.price, HALL_PRICE_BANDS, price_band)
    ]


# =====================================================================
# BOOKINGS & PAYMENTS
# =====================================================================
def filter_bookings(bookings: Iterable[Booking], status: Optional[str] = None, booking_type: Optional[str] = None):
    return [
        b for b in bookings
        if (not status or status == "all" or b.status.value == status)
        and (not booking_type or booking_type == "all" or b.type.value == booking_type)
    ]


def filter_payments(payments: Iterable[Payment], status: Optional[str] = None):
    return [p for p in payments if not status or status == "all" or p.status.value == status]


def total_revenue(bookings: Iterable[Booking]) -> float:
    return sum(b.total_amount for b in bookings if b.status in REVENUE_STATUSES)


def booking_status_counts(bookings: Iterable[Booking]) -> dict[str, int]:
    counts = {s.value: 0 for s in BookingStatus}
    for b in bookings:
        counts[b.status.value] += 1
    return counts


def booking_stats(store) -> dict:
    bookings = store.list_bookings()
    return {
        "total": len(bookings),
        "revenue": total_revenue(bookings),
        "by_status": booking_status_counts(bookings),
    }


def payment_stats(store, today: Optional[date] = None) -> dict:
    today = today or store.clock().date()
    payments = store.list_payments()
    completed = [p for p in payments if p.status == PaymentStatus.COMPLETED]
    this_month = [
        p for p in completed
        if p.created_at.year == today.year and p.created_at.month == today.month
    ]
    return {
        "total": len(payments),
        "revenue": sum(p.amount for p in completed),
        "monthly_revenue": sum(p.amount for p in this_month),
        "pending": sum(1 for p in payments if p.status == PaymentStatus.PENDING),
        "completed": len(completed),
        "failed": sum(1 for p in payments if p.status == PaymentStatus.FAILED),
        "refunded": sum(1 for p in payments if p.status == PaymentStatus.REFUNDED),
    }


def item_name(store, booking: Booking) -> str:
    if booking.type == BookingType.ROOM:
        room = store.get_room(booking.room_id)
        return room.name if room else "Unknown Room"
    hall = store.get_hall(booking.hall_id)
    return hall.name if hall else "Unknown Hall"


# =====================================================================
# DASHBOARD
# =====================================================================
def dashboard_stats(store, recent: int = 5) -> dict:
    rooms = store.list_rooms()
    halls = store.list_halls()
    bookings = store.list_bookings()
    approved = public_reviews(store)
    by_status = booking_status_counts(bookings)

    return {
        "total_rooms": len(rooms),
        "available_rooms": sum(1 for r in rooms if r.available),
        "total_halls": len(halls),
        "available_halls": sum(1 for h in halls if h.available),
        "total_bookings": len(bookings),
        "confirmed_bookings": by_status[BookingStatus.CONFIRMED.value],
        "total_revenue": total_revenue(bookings),
        "average_rating": average_rating(approved),
        "room_types": {
            t.value: sum(1 for r in rooms if r.type == t) for t in RoomType
        },
        "booking_status": by_status,
        "rating_distribution": rating_distribution(approved),
        "recent_bookings": [
            {
                "id": b.id,
                "customer_name": b.customer_name,
                "item_name": item_name(store, b),
                "total_amount": b.total_amount,
                "status": b.status.value,
            }
            for b in bookings[:recent]
        ],
    }
