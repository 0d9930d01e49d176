from enum import Enum


class RoomType(str, Enum):
    AC = "AC"
    NON_AC = "Non-AC"


class BookingType(str, Enum):
    ROOM = "room"
    HALL = "hall"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(str, Enum):
    RAZORPAY = "razorpay"
    CASH = "cash"
    CARD = "card"


class UserRole(str, Enum):
    ADMIN = "admin"


# Bookings that count towards revenue
REVENUE_STATUSES = (BookingStatus.CONFIRMED, BookingStatus.COMPLETED)
