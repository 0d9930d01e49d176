import math
from datetime import date
from typing import Optional

from hotel.models.enums import BookingType


def count_nights(check_in: date, check_out: Optional[date]) -> int:
    """Nights between two dates, never less than one."""
    if check_out is None:
        return 1
    nights = math.ceil((check_out - check_in).days)
    return max(1, nights)


def calculate_booking_total(price, booking_type: BookingType, check_in: date, check_out: Optional[date] = None):
    # Halls are a flat price per event
    if booking_type == BookingType.HALL:
        return price

    return price * count_nights(check_in, check_out)
