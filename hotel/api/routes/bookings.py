from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from hotel.core.dependencies import get_booking_flow, get_current_admin, get_store, require_confirmation
from hotel.core.logging_config import get_logger
from hotel.schemas.booking import Booking, BookingUpdate, CheckoutRequest
from hotel.schemas.user import User
from hotel.services.booking_flow import BookingFlow, CheckoutResult
from hotel.services.store import HotelStore
from hotel.services.views import filter_bookings

router = APIRouter(prefix="/bookings", tags=["Bookings"])
logger = get_logger()


# ---------------------------------------------------------------------
# QUOTE (price preview before paying)
# ---------------------------------------------------------------------
@router.post("/quote")
def quote_booking(data: CheckoutRequest, flow: BookingFlow = Depends(get_booking_flow)):
    return {"total_amount": flow.quote(data)}


# ---------------------------------------------------------------------
# CHECKOUT (public): price, pay, record
# ---------------------------------------------------------------------
@router.post("/checkout", response_model=CheckoutResult)
async def checkout(data: CheckoutRequest, flow: BookingFlow = Depends(get_booking_flow)):
    result = await flow.checkout(data)

    logger.bind(log_type="booking").info(
        f"Checkout finished | booking={result.booking.id} | approved={result.outcome.approved}"
    )
    return result


# ---------------------------------------------------------------------
# ADMIN: LIST BOOKINGS
# ---------------------------------------------------------------------
@router.get("/", response_model=list[Booking])
def list_bookings(
    status: Optional[str] = None,
    type: Optional[str] = None,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    return filter_bookings(store.list_bookings(), status=status, booking_type=type)


@router.get("/{booking_id}", response_model=Booking)
def get_booking(
    booking_id: str,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    booking = store.get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


# ---------------------------------------------------------------------
# ADMIN: STATUS / DETAIL CHANGES
# ---------------------------------------------------------------------
@router.put("/{booking_id}", response_model=Booking)
def update_booking(
    booking_id: str,
    data: BookingUpdate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    booking = store.update_booking(admin, booking_id, data.to_patch())
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


# ---------------------------------------------------------------------
# ADMIN: DELETE (removes its payments too)
# ---------------------------------------------------------------------
@router.delete("/{booking_id}", dependencies=[Depends(require_confirmation)])
def delete_booking(
    booking_id: str,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    if not store.delete_booking(admin, booking_id):
        raise HTTPException(status_code=404, detail="Booking not found")

    return {"message": "Booking deleted successfully"}
