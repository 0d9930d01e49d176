from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from hotel.core.dependencies import get_current_admin, get_store
from hotel.schemas.payment import Payment, PaymentCreate, PaymentUpdate
from hotel.schemas.user import User
from hotel.services.store import HotelStore
from hotel.services.views import filter_payments

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("/", response_model=list[Payment])
def list_payments(
    status: Optional[str] = None,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    return filter_payments(store.list_payments(), status=status)


@router.post("/", response_model=Payment)
def record_payment(
    data: PaymentCreate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    # Cash/card payments taken at the desk
    if not store.get_booking(data.booking_id):
        raise HTTPException(status_code=404, detail="Booking not found")

    return store.add_payment(admin, data)


@router.put("/{payment_id}", response_model=Payment)
def update_payment(
    payment_id: str,
    data: PaymentUpdate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    payment = store.update_payment(admin, payment_id, data.to_patch())
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment
