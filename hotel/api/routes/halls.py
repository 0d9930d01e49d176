from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from hotel.core.dependencies import get_current_admin, get_store, require_confirmation
from hotel.schemas.hall import HallCreate, HallUpdate, PartyHall
from hotel.schemas.user import User
from hotel.services.store import HotelStore
from hotel.services.views import filter_halls

router = APIRouter(prefix="/halls", tags=["Party Halls"])


# =====================================================================
# LIST HALLS (public)
# =====================================================================
@router.get("/", response_model=list[PartyHall])
def list_halls(
    search: Optional[str] = None,
    capacity: Optional[str] = None,
    price: Optional[str] = None,
    store: HotelStore = Depends(get_store),
):
    if capacity not in (None, "all", "small", "medium", "large"):
        raise HTTPException(status_code=400, detail="capacity must be small, medium or large")
    if price not in (None, "all", "low", "medium", "high"):
        raise HTTPException(status_code=400, detail="price must be low, medium or high")

    return filter_halls(store.list_halls(), search=search, capacity_band=capacity, price_band=price)


# =====================================================================
# HALL DETAILS
# =====================================================================
@router.get("/{hall_id}", response_model=PartyHall)
def get_hall(hall_id: str, store: HotelStore = Depends(get_store)):
    hall = store.get_hall(hall_id)
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")
    return hall


# =====================================================================
# CREATE HALL (Admin Only)
# =====================================================================
@router.post("/", response_model=PartyHall)
def create_hall(
    data: HallCreate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    return store.add_hall(admin, data)


# =====================================================================
# EDIT HALL (Admin Only)
# =====================================================================
@router.put("/{hall_id}", response_model=PartyHall)
def edit_hall(
    hall_id: str,
    data: HallUpdate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    hall = store.update_hall(admin, hall_id, data.to_patch())
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")
    return hall


# =====================================================================
# DELETE HALL (Admin Only, cancels pending bookings)
# =====================================================================
@router.delete("/{hall_id}", dependencies=[Depends(require_confirmation)])
def delete_hall(
    hall_id: str,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    if not store.delete_hall(admin, hall_id):
        raise HTTPException(status_code=404, detail="Hall not found")

    return {"message": "Hall deleted successfully"}
