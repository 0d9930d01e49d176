from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from hotel.core.dependencies import get_current_admin, get_store, require_confirmation
from hotel.schemas.room import Room, RoomCreate, RoomUpdate
from hotel.schemas.user import User
from hotel.services.store import HotelStore
from hotel.services.views import filter_rooms

router = APIRouter(prefix="/rooms", tags=["Rooms"])


# =====================================================================
# LIST ROOMS (public, with search / type / price band filters)
# =====================================================================
@router.get("/", response_model=list[Room])
def list_rooms(
    search: Optional[str] = None,
    type: Optional[str] = None,
    price: Optional[str] = None,
    store: HotelStore = Depends(get_store),
):
    if price not in (None, "all", "low", "medium", "high"):
        raise HTTPException(status_code=400, detail="price must be low, medium or high")

    return filter_rooms(store.list_rooms(), search=search, room_type=type, price_band=price)


# =====================================================================
# ROOM DETAILS
# =====================================================================
@router.get("/{room_id}", response_model=Room)
def get_room(room_id: str, store: HotelStore = Depends(get_store)):
    room = store.get_room(room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


# =====================================================================
# CREATE ROOM (Admin Only)
# =====================================================================
@router.post("/", response_model=Room)
def create_room(
    data: RoomCreate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    return store.add_room(admin, data)


# =====================================================================
# EDIT ROOM (Admin Only)
# =====================================================================
@router.put("/{room_id}", response_model=Room)
def edit_room(
    room_id: str,
    data: RoomUpdate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    room = store.update_room(admin, room_id, data.to_patch())
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


# =====================================================================
# DELETE ROOM (Admin Only, cancels pending bookings)
# =====================================================================
@router.delete("/{room_id}", dependencies=[Depends(require_confirmation)])
def delete_room(
    room_id: str,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    if not store.delete_room(admin, room_id):
        raise HTTPException(status_code=404, detail="Room not found")

    return {"message": "Room deleted successfully"}
