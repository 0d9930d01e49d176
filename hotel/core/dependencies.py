from fastapi import Depends, HTTPException, Request

from hotel.core.auth_utils import decode_token
from hotel.schemas.user import User
from hotel.services.booking_flow import BookingFlow
from hotel.services.store import HotelStore


def get_store(request: Request) -> HotelStore:
    return request.app.state.store


def get_booking_flow(request: Request) -> BookingFlow:
    return request.app.state.booking_flow


def get_current_admin(token: str, store: HotelStore = Depends(get_store)) -> User:
    """Resolve the admin session behind a token.

    Tokens stop working after logout because the session slot is cleared.
    """
    payload = decode_token(token)

    if payload["role"] != "admin":
        raise HTTPException(status_code=403, detail="Admins only")

    user = store.auth.current_user
    if user is None or user.email != payload["sub"]:
        raise HTTPException(status_code=401, detail="Session expired, please log in again")

    return user


def require_confirmation(confirm: bool = False):
    if not confirm:
        raise HTTPException(status_code=400, detail="Confirmation required: pass confirm=true")
