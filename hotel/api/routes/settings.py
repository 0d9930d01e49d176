from fastapi import APIRouter, Depends

from hotel.core.dependencies import get_current_admin, get_store
from hotel.schemas.settings import HotelSettings, SettingsUpdate
from hotel.schemas.user import User
from hotel.services.store import HotelStore

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("/", response_model=HotelSettings)
def read_settings(store: HotelStore = Depends(get_store)):
    return store.get_settings()


@router.put("/", response_model=HotelSettings)
def update_settings(
    data: SettingsUpdate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    return store.update_settings(admin, data.to_patch())
