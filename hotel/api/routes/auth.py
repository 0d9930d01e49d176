from fastapi import APIRouter, Depends, HTTPException

from hotel.core.dependencies import get_current_admin, get_store
from hotel.core.jwt import create_access_token
from hotel.schemas.user import AdminLogin, AdminRegister, TokenOut, User
from hotel.services.store import HotelStore

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue_token(user: User) -> TokenOut:
    token = create_access_token({"sub": user.email, "role": user.role.value})
    return TokenOut(access_token=token, user=user)


# =====================================================================
#                           ADMIN LOGIN
# =====================================================================
@router.post("/login", response_model=TokenOut)
def admin_login(data: AdminLogin, store: HotelStore = Depends(get_store)):
    if not store.auth.login(data.email, data.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return _issue_token(store.auth.current_user)


# =====================================================================
#                 ADMIN REGISTER (alias of login)
# =====================================================================
@router.post("/register", response_model=TokenOut)
def admin_register(data: AdminRegister, store: HotelStore = Depends(get_store)):
    if not store.auth.register(data.email, data.password, data.name):
        raise HTTPException(status_code=400, detail="Registration is closed")

    return _issue_token(store.auth.current_user)


# =====================================================================
#                           LOGOUT
# =====================================================================
@router.post("/logout")
def admin_logout(
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    store.auth.logout()
    return {"message": "Logged out"}


# =====================================================================
#                           CURRENT SESSION
# =====================================================================
@router.get("/me", response_model=User)
def current_admin(admin: User = Depends(get_current_admin)):
    return admin
