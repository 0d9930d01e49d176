from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from hotel.core.dependencies import get_current_admin, get_store
from hotel.core.logging_config import get_logger
from hotel.schemas.user import User
from hotel.services.store import HotelStore
from hotel.services import views

router = APIRouter(prefix="/admin-analytics", tags=["Admin Analytics"])
logger = get_logger()


# =====================================================================
# 1. DASHBOARD OVERVIEW
# =====================================================================
@router.get("/dashboard")
def dashboard(admin: User = Depends(get_current_admin), store: HotelStore = Depends(get_store)):
    stats = views.dashboard_stats(store)

    logger.bind(log_type="admin").info(f"Admin checked dashboard | revenue {stats['total_revenue']}")

    return stats


# =====================================================================
# 2. BOOKING STATS
# =====================================================================
@router.get("/bookings")
def booking_stats(admin: User = Depends(get_current_admin), store: HotelStore = Depends(get_store)):
    return views.booking_stats(store)


# =====================================================================
# 3. PAYMENT STATS (with current-month revenue)
# =====================================================================
@router.get("/payments")
def payment_stats(
    month_of: Optional[date] = None,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    return views.payment_stats(store, today=month_of)


# =====================================================================
# 4. REVIEW STATS
# =====================================================================
@router.get("/reviews")
def review_stats(admin: User = Depends(get_current_admin), store: HotelStore = Depends(get_store)):
    return views.review_stats(store)
