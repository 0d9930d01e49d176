from fastapi import APIRouter, Depends, HTTPException

from hotel.core.dependencies import get_current_admin, get_store, require_confirmation
from hotel.schemas.review import Review, ReviewCreate, ReviewListOut, ReviewUpdate
from hotel.schemas.user import User
from hotel.services.store import HotelStore
from hotel.services.views import admin_reviews, average_rating, public_reviews

router = APIRouter(prefix="/reviews", tags=["Reviews"])


# =====================================================================
# PUBLIC REVIEWS (approved only)
# =====================================================================
@router.get("/", response_model=ReviewListOut)
def list_public_reviews(store: HotelStore = Depends(get_store)):
    reviews = public_reviews(store)
    return ReviewListOut(reviews=reviews, average_rating=average_rating(reviews), total=len(reviews))


# =====================================================================
# SUBMIT REVIEW (public, waits for approval)
# =====================================================================
@router.post("/", response_model=Review)
def submit_review(data: ReviewCreate, store: HotelStore = Depends(get_store)):
    return store.add_review(data)


# =====================================================================
# ADMIN: ALL REVIEWS
# =====================================================================
@router.get("/admin", response_model=list[Review])
def list_all_reviews(
    status: str = "all",
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    if status not in ("all", "approved", "pending"):
        raise HTTPException(status_code=400, detail="status must be all, approved or pending")

    return admin_reviews(store, status)


@router.put("/{review_id}", response_model=Review)
def edit_review(
    review_id: str,
    data: ReviewUpdate,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    review = store.update_review(admin, review_id, data.to_patch())
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.post("/{review_id}/approve", response_model=Review)
def approve_review(
    review_id: str,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    review = store.approve_review(admin, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.delete("/{review_id}", dependencies=[Depends(require_confirmation)])
def delete_review(
    review_id: str,
    admin: User = Depends(get_current_admin),
    store: HotelStore = Depends(get_store),
):
    if not store.delete_review(admin, review_id):
        raise HTTPException(status_code=404, detail="Review not found")

    return {"message": "Review deleted successfully"}
