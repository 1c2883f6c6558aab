"""
Review Routes

GET /reviews - List reviews with filters, sorting, pagination
GET /reviews/stats - Aggregate statistics
GET /reviews/me - Reviews of the logged-in user
GET /reviews/user/{user_id} - Reviews of a specific user
POST /reviews - Create review (logged in)
PUT /reviews/{review_id} - Update review (owner or admin)
DELETE /reviews/{review_id} - Delete review (admin)
GET /reviews/{review_id} - Get one review

Specific paths are declared before /{review_id} so they are not shadowed.
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional

from app.api.deps import get_review_service
from app.core.auth import get_current_user, require_role
from app.schemas.schemas import (
    ReviewCreate, ReviewUpdate, ReviewListResponse, Difficulty, JobType,
    SortOrder, MessageResponse
)
from app.services.review_service import ReviewService, build_review_filter

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=ReviewListResponse)
async def list_reviews(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: str = Query("date_posted"),
    sort_order: SortOrder = Query(SortOrder.desc),
    company: Optional[str] = Query(None),
    difficulty: Optional[Difficulty] = Query(None),
    rating: Optional[int] = Query(None, ge=1, le=5, description="Minimum overall rating"),
    job_type: Optional[JobType] = Query(None),
    search: Optional[str] = Query(None, description="Company, role or tag"),
    reviews: ReviewService = Depends(get_review_service)
):
    """Browse reviews. Public."""
    query = build_review_filter(
        company=company,
        difficulty=difficulty.value if difficulty else None,
        rating=rating,
        job_type=job_type.value if job_type else None,
        search=search
    )
    data, pagination = reviews.list_reviews(query, page, limit, sort_by, sort_order.value)
    return {"success": True, "data": data, "pagination": pagination}


@router.get("/stats")
async def review_stats(
    college: Optional[str] = Query(None),
    reviews: ReviewService = Depends(get_review_service)
):
    """Aggregate statistics over all reviews (optionally one college)."""
    return {"success": True, "data": reviews.get_stats(college)}


@router.get("/me", response_model=ReviewListResponse)
async def my_reviews(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: str = Query("date_posted"),
    sort_order: SortOrder = Query(SortOrder.desc),
    user: dict = Depends(get_current_user),
    reviews: ReviewService = Depends(get_review_service)
):
    """Reviews submitted by the logged-in user."""
    data, pagination = reviews.list_reviews(
        {"user_id": user["user_id"]}, page, limit, sort_by, sort_order.value
    )
    return {"success": True, "data": data, "pagination": pagination}


@router.get("/user/{user_id}", response_model=ReviewListResponse)
async def user_reviews(
    user_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: str = Query("date_posted"),
    sort_order: SortOrder = Query(SortOrder.desc),
    reviews: ReviewService = Depends(get_review_service)
):
    """Reviews submitted by a specific user. Public."""
    data, pagination = reviews.list_reviews(
        {"user_id": user_id}, page, limit, sort_by, sort_order.value
    )
    return {"success": True, "data": data, "pagination": pagination}


@router.post("", status_code=201)
async def create_review(
    review: ReviewCreate,
    user: dict = Depends(get_current_user),
    reviews: ReviewService = Depends(get_review_service)
):
    """Submit a new placement review."""
    review_data = review.model_dump(mode="json")

    # Reviewer info defaults come from the account
    reviewer_info = review_data.get("reviewer_info") or {}
    branch = user.get("branch")
    if branch and branch != "N/A":
        reviewer_info["college"] = branch
    if user.get("year"):
        reviewer_info["degree"] = f"Year {user['year']}"
    review_data["reviewer_info"] = reviewer_info

    saved = reviews.insert(user["user_id"], review_data)
    return {"success": True, "message": "Review created successfully", "data": saved}


@router.put("/{review_id}")
async def update_review(
    review_id: str,
    update: ReviewUpdate,
    user: dict = Depends(get_current_user),
    reviews: ReviewService = Depends(get_review_service)
):
    """Update a review. Only its author or an admin."""
    existing = reviews.get_raw(review_id)
    if not existing:
        raise HTTPException(status_code=404, detail="Review not found")

    if existing.get("user_id") != user["user_id"] and user["role"] != "admin":
        raise HTTPException(status_code=403, detail="Not authorized to update this review")

    changes = update.model_dump(mode="json", exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")

    updated = reviews.update(review_id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Review not found")

    return {"success": True, "message": "Review updated successfully", "data": updated}


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: str,
    user: dict = Depends(require_role("admin")),
    reviews: ReviewService = Depends(get_review_service)
):
    """Delete a review. Admins only."""
    if not reviews.delete(review_id):
        raise HTTPException(status_code=404, detail="Review not found")
    return MessageResponse(message="Review deleted successfully")


@router.get("/{review_id}")
async def get_review(review_id: str, reviews: ReviewService = Depends(get_review_service)):
    """Get one review. Public."""
    review = reviews.get_by_id(review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return {"success": True, "data": review}
