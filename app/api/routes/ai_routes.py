"""
AI Routes

GET /ai/company/{company_name}/summary - AI (or fallback) company summary
GET /ai/company/{company_name}/insights - Statistics dashboard
GET /ai/company/{company_name}/role/{job_role}/tips - Preparation tips (logged in)
"""

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, Depends

from app.api.deps import get_ai_service, get_review_service
from app.core.auth import get_current_user
from app.services.ai_service import AIService
from app.services.insights_service import calculate_detailed_insights
from app.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI Insights"])


def _timestamp() -> str:
    return datetime.utcnow().isoformat() + "Z"


def _load_company_reviews(reviews: ReviewService, company_name: str) -> list:
    company_reviews = reviews.find_by_company(company_name)
    if not company_reviews:
        raise HTTPException(status_code=404, detail=f"No reviews found for {company_name}")
    return company_reviews


@router.get("/company/{company_name}/summary")
async def company_summary(
    company_name: str,
    reviews: ReviewService = Depends(get_review_service),
    ai: AIService = Depends(get_ai_service)
):
    """Summary of all reviews for a company. Public."""
    company_reviews = _load_company_reviews(reviews, company_name)

    try:
        summary = await ai.generate_company_summary(company_reviews, company_name)
    except Exception:
        logger.exception(f"Error generating company summary for {company_name}")
        raise HTTPException(status_code=500, detail="Failed to generate company summary")

    return {
        "success": True,
        "data": {
            "company_name": company_name,
            **summary.model_dump(exclude_unset=True),
            "last_updated": _timestamp()
        }
    }


@router.get("/company/{company_name}/insights")
async def company_insights(
    company_name: str,
    reviews: ReviewService = Depends(get_review_service)
):
    """Bucket counts and six-month trend for a company. Public."""
    company_reviews = _load_company_reviews(reviews, company_name)

    return {
        "success": True,
        "data": {
            "company_name": company_name,
            **calculate_detailed_insights(company_reviews),
            "last_updated": _timestamp()
        }
    }


@router.get("/company/{company_name}/role/{job_role}/tips")
async def preparation_tips(
    company_name: str,
    job_role: str,
    user: dict = Depends(get_current_user),
    reviews: ReviewService = Depends(get_review_service),
    ai: AIService = Depends(get_ai_service)
):
    """Role-specific preparation tips. Falls back to all company reviews if no role match."""
    role_reviews = reviews.find_by_company_and_role(company_name, job_role)
    final_reviews = role_reviews or reviews.find_by_company(company_name)

    if not final_reviews:
        raise HTTPException(
            status_code=404,
            detail=f"No reviews found for {job_role} role at {company_name}"
        )

    try:
        tips = await ai.generate_preparation_tips(final_reviews, job_role, company_name)
    except Exception:
        logger.exception(f"Error generating preparation tips for {job_role} at {company_name}")
        raise HTTPException(status_code=500, detail="Failed to generate preparation tips")

    return {
        "success": True,
        "data": {
            "company_name": company_name,
            "job_role": job_role,
            **tips.model_dump(exclude_unset=True),
            "based_on_reviews": len(final_reviews),
            "last_updated": _timestamp()
        }
    }
