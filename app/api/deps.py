"""
Shared FastAPI dependencies.

Tests replace these through app.dependency_overrides.
"""

from fastapi import Request

from app.services.ai_service import AIService
from app.services.review_service import ReviewService


def get_review_service() -> ReviewService:
    return ReviewService()


def get_ai_service(request: Request) -> AIService:
    """AIService built once at startup and kept on app.state."""
    return request.app.state.ai_service
