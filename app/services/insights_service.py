"""
Company Insights - dashboard numbers for one company's reviews.

Bucket counts over the in-memory review list plus a six-month
activity trend. No AI involved.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Mapping, Optional, Sequence


RECENT_WINDOW = timedelta(days=182)


def _bucket(reviews: Sequence[Mapping], field: str, missing: Optional[str] = None) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for review in reviews:
        key = review.get(field)
        if not isinstance(key, str) or not key:
            key = missing
        if key is None:
            continue
        counts[key] = counts.get(key, 0) + 1
    return counts


def _review_timestamp(review: Mapping) -> Optional[datetime]:
    value = review.get("created_at") or review.get("date_posted")
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).replace(tzinfo=None)
        except ValueError:
            return None
    return None


def calculate_detailed_insights(reviews: Sequence[Mapping], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Returns:
        {
            "overview": {"total_reviews", "average_rating", "recent_reviews"},
            "results": {...}, "difficulty": {...}, "job_roles": {...},
            "locations": {...}, "experience_types": {...},
            "trends": {"recent_activity", "growth_rate"}
        }
    """
    now = now or datetime.utcnow()
    total_reviews = len(reviews)

    ratings = []
    for review in reviews:
        rating = review.get("rating")
        overall = rating.get("overall") if isinstance(rating, Mapping) else None
        if isinstance(overall, (int, float)) and not isinstance(overall, bool) and overall > 0:
            ratings.append(overall)
    average_rating = round(sum(ratings) / len(ratings), 1) if ratings else 0

    cutoff = now - RECENT_WINDOW
    recent_reviews = [
        review for review in reviews
        if (_review_timestamp(review) or datetime.min) >= cutoff
    ]

    growth_rate = round(len(recent_reviews) / total_reviews * 100, 1) if total_reviews else 0

    return {
        "overview": {
            "total_reviews": total_reviews,
            "average_rating": average_rating,
            "recent_reviews": len(recent_reviews)
        },
        "results": _bucket(reviews, "result", missing="Unknown"),
        "difficulty": _bucket(reviews, "difficulty", missing="Unknown"),
        "job_roles": _bucket(reviews, "job_role"),
        "locations": _bucket(reviews, "location"),
        "experience_types": _bucket(reviews, "experience_type"),
        "trends": {
            "recent_activity": len(recent_reviews),
            "growth_rate": growth_rate
        }
    }
