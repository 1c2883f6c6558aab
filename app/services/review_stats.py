"""
Review Statistics - pure aggregate counts over a list of review documents.

Reviews are plain MongoDB dicts here; any field may be missing.
"""

from typing import Dict, List, Mapping, Sequence

from app.schemas.schemas import StatisticsSummary


DIFFICULTY_LEVELS = ("Easy", "Medium", "Hard")


def _count_by(reviews: Sequence[Mapping], field: str) -> Dict[str, int]:
    """Bucket reviews by the string value of `field`, skipping empty and non-string values."""
    counts: Dict[str, int] = {}
    for review in reviews:
        value = review.get(field)
        if isinstance(value, str) and value:
            counts[value] = counts.get(value, 0) + 1
    return counts


def calculate_stats(reviews: Sequence[Mapping]) -> StatisticsSummary:
    """
    Aggregate rating, selection rate and category distributions.

    - average_rating: mean of the reviews that carry rating.overall
    - selection_rate: % of all reviews with result == "Selected"
    - difficulty_distribution: always has Easy/Medium/Hard; other values are dropped
    - job_type / location distributions: only the values that occur
    """
    total_reviews = len(reviews)

    ratings: List[float] = []
    selected_count = 0
    difficulty_count = {level: 0 for level in DIFFICULTY_LEVELS}

    for review in reviews:
        rating = review.get("rating")
        overall = rating.get("overall") if isinstance(rating, Mapping) else None
        if isinstance(overall, (int, float)) and not isinstance(overall, bool):
            ratings.append(float(overall))

        if review.get("result") == "Selected":
            selected_count += 1

        difficulty = review.get("difficulty")
        if isinstance(difficulty, str) and difficulty in difficulty_count:
            difficulty_count[difficulty] += 1

    average_rating = round(sum(ratings) / len(ratings), 1) if ratings else 0
    selection_rate = round(selected_count / total_reviews * 100, 1) if total_reviews else 0

    return StatisticsSummary(
        average_rating=average_rating,
        selection_rate=selection_rate,
        difficulty_distribution=difficulty_count,
        job_type_distribution=_count_by(reviews, "job_type"),
        location_distribution=_count_by(reviews, "location"),
        total_reviews=total_reviews
    )
