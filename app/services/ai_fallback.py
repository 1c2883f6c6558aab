"""
Fallback Summary/Tips - deterministic output used when DeepSeek is not
configured or the API call fails.

Everything here is built from review statistics and fixed templates,
so the AI endpoints always have something to display.
"""

from typing import Iterable, List, Mapping, Sequence

from app.schemas.schemas import SummaryResult, TipsResult
from app.services.review_stats import calculate_stats


MAX_FALLBACK_QUESTIONS = 5
MAX_REVIEW_TIPS = 2


# ============================================================
# EMPTY-STATE RESULTS
# ============================================================

def empty_summary(company_name: str) -> SummaryResult:
    return SummaryResult(
        summary=f"No reviews available for {company_name} yet.",
        key_insights=[],
        average_rating=0,
        total_reviews=0
    )


def empty_tips(job_role: str, company_name: str) -> TipsResult:
    return TipsResult(
        tips=[f"Start preparing for {job_role} role at {company_name} by focusing on fundamentals."],
        common_questions=[],
        skills_to_focus=[],
        process_insights=[]
    )


# ============================================================
# HELPERS
# ============================================================

def filter_reviews_by_role(reviews: Sequence[Mapping], job_role: str) -> List[Mapping]:
    """Case-insensitive substring match on job_role."""
    needle = job_role.lower()
    return [
        review for review in reviews
        if needle in str(review.get("job_role") or "").lower()
    ]


def as_text_list(value) -> List[str]:
    """Normalize a free-text field that may be a string or a list of strings."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item]
    return [str(value)]


def unique_in_order(items: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def collect_review_text(reviews: Sequence[Mapping]):
    """Return (unique questions asked, unique preparation tips) across reviews."""
    questions: List[str] = []
    tips: List[str] = []
    for review in reviews:
        questions.extend(as_text_list(review.get("questions_asked")))
        tips.extend(as_text_list(review.get("preparation_tips")))
    return unique_in_order(questions), unique_in_order(tips)


# ============================================================
# FALLBACK GENERATORS
# ============================================================

def fallback_summary(reviews: Sequence[Mapping], company_name: str) -> SummaryResult:
    """Statistics-only company summary."""
    if not reviews:
        return empty_summary(company_name)

    stats = calculate_stats(reviews)

    # sorted() is stable, so ties keep first-seen order
    top_roles = [
        job_type for job_type, _ in sorted(
            stats.job_type_distribution.items(), key=lambda item: -item[1]
        )
    ][:2]

    summary = (
        f"{company_name} is rated {stats.average_rating}/5 with a "
        f"{stats.selection_rate}% success rate across {stats.total_reviews} reviews."
    )

    key_insights = [
        f"{stats.selection_rate}% of candidates get selected",
        f"Top roles: {', '.join(top_roles)}" if top_roles else "Top role: Various"
    ]

    return SummaryResult(
        summary=summary,
        key_insights=key_insights,
        strengths=["Structured process", "Good opportunities"],
        challenges=["Competitive selection"],
        recommended_preparation=[
            "Master technical skills",
            "Practice behavioral questions",
            "Research company culture"
        ],
        statistics=stats,
        total_reviews=len(reviews),
        is_ai_generated=False
    )


def fallback_tips(reviews: Sequence[Mapping], job_role: str, company_name: str) -> TipsResult:
    """Template tips plus whatever questions/tips the matching reviews mention."""
    if not reviews:
        return empty_tips(job_role, company_name)

    relevant_reviews = filter_reviews_by_role(reviews, job_role)
    questions, review_tips = collect_review_text(relevant_reviews)

    tips = [
        f"Master core technical concepts for the {job_role} role",
        "Practice behavioral questions",
        f"Research {company_name}'s products and culture",
        "Prepare clear explanations of your projects"
    ]
    tips.extend(review_tips[:MAX_REVIEW_TIPS])

    return TipsResult(
        tips=tips,
        common_questions=questions[:MAX_FALLBACK_QUESTIONS],
        skills_to_focus=[
            "Technical skills",
            "Problem solving",
            "Communication",
            "Leadership"
        ],
        process_insights=[
            f"{len(relevant_reviews)} reviews available for {job_role} at {company_name}",
            "Multiple interview rounds",
            "Technical + behavioral focus"
        ],
        is_ai_generated=False
    )
