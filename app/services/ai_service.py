"""
AI Service - company summaries and role preparation tips.

FLOW (both operations):
1. No reviews            -> empty-state result, no API call
2. API key not usable    -> statistics fallback
3. Build prompt, call DeepSeek once
4. Parse JSON from reply -> result (is_ai_generated left unset)
5. Any error in 3-4      -> logged, statistics fallback

Nothing raises out of this service: callers always get a displayable result.
"""

import logging
from typing import Mapping, Protocol, Sequence

from app.schemas.schemas import SummaryResult, TipsResult
from app.services.ai_fallback import (
    empty_summary,
    empty_tips,
    fallback_summary,
    fallback_tips,
    filter_reviews_by_role,
)
from app.services.ai_prompts import (
    build_preparation_prompt,
    build_summary_prompt,
    review_prompt_data,
)
from app.services.ai_response import parse_preparation_response, parse_summary_response
from app.services.review_stats import calculate_stats

logger = logging.getLogger(__name__)


MIN_API_KEY_LENGTH = 20

# The model does not get to decide whether its own output counts as a fallback
AI_FLAG_KEYS = ("is_ai_generated", "isAIGenerated", "isAiGenerated")


class ContentGenerator(Protocol):
    api_key: str

    async def generate_content(self, prompt: str) -> str:
        ...


def is_api_key_available(api_key, min_length: int = MIN_API_KEY_LENGTH) -> bool:
    """Key must be present, non-blank, and longer than min_length."""
    return bool(api_key) and api_key.strip() != "" and len(api_key) > min_length


def drop_ai_flag(parsed: dict) -> None:
    for key in AI_FLAG_KEYS:
        parsed.pop(key, None)


class AIService:
    """
    Orchestrates DeepSeek calls with a deterministic fallback.

    Args:
        client: anything with `api_key` and `async generate_content(prompt) -> str`
        min_key_length: availability threshold for the API key
    """

    def __init__(self, client: ContentGenerator, min_key_length: int = MIN_API_KEY_LENGTH):
        self.client = client
        self.min_key_length = min_key_length

    def is_available(self) -> bool:
        # Checked on every request, never cached
        available = is_api_key_available(getattr(self.client, "api_key", None), self.min_key_length)
        logger.info(f"DeepSeek API key available: {available}")
        return available

    async def generate_company_summary(self, reviews: Sequence[Mapping], company_name: str) -> SummaryResult:
        if not reviews:
            return empty_summary(company_name)

        if not self.is_available():
            return fallback_summary(reviews, company_name)

        try:
            stats = calculate_stats(reviews)
            prompt = build_summary_prompt(company_name, review_prompt_data(reviews), stats)

            summary_text = await self.client.generate_content(prompt)

            parsed = parse_summary_response(summary_text)
            drop_ai_flag(parsed)
            result = SummaryResult.model_validate(parsed)
            # Computed values win over anything the model sent under either casing
            result.statistics = stats
            result.total_reviews = len(reviews)
            return result
        except Exception as e:
            logger.warning(f"AI summary failed for {company_name}, using fallback: {e!r}")
            return fallback_summary(reviews, company_name)

    async def generate_preparation_tips(
        self,
        reviews: Sequence[Mapping],
        job_role: str,
        company_name: str
    ) -> TipsResult:
        if not reviews:
            return empty_tips(job_role, company_name)

        if not self.is_available():
            return fallback_tips(reviews, job_role, company_name)

        try:
            # Callers already filter by role; repeat it, but keep all reviews if nothing matches
            relevant_reviews = filter_reviews_by_role(reviews, job_role) or list(reviews)
            prompt = build_preparation_prompt(relevant_reviews, job_role, company_name)

            tips_text = await self.client.generate_content(prompt)

            parsed = parse_preparation_response(tips_text)
            drop_ai_flag(parsed)
            return TipsResult.model_validate(parsed)
        except Exception as e:
            logger.warning(f"AI preparation tips failed for {job_role} at {company_name}, using fallback: {e!r}")
            return fallback_tips(reviews, job_role, company_name)
