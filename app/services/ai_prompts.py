"""
Prompt templates for the DeepSeek summary / preparation-tips calls.

COST OPTIMIZATION:
- Only a bounded excerpt of review text goes into the prompt
- Output shape and list sizes are fixed in the prompt
- JSON keys match SummaryResult / TipsResult field names exactly
"""

from typing import Any, Dict, List, Mapping, Sequence

from app.schemas.schemas import StatisticsSummary
from app.services.ai_fallback import collect_review_text


MAX_EXCERPTS = 5
MAX_EXCERPT_CHARS = 200
MAX_PROMPT_QUESTIONS = 8
MAX_PROMPT_TIPS = 5

# Fields forwarded to the model for the company summary
REVIEW_PROMPT_FIELDS = (
    "job_role", "location", "job_type", "difficulty", "result",
    "overall_experience", "preparation_tips", "advice_for_future",
    "rating", "process_stages", "experience_type"
)


def _truncate(text: str, limit: int = MAX_EXCERPT_CHARS) -> str:
    text = " ".join(str(text).split())
    if len(text) <= limit:
        return text
    return text[:limit - 3].rstrip() + "..."


def review_prompt_data(reviews: Sequence[Mapping]) -> List[Dict[str, Any]]:
    """Strip reviews down to the fields the summary prompt uses."""
    return [
        {field: review.get(field) for field in REVIEW_PROMPT_FIELDS}
        for review in reviews
    ]


def _most_common_difficulty(stats: StatisticsSummary) -> str:
    distribution = stats.difficulty_distribution
    if not distribution or not any(distribution.values()):
        return "Medium"
    return max(distribution, key=lambda level: distribution[level])


def build_summary_prompt(company_name: str, review_data: Sequence[Mapping], stats: StatisticsSummary) -> str:
    main_roles = ", ".join(list(stats.job_type_distribution)[:2]) or "Various"

    excerpts = []
    for review in review_data:
        experience = review.get("overall_experience")
        if experience:
            role = review.get("job_role") or "Unknown role"
            result = review.get("result") or "Unknown"
            excerpts.append(f"- [{role}, {result}] {_truncate(experience)}")
        if len(excerpts) >= MAX_EXCERPTS:
            break
    excerpt_text = "\n".join(excerpts) if excerpts else "- (no written experiences)"

    return f"""Generate a VERY SHORT summary for {company_name} based on {len(review_data)} reviews.

Stats: {stats.average_rating}/5 rating, {stats.selection_rate}% selection rate
Main roles: {main_roles}
Difficulty: {_most_common_difficulty(stats)}

Candidate experiences:
{excerpt_text}

Respond in this EXACT JSON format with MAXIMUM limits:
{{
  "summary": "1-2 sentences only about interview process and company culture",
  "key_insights": [
    "Max 2 insights, each under 15 words"
  ],
  "strengths": [
    "Max 2 strengths, each under 10 words"
  ],
  "challenges": [
    "Max 1 challenge, under 12 words"
  ],
  "recommended_preparation": [
    "Max 3 tips, each under 12 words"
  ]
}}

Keep everything EXTREMELY concise. No explanations, just key points.
Return ONLY the JSON, no explanation."""


def build_preparation_prompt(reviews: Sequence[Mapping], job_role: str, company_name: str) -> str:
    questions, tips = collect_review_text(reviews)
    questions = [_truncate(q) for q in questions[:MAX_PROMPT_QUESTIONS]]
    tips = [_truncate(t) for t in tips[:MAX_PROMPT_TIPS]]

    return f"""Generate SHORT preparation tips for {job_role} at {company_name}.

Based on {len(reviews)} reviews.
Common questions: {', '.join(questions) or 'None reported'}
Tips from reviews: {'. '.join(tips) or 'None reported'}

Respond in this EXACT JSON format:
{{
  "tips": [
    "Max 4 tips, each under 15 words"
  ],
  "common_questions": [
    "Max 5 most frequent questions"
  ],
  "skills_to_focus": [
    "Max 4 skills, each under 8 words"
  ],
  "process_insights": [
    "Max 3 insights, each under 12 words"
  ]
}}

Keep everything VERY concise and actionable.
Return ONLY the JSON, no explanation."""
