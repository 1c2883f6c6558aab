"""
Schemas module - Request/Response schemas for API endpoints.

- Request schemas (what API accepts)
- Response schemas (what API returns)
- AI result value objects (summary / tips / statistics)
"""

from app.schemas.schemas import (
    StatisticsSummary,
    SummaryResult,
    TipsResult,
)

__all__ = ["StatisticsSummary", "SummaryResult", "TipsResult"]
