"""
Placement Review Platform
Students share placement/interview experiences; AI summarizes them.

Architecture:
- MongoDB: Review documents
- PostgreSQL: User accounts
- DeepSeek AI: Company summaries and preparation tips (with statistics fallback)
"""

__version__ = "1.0.0"
