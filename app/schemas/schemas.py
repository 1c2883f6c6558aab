"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    admin = "admin"


class JobType(str, Enum):
    full_time = "Full-time"
    internship = "Internship"
    contract = "Contract"
    part_time = "Part-time"


class ExperienceType(str, Enum):
    interview = "Interview"
    online_assessment = "Online Assessment"
    both = "Both"


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


class ReviewResult(str, Enum):
    selected = "Selected"
    rejected = "Rejected"
    pending = "Pending"
    withdrew = "Withdrew"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: UserRole = UserRole.student
    branch: Optional[str] = None
    year: Optional[int] = Field(None, ge=1, le=4)
    roll_number: Optional[str] = None

    @field_validator("roll_number")
    @classmethod
    def blank_roll_number_is_none(cls, v):
        # Empty roll numbers must not collide on the unique index
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    role: str

class UserResponse(BaseModel):
    user_id: int
    name: str
    email: str
    role: str
    branch: Optional[str] = None
    year: Optional[int] = None
    roll_number: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

class SignupResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


# ============================================================
# REVIEW SCHEMAS
# ============================================================

class ReviewRating(BaseModel):
    overall: int = Field(..., ge=1, le=5)
    process_clarity: Optional[int] = Field(None, ge=1, le=5)
    interviewer_behavior: Optional[int] = Field(None, ge=1, le=5)
    difficulty_rating: Optional[int] = Field(None, ge=1, le=5)
    would_recommend: Optional[int] = Field(None, ge=1, le=5)

class SalaryOffered(BaseModel):
    amount: float = Field(0, ge=0)
    currency: str = "INR"
    period: str = "yearly"

class ReviewerInfo(BaseModel):
    college: Optional[str] = None
    degree: Optional[str] = None
    passing_year: Optional[int] = Field(None, ge=1950, le=2100)
    cgpa: Optional[float] = Field(None, ge=0, le=10)
    previous_experience: Optional[str] = None

class ReviewCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    job_role: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    job_type: JobType
    experience_type: ExperienceType
    rating: ReviewRating
    difficulty: Difficulty = Difficulty.medium
    result: ReviewResult = ReviewResult.pending
    process_stages: List[str] = []
    duration: Optional[str] = None
    review_title: Optional[str] = Field(None, max_length=200)
    overall_experience: Optional[str] = None
    preparation_tips: Optional[str] = None
    advice_for_future: Optional[str] = None
    questions_asked: List[str] = []
    salary_offered: Optional[SalaryOffered] = None
    reviewer_info: Optional[ReviewerInfo] = None
    tags: List[str] = []

    @field_validator("company_name", "job_role", "location")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

class ReviewUpdate(BaseModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    job_role: Optional[str] = Field(None, min_length=1, max_length=200)
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    experience_type: Optional[ExperienceType] = None
    rating: Optional[ReviewRating] = None
    difficulty: Optional[Difficulty] = None
    result: Optional[ReviewResult] = None
    process_stages: Optional[List[str]] = None
    duration: Optional[str] = None
    review_title: Optional[str] = Field(None, max_length=200)
    overall_experience: Optional[str] = None
    preparation_tips: Optional[str] = None
    advice_for_future: Optional[str] = None
    questions_asked: Optional[List[str]] = None
    salary_offered: Optional[SalaryOffered] = None
    reviewer_info: Optional[ReviewerInfo] = None
    tags: Optional[List[str]] = None

class PaginationInfo(BaseModel):
    current_page: int
    total_pages: int
    total_count: int
    has_next_page: bool
    has_prev_page: bool
    limit: int

class ReviewListResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]]
    pagination: PaginationInfo


# ============================================================
# AI SCHEMAS
# Every field has a default: model output is untrusted and may be partial.
# Routes serialize with exclude_unset so absent keys stay absent.
# ============================================================

class StatisticsSummary(BaseModel):
    average_rating: float = 0
    selection_rate: float = 0
    difficulty_distribution: Dict[str, int] = {}
    job_type_distribution: Dict[str, int] = {}
    location_distribution: Dict[str, int] = {}
    total_reviews: int = 0


class ModelReply(BaseModel):
    """Accepts both snake_case and camelCase keys (keyInsights, commonQuestions, ...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryResult(ModelReply):
    summary: str = ""
    key_insights: List[str] = []
    strengths: List[str] = []
    challenges: List[str] = []
    recommended_preparation: List[str] = []
    statistics: Optional[StatisticsSummary] = None
    total_reviews: int = 0
    average_rating: Optional[float] = None
    is_ai_generated: Optional[bool] = Field(None, alias="isAIGenerated")

class TipsResult(ModelReply):
    tips: List[str] = []
    common_questions: List[str] = []
    skills_to_focus: List[str] = []
    process_insights: List[str] = []
    is_ai_generated: Optional[bool] = Field(None, alias="isAIGenerated")


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
