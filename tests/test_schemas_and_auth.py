"""
Tests for request validation and JWT helpers.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from app.core.auth import create_access_token, decode_token
from app.schemas.schemas import ReviewCreate, SignupRequest, SummaryResult


VALID_REVIEW = {
    "company_name": "  Oracle ",
    "job_role": "SDE",
    "location": "Bangalore",
    "job_type": "Internship",
    "experience_type": "Online Assessment",
    "rating": {"overall": 5, "would_recommend": 4},
}


def test_review_create_defaults_and_strip():
    review = ReviewCreate(**VALID_REVIEW)

    assert review.company_name == "Oracle"
    assert review.difficulty.value == "Medium"
    assert review.result.value == "Pending"
    assert review.questions_asked == []


@pytest.mark.parametrize("change", [
    {"rating": {"overall": 0}},
    {"rating": {"overall": 6}},
    {"job_type": "Freelance"},
    {"difficulty": "Insane"},
    {"result": "Ghosted"},
    {"company_name": "   "},
])
def test_review_create_rejects(change):
    with pytest.raises(ValidationError):
        ReviewCreate(**{**VALID_REVIEW, **change})


def test_signup_blank_roll_number_becomes_none():
    request = SignupRequest(name="Asha", email="asha@example.com", password="longenough", roll_number="  ")

    assert request.roll_number is None
    assert request.role.value == "student"


def test_signup_rejects_short_password():
    with pytest.raises(ValidationError):
        SignupRequest(name="Asha", email="asha@example.com", password="short")


def test_summary_result_accepts_partial_model_output():
    result = SummaryResult.model_validate({"summary": "Only a summary"})

    assert result.key_insights == []
    assert result.model_dump(exclude_unset=True) == {"summary": "Only a summary"}


def test_token_round_trip():
    token = create_access_token({"sub": "7", "role": "student"})

    payload = decode_token(token)

    assert payload["sub"] == "7"
    assert payload["role"] == "student"


def test_expired_or_tampered_token():
    expired = create_access_token({"sub": "7"}, expires_delta=timedelta(minutes=-5))

    assert decode_token(expired) is None
    assert decode_token("not.a.token") is None
