"""
Route tests with FastAPI TestClient.

ReviewService, AIService and the current user are swapped out through
app.dependency_overrides; no database or DeepSeek access happens.
"""

import json
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_ai_service, get_review_service
from app.core.auth import get_current_user
from app.main import app
from app.services.ai_service import AIService


STUDENT = {"user_id": 7, "name": "Asha", "email": "asha@example.com", "role": "student",
           "branch": "NIT Hamirpur", "year": 4, "is_active": True}
ADMIN = {**STUDENT, "user_id": 1, "role": "admin"}


@pytest.fixture
def review_service():
    return MagicMock()


@pytest.fixture
def client(review_service, fake_client):
    ai_client = fake_client(api_key="")
    app.dependency_overrides[get_review_service] = lambda: review_service
    app.dependency_overrides[get_ai_service] = lambda: AIService(ai_client)
    app.dependency_overrides[get_current_user] = lambda: STUDENT
    yield TestClient(app)
    app.dependency_overrides.clear()


def login_as(user):
    app.dependency_overrides[get_current_user] = lambda: user


# ============================================================
# AI ROUTES
# ============================================================

def test_summary_404_when_no_reviews(client, review_service):
    review_service.find_by_company.return_value = []

    response = client.get("/api/ai/company/Nowhere/summary")

    assert response.status_code == 404
    assert response.json()["detail"] == "No reviews found for Nowhere"


def test_summary_fallback_envelope(client, review_service, sample_reviews):
    review_service.find_by_company.return_value = sample_reviews

    response = client.get("/api/ai/company/Oracle/summary")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["company_name"] == "Oracle"
    assert data["is_ai_generated"] is False
    assert data["statistics"]["selection_rate"] == 33.3
    assert data["total_reviews"] == 3
    assert "last_updated" in data
    review_service.find_by_company.assert_called_once_with("Oracle")


def test_summary_ai_path_omits_flag(client, review_service, sample_reviews, fake_client):
    review_service.find_by_company.return_value = sample_reviews
    ai_client = fake_client(response=json.dumps({"summary": "Good", "key_insights": ["a"]}))
    app.dependency_overrides[get_ai_service] = lambda: AIService(ai_client)

    data = client.get("/api/ai/company/Oracle/summary").json()["data"]

    assert data["summary"] == "Good"
    assert data["key_insights"] == ["a"]
    assert "is_ai_generated" not in data
    assert "strengths" not in data


def test_insights_route(client, review_service, sample_reviews):
    review_service.find_by_company.return_value = sample_reviews

    data = client.get("/api/ai/company/Oracle/insights").json()["data"]

    assert data["overview"]["total_reviews"] == 3
    assert data["results"] == {"Selected": 1, "Rejected": 1, "Pending": 1}
    assert data["difficulty"] == {"Medium": 1, "Hard": 1, "Unknown": 1}


def test_tips_falls_back_to_company_reviews(client, review_service, sample_reviews):
    review_service.find_by_company_and_role.return_value = []
    review_service.find_by_company.return_value = sample_reviews

    response = client.get("/api/ai/company/Oracle/role/Designer/tips")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["job_role"] == "Designer"
    assert data["based_on_reviews"] == 3
    assert data["is_ai_generated"] is False


def test_tips_404_when_company_unknown(client, review_service):
    review_service.find_by_company_and_role.return_value = []
    review_service.find_by_company.return_value = []

    response = client.get("/api/ai/company/Nowhere/role/SDE/tips")

    assert response.status_code == 404


def test_tips_requires_token(review_service):
    app.dependency_overrides[get_review_service] = lambda: review_service
    try:
        response = TestClient(app).get("/api/ai/company/Oracle/role/SDE/tips")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code in (401, 403)
    review_service.find_by_company_and_role.assert_not_called()


# ============================================================
# REVIEW ROUTES
# ============================================================

def test_list_reviews_builds_filter(client, review_service):
    pagination = {"current_page": 2, "total_pages": 3, "total_count": 25,
                  "has_next_page": True, "has_prev_page": True, "limit": 10}
    review_service.list_reviews.return_value = ([{"id": "abc", "company_name": "Oracle"}], pagination)

    response = client.get("/api/reviews", params={
        "page": 2, "company": "ora", "difficulty": "Hard", "rating": 4, "sort_order": "asc"
    })

    assert response.status_code == 200
    assert response.json()["pagination"] == pagination
    query, page, limit, sort_by, sort_order = review_service.list_reviews.call_args.args
    assert query["company_name"] == {"$regex": "ora", "$options": "i"}
    assert query["difficulty"] == "Hard"
    assert query["rating.overall"] == {"$gte": 4}
    assert (page, limit, sort_by, sort_order) == (2, 10, "date_posted", "asc")


def test_list_reviews_rejects_bad_difficulty(client):
    response = client.get("/api/reviews", params={"difficulty": "Impossible"})

    assert response.status_code == 422


def test_create_review_sets_owner_and_reviewer_info(client, review_service):
    review_service.insert.return_value = {"id": "abc", "company_name": "Oracle"}

    response = client.post("/api/reviews", json={
        "company_name": "Oracle",
        "job_role": "SDE",
        "location": "Bangalore",
        "job_type": "Full-time",
        "experience_type": "Both",
        "rating": {"overall": 4}
    })

    assert response.status_code == 201
    user_id, review_data = review_service.insert.call_args.args
    assert user_id == 7
    assert review_data["reviewer_info"]["college"] == "NIT Hamirpur"
    assert review_data["reviewer_info"]["degree"] == "Year 4"
    assert review_data["difficulty"] == "Medium"
    assert review_data["result"] == "Pending"


def test_create_review_validation(client, review_service):
    response = client.post("/api/reviews", json={"company_name": "Oracle", "rating": {"overall": 9}})

    assert response.status_code == 422
    review_service.insert.assert_not_called()


def test_update_review_by_other_student_forbidden(client, review_service):
    review_service.get_raw.return_value = {"_id": "x", "user_id": 99}

    response = client.put("/api/reviews/abc", json={"result": "Selected"})

    assert response.status_code == 403
    review_service.update.assert_not_called()


def test_update_review_by_owner(client, review_service):
    review_service.get_raw.return_value = {"_id": "x", "user_id": 7}
    review_service.update.return_value = {"id": "abc", "result": "Selected"}

    response = client.put("/api/reviews/abc", json={"result": "Selected"})

    assert response.status_code == 200
    review_service.update.assert_called_once_with("abc", {"result": "Selected"})


def test_update_review_by_admin(client, review_service):
    login_as(ADMIN)
    review_service.get_raw.return_value = {"_id": "x", "user_id": 99}
    review_service.update.return_value = {"id": "abc"}

    response = client.put("/api/reviews/abc", json={"tags": ["DSA"]})

    assert response.status_code == 200


def test_update_missing_review(client, review_service):
    review_service.get_raw.return_value = None

    response = client.put("/api/reviews/abc", json={"result": "Selected"})

    assert response.status_code == 404


def test_delete_requires_admin(client, review_service):
    response = client.delete("/api/reviews/abc")

    assert response.status_code == 403
    review_service.delete.assert_not_called()


def test_delete_as_admin(client, review_service):
    login_as(ADMIN)
    review_service.delete.return_value = True

    response = client.delete("/api/reviews/abc")

    assert response.status_code == 200
    assert response.json()["message"] == "Review deleted successfully"


def test_delete_missing_review_as_admin(client, review_service):
    login_as(ADMIN)
    review_service.delete.return_value = False

    assert client.delete("/api/reviews/abc").status_code == 404


def test_get_review_by_id(client, review_service):
    review_service.get_by_id.return_value = {"id": "abc", "date_posted": datetime(2024, 1, 15)}

    response = client.get("/api/reviews/abc")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == "abc"


def test_get_review_not_found(client, review_service):
    review_service.get_by_id.return_value = None

    assert client.get("/api/reviews/abc").status_code == 404


def test_stats_route_passes_college(client, review_service):
    review_service.get_stats.return_value = {"overview": {"total_reviews": 0}}

    response = client.get("/api/reviews/stats", params={"college": "NIT Hamirpur"})

    assert response.status_code == 200
    review_service.get_stats.assert_called_once_with("NIT Hamirpur")


def test_my_reviews_filters_by_user(client, review_service):
    review_service.list_reviews.return_value = ([], {
        "current_page": 1, "total_pages": 0, "total_count": 0,
        "has_next_page": False, "has_prev_page": False, "limit": 10
    })

    response = client.get("/api/reviews/me")

    assert response.status_code == 200
    assert review_service.list_reviews.call_args.args[0] == {"user_id": 7}
