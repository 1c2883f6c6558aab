"""
Shared fixtures. Nothing here touches MongoDB, PostgreSQL or DeepSeek.
"""

import pytest


VALID_API_KEY = "sk-" + "a" * 32


class FakeDeepSeekClient:
    """Stand-in for DeepSeekClient that records prompts."""

    def __init__(self, response: str = "", api_key: str = VALID_API_KEY, error: Exception = None):
        self.api_key = api_key
        self.response = response
        self.error = error
        self.prompts = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def generate_content(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def sample_reviews():
    return [
        {
            "company_name": "Oracle",
            "job_role": "Software Developer",
            "location": "Bangalore, India",
            "job_type": "Full-time",
            "experience_type": "Both",
            "difficulty": "Medium",
            "result": "Selected",
            "rating": {"overall": 4, "process_clarity": 5},
            "process_stages": ["Online Assessment", "Technical Round", "HR Round"],
            "questions_asked": ["Implement HashMap", "SQL joins"],
            "preparation_tips": "Revise Java and SQL.",
            "overall_experience": "Structured and fair process."
        },
        {
            "company_name": "Oracle",
            "job_role": "Software Developer Intern",
            "location": "Hyderabad, India",
            "job_type": "Internship",
            "experience_type": "Interview",
            "difficulty": "Hard",
            "result": "Rejected",
            "rating": {"overall": 3},
            "questions_asked": ["SQL joins", "Reverse a linked list"],
            "preparation_tips": ["Practice DSA daily", "Revise Java and SQL."]
        },
        {
            "company_name": "Oracle",
            "job_role": "Data Analyst",
            "location": "Bangalore, India",
            "job_type": "Full-time",
            "result": "Pending",
            "rating": {"overall": 5},
            "questions_asked": ["Window functions"]
        },
    ]


@pytest.fixture
def fake_client():
    return FakeDeepSeekClient
