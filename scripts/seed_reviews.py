#!/usr/bin/env python3
"""
Seed Script - insert sample placement reviews into MongoDB.

Every sample goes through ReviewCreate validation first, so the
seeded documents look exactly like API-created ones.

Usage: python scripts/seed_reviews.py <user_id>
"""
import sys
sys.path.insert(0, '.')

from app.schemas.schemas import ReviewCreate
from app.services.review_service import ReviewService


SAMPLE_REVIEWS = [
    {
        "company_name": "Oracle",
        "job_role": "Software Developer",
        "location": "Bangalore, India",
        "job_type": "Full-time",
        "experience_type": "Both",
        "process_stages": ["Resume Screening", "Online Assessment", "2 Technical Rounds", "HR Round"],
        "difficulty": "Medium",
        "duration": "6 weeks",
        "result": "Selected",
        "salary_offered": {"amount": 420000, "currency": "INR", "period": "yearly"},
        "review_title": "Oracle Software Developer - Great Learning Experience",
        "overall_experience": "Structured and fair interview process with helpful interviewers.",
        "preparation_tips": "Revise Java fundamentals, SQL, and basic system design.",
        "questions_asked": ["Implement HashMap in Java", "Complex SQL joins", "Explain polymorphism"],
        "advice_for_future": "Confidence in Java and SQL is key. Focus on problem-solving.",
        "rating": {
            "overall": 4, "process_clarity": 5, "interviewer_behavior": 4,
            "difficulty_rating": 3, "would_recommend": 4
        },
        "reviewer_info": {"college": "NIT Hamirpur", "degree": "B.Tech CSE", "passing_year": 2024, "cgpa": 8.2},
        "tags": ["Oracle", "Java", "SQL"]
    },
    {
        "company_name": "DE Shaw",
        "job_role": "Software Developer Engineer",
        "location": "Hyderabad, India",
        "job_type": "Full-time",
        "experience_type": "Both",
        "process_stages": ["Resume Screening", "Online Assessment", "3 Technical Rounds", "HR Round"],
        "difficulty": "Hard",
        "duration": "8 weeks",
        "result": "Selected",
        "review_title": "DE Shaw SDE - Tough but rewarding",
        "overall_experience": "Very algorithm heavy. Interviewers expected optimal solutions and clean code.",
        "preparation_tips": "Practice dynamic programming and graph problems daily.",
        "questions_asked": ["LRU Cache implementation", "Binary tree serialization", "Design URL shortener"],
        "advice_for_future": "Think aloud and discuss trade-offs.",
        "rating": {
            "overall": 5, "process_clarity": 4, "interviewer_behavior": 4,
            "difficulty_rating": 5, "would_recommend": 5
        },
        "reviewer_info": {"college": "NIT Hamirpur", "degree": "B.Tech CSE", "passing_year": 2024},
        "tags": ["DSA", "System Design"]
    },
    {
        "company_name": "Goldman Sachs",
        "job_role": "Technology Analyst",
        "location": "Bangalore, India",
        "job_type": "Internship",
        "experience_type": "Online Assessment",
        "process_stages": ["Online Assessment", "Technical Round", "HR Round"],
        "difficulty": "Medium",
        "result": "Rejected",
        "overall_experience": "Aptitude section was lengthy; technical round focused on arrays and probability.",
        "preparation_tips": "Brush up on probability puzzles and time management for the OA.",
        "questions_asked": ["Two sum variants", "Expected value puzzle"],
        "rating": {"overall": 3, "process_clarity": 3},
        "tags": ["Finance", "Aptitude"]
    },
]


def seed(user_id: int) -> int:
    service = ReviewService()
    inserted = 0
    for sample in SAMPLE_REVIEWS:
        review = ReviewCreate(**sample)
        service.insert(user_id, review.model_dump(mode="json"))
        inserted += 1
    return inserted


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/seed_reviews.py <user_id>")
        sys.exit(1)
    count = seed(int(sys.argv[1]))
    print(f"✅ Seeded {count} reviews")
