"""
Review Service - CRUD, listing and aggregation over the `reviews` collection.

Each review is one MongoDB document:
{
    "user_id": 12,                      # PostgreSQL users.user_id
    "company_name": "Oracle",
    "job_role": "Software Developer",
    "location": "Bangalore, India",
    "job_type": "Full-time",
    "experience_type": "Both",
    "difficulty": "Medium",
    "result": "Selected",
    "rating": {"overall": 4, "process_clarity": 5, ...},
    "process_stages": ["Resume Screening", "Online Assessment", ...],
    "questions_asked": ["Implement HashMap", ...],
    "preparation_tips": "...",
    "date_posted": datetime, "created_at": datetime, "updated_at": datetime
}
"""

import math
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection, ReturnDocument

from app.db.mongodb import get_collection, COLLECTIONS


# Fields a client may never overwrite through an update
IMMUTABLE_FIELDS = {"_id", "id", "user_id", "created_at", "updated_at"}

SORTABLE_FIELDS = {
    "date_posted", "created_at", "company_name", "job_role",
    "difficulty", "result", "rating.overall"
}


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> Optional[dict]:
    """Convert MongoDB document to a JSON-friendly dict with `id` instead of `_id`."""
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(review_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(review_id)
    except (InvalidId, TypeError):
        return None


def contains_regex(value: str) -> Dict[str, Any]:
    """Case-insensitive substring match; user input is escaped."""
    return {"$regex": re.escape(value), "$options": "i"}


def build_review_filter(
    company: Optional[str] = None,
    difficulty: Optional[str] = None,
    rating: Optional[int] = None,
    job_type: Optional[str] = None,
    search: Optional[str] = None
) -> Dict[str, Any]:
    """Translate listing query params into a MongoDB filter document."""
    query: Dict[str, Any] = {}

    if company:
        query["company_name"] = contains_regex(company)
    if difficulty:
        query["difficulty"] = difficulty
    if rating:
        query["rating.overall"] = {"$gte": rating}
    if job_type:
        query["job_type"] = job_type
    if search:
        query["$or"] = [
            {"company_name": contains_regex(search)},
            {"job_role": contains_regex(search)},
            {"tags": contains_regex(search)},
        ]

    return query


def build_pagination(page: int, limit: int, total: int) -> Dict[str, Any]:
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "current_page": page,
        "total_pages": total_pages,
        "total_count": total,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
        "limit": limit
    }


# ============================================================
# REVIEWS COLLECTION
# ============================================================

class ReviewService:
    """
    Handles review document storage and queries.
    """

    def __init__(self, collection: Optional[Collection] = None):
        self.collection: Collection = (
            collection if collection is not None else get_collection(COLLECTIONS["reviews"])
        )

    def insert(self, user_id: int, review_data: dict) -> dict:
        """
        Insert a new review owned by `user_id`.

        Returns:
            The stored review, serialized (with `id`)
        """
        now = datetime.utcnow()
        doc = {
            **review_data,
            "user_id": user_id,
            "date_posted": review_data.get("date_posted") or now,
            "created_at": now,
            "updated_at": now
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def get_raw(self, review_id: str) -> Optional[dict]:
        """Fetch the unserialized document (ownership checks need user_id)."""
        oid = to_object_id(review_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def get_by_id(self, review_id: str) -> Optional[dict]:
        """Fetch one review by MongoDB ObjectId string."""
        return serialize_doc(self.get_raw(review_id))

    def list_reviews(
        self,
        query: Dict[str, Any],
        page: int = 1,
        limit: int = 10,
        sort_by: str = "date_posted",
        sort_order: str = "desc"
    ) -> Tuple[List[dict], Dict[str, Any]]:
        """
        Paginated listing.

        Returns:
            (serialized reviews, pagination info)
        """
        if sort_by not in SORTABLE_FIELDS:
            sort_by = "date_posted"
        direction = DESCENDING if sort_order == "desc" else ASCENDING

        cursor = (
            self.collection.find(query)
            .sort(sort_by, direction)
            .skip((page - 1) * limit)
            .limit(limit)
        )
        reviews = serialize_docs(list(cursor))
        total = self.collection.count_documents(query)
        return reviews, build_pagination(page, limit, total)

    def find_by_company(self, company_name: str) -> List[dict]:
        """All reviews whose company name contains `company_name` (case-insensitive)."""
        return list(self.collection.find({"company_name": contains_regex(company_name)}))

    def find_by_company_and_role(self, company_name: str, job_role: str) -> List[dict]:
        return list(self.collection.find({
            "company_name": contains_regex(company_name),
            "job_role": contains_regex(job_role)
        }))

    def update(self, review_id: str, update_data: dict) -> Optional[dict]:
        """Apply a partial update. Returns the updated review or None."""
        oid = to_object_id(review_id)
        if oid is None:
            return None

        changes = {k: v for k, v in update_data.items() if k not in IMMUTABLE_FIELDS}
        changes["updated_at"] = datetime.utcnow()

        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        return serialize_doc(doc)

    def delete(self, review_id: str) -> bool:
        oid = to_object_id(review_id)
        if oid is None:
            return False
        result = self.collection.delete_one({"_id": oid})
        return result.deleted_count > 0

    def get_stats(self, college: Optional[str] = None) -> Dict[str, Any]:
        """
        Aggregate overview + difficulty and rating distributions.
        Optional `college` restricts to reviewer_info.college.
        """
        match_stage = [{"$match": {"reviewer_info.college": college}}] if college else []

        overview = list(self.collection.aggregate(match_stage + [
            {
                "$group": {
                    "_id": None,
                    "total_reviews": {"$sum": 1},
                    "average_rating": {"$avg": "$rating.overall"},
                    "companies": {"$addToSet": "$company_name"},
                    "job_types": {"$addToSet": "$job_type"},
                }
            },
            {
                "$project": {
                    "_id": 0,
                    "total_reviews": 1,
                    "average_rating": {"$round": ["$average_rating", 2]},
                    "unique_companies": {"$size": "$companies"},
                    "job_types": 1,
                }
            },
        ]))

        difficulty_stats = list(self.collection.aggregate(match_stage + [
            {"$group": {"_id": "$difficulty", "count": {"$sum": 1}}},
            {"$project": {"_id": 0, "difficulty": "$_id", "count": 1}},
        ]))

        rating_stats = list(self.collection.aggregate(match_stage + [
            {"$group": {"_id": "$rating.overall", "count": {"$sum": 1}}},
            {"$sort": {"_id": 1}},
            {"$project": {"_id": 0, "rating": "$_id", "count": 1}},
        ]))

        return {
            "overview": overview[0] if overview else {
                "total_reviews": 0,
                "average_rating": 0,
                "unique_companies": 0,
                "job_types": []
            },
            "difficulty_distribution": difficulty_stats,
            "rating_distribution": rating_stats
        }
