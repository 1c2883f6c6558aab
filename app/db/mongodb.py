"""
MongoDB Connection Utility

MongoDB stores:
- Placement/interview reviews submitted by students

WHY MongoDB for these?
- Schema-flexible: reviews carry nested ratings, stages, questions
- Document-oriented: each review is self-contained
- Aggregation pipelines cover the stats endpoints
"""
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from app.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri, serverSelectionTimeoutMS=5000)
    return _client


def get_mongo_db() -> Database:
    """Get the reviews database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """
    Get a specific collection.
    Collections we use:
    - reviews: placement/interview experiences
    """
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.error(f"MongoDB connection failed: {e}")
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "reviews": "reviews",
}


def init_mongo_indexes():
    """
    Create indexes for the review queries.
    Call this once during app startup.
    """
    reviews = get_mongo_db()[COLLECTIONS["reviews"]]

    # Company / role lookups for the AI endpoints
    reviews.create_index("company_name")
    reviews.create_index([("company_name", ASCENDING), ("job_role", ASCENDING)])

    # "My reviews" and per-user listings
    reviews.create_index("user_id")

    # Default listing sort
    reviews.create_index([("date_posted", DESCENDING)])

    logger.info("MongoDB indexes created successfully")
