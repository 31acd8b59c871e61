"""
MongoDB Connection Utility

MongoDB stores the submitted documents:
- Intern profiles (skills, education, encoded CV)
- Organization roles (job description, required skills)

Both are self-contained records keyed by the owning account's user_id
in PostgreSQL; no joins are needed.
"""
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from internmatch.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri, tz_aware=True)
    return _client


def get_mongo_db() -> Database:
    """Get the internmatch_docs database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection (see COLLECTIONS)."""
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
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "intern_profiles": "intern_profiles",
    "organization_roles": "organization_roles",
}


def init_mongo_indexes():
    """
    Create indexes. Call this once during app startup.
    """
    db = get_mongo_db()

    profiles = db[COLLECTIONS["intern_profiles"]]
    # One profile per account. The route checks first; this catches the race.
    profiles.create_index("user_id", unique=True)
    profiles.create_index("skills")
    profiles.create_index([("created_at", DESCENDING)])

    roles = db[COLLECTIONS["organization_roles"]]
    roles.create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])
    roles.create_index("required_skills")
    roles.create_index("is_active")

    logger.info("MongoDB indexes created successfully")
