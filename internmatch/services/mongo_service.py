"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. intern_profiles     - One submitted profile per intern account
2. organization_roles  - Internship roles posted by organizations

Profiles and roles are created once and read back; nothing here
updates or deletes them.
"""

from datetime import datetime, timezone
from typing import Optional, List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.collection import Collection

from internmatch.db.mongodb import get_collection, COLLECTIONS

# ObjectIds break ties between documents created in the same millisecond
NEWEST_FIRST = [("created_at", DESCENDING), ("_id", DESCENDING)]


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict (_id -> id)."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# INTERN PROFILES COLLECTION
# ============================================================

class InternProfileService:
    """
    Handles intern profile storage.
    """

    # Profile listings never need the encoded CV
    SUMMARY_PROJECTION = {"cv_base64": 0}

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["intern_profiles"])

    def insert(self, user_id: int, data: dict) -> dict:
        """
        Insert an intern profile.

        Args:
            user_id: PostgreSQL account id of the owning intern
            data: Validated profile fields (snake_case)

        Returns:
            The stored document, serialized
        """
        now = _utcnow()
        doc = {
            "user_id": user_id,
            **data,
            "created_at": now,
            "updated_at": now,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def exists_for_user(self, user_id: int) -> bool:
        return self.collection.find_one({"user_id": user_id}, {"_id": 1}) is not None

    def get_by_user(self, user_id: int, include_cv: bool = False) -> Optional[dict]:
        """Fetch the profile owned by an account."""
        projection = None if include_cv else self.SUMMARY_PROJECTION
        doc = self.collection.find_one({"user_id": user_id}, projection)
        return serialize_doc(doc)

    def list_all(self) -> List[dict]:
        """Fetch every profile, newest first, without the encoded CV."""
        cursor = self.collection.find({}, self.SUMMARY_PROJECTION).sort(NEWEST_FIRST)
        return serialize_docs(list(cursor))


# ============================================================
# ORGANIZATION ROLES COLLECTION
# ============================================================

class OrganizationRoleService:
    """
    Handles organization role storage.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["organization_roles"])

    def insert(self, user_id: int, data: dict) -> dict:
        """
        Insert a posted role. New roles are active.

        Example data:
        {
            "org_name": "TechCorp Solutions",
            "org_email": "jobs@techcorp.io",
            "role_title": "Backend Intern",
            "job_description": "Build REST APIs ...",
            "required_skills": ["Python", "SQL"],
            "internship_type": "paid",
            "location": "Remote",
            "duration": "3 months"
        }
        """
        now = _utcnow()
        doc = {
            "user_id": user_id,
            **data,
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def get_by_id(self, role_id: str) -> Optional[dict]:
        """Fetch a role by ObjectId string. Malformed ids find nothing."""
        try:
            oid = ObjectId(role_id)
        except (InvalidId, TypeError):
            return None
        return serialize_doc(self.collection.find_one({"_id": oid}))

    def list_by_user(self, user_id: int) -> List[dict]:
        """Roles posted by an account, newest first."""
        cursor = self.collection.find({"user_id": user_id}).sort(NEWEST_FIRST)
        return serialize_docs(list(cursor))


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_intern_profile_service() -> InternProfileService:
    return InternProfileService()


def get_organization_role_service() -> OrganizationRoleService:
    return OrganizationRoleService()
