# app/models/user.py
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from app.database import user_collection
from app.utils.hash_utils import hash_password

logger = logging.getLogger(__name__)

# Never return the password hash outside this module unless asked for.
PUBLIC_PROJECTION = {"password": 0}


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"

    @classmethod
    def values(cls) -> List[str]:
        return [role.value for role in cls]


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _object_id(user_id: str) -> Optional[ObjectId]:
    if isinstance(user_id, ObjectId):
        return user_id
    if not ObjectId.is_valid(user_id):
        return None
    return ObjectId(user_id)


async def get_user_by_email(email: str, include_password: bool = False) -> Optional[dict]:
    projection = None if include_password else PUBLIC_PROJECTION
    return await user_collection.find_one({"email": normalize_email(email)}, projection)


async def get_user_by_id(user_id: str) -> Optional[dict]:
    oid = _object_id(user_id)
    if oid is None:
        return None
    return await user_collection.find_one({"_id": oid}, PUBLIC_PROJECTION)


async def create_user(email: str, password: str, name: str = "", role: str = Role.USER.value) -> dict:
    """
    Insert a new user and return it without the password.

    The password is hashed exactly once, here. Raises
    pymongo.errors.DuplicateKeyError when the email is already taken.
    """
    now = datetime.now(timezone.utc)
    document = {
        "email": normalize_email(email),
        "password": hash_password(password),
        "role": role,
        "name": (name or "").strip(),
        "created_at": now,
        "updated_at": now,
    }
    result = await user_collection.insert_one(document)
    user = {key: value for key, value in document.items() if key != "password"}
    user["_id"] = result.inserted_id
    logger.info("Created %s account %s", role, user["email"])
    return user


async def list_users() -> List[dict]:
    cursor = user_collection.find({}, PUBLIC_PROJECTION).sort("created_at", DESCENDING)
    return await cursor.to_list(length=None)


async def delete_user(user_id: str) -> bool:
    oid = _object_id(user_id)
    if oid is None:
        return False
    result = await user_collection.delete_one({"_id": oid})
    return result.deleted_count == 1


async def update_user_role(user_id: str, role: str) -> Optional[dict]:
    oid = _object_id(user_id)
    if oid is None:
        return None
    return await user_collection.find_one_and_update(
        {"_id": oid},
        {"$set": {"role": role, "updated_at": datetime.now(timezone.utc)}},
        projection=PUBLIC_PROJECTION,
        return_document=ReturnDocument.AFTER,
    )


async def count_users(query: Optional[dict] = None) -> int:
    return await user_collection.count_documents(query or {})


async def monthly_signup_rows(since: datetime) -> List[dict]:
    pipeline = [
        {"$match": {"created_at": {"$gte": since}}},
        {
            "$group": {
                "_id": {
                    "year": {"$year": "$created_at"},
                    "month": {"$month": "$created_at"},
                },
                "count": {"$sum": 1},
            }
        },
        {"$sort": {"_id.year": 1, "_id.month": 1}},
    ]
    return await user_collection.aggregate(pipeline).to_list(length=None)
