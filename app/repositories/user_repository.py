"""
app/repositories/user_repository.py

Purpose: Credential store over the users collection

- Lookups by id, username, email and active reset code
- Unique-index-backed inserts
- Atomic single-document updates for login counters and reset state

Every lookup skips soft-deleted users.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import DuplicateEntityError
from app.core.logging import get_logger
from utils.time_utils import utcnow

logger = get_logger(__name__)

NOT_DELETED = {"is_deleted": {"$ne": True}}


def to_object_id(user_id: Any) -> Optional[ObjectId]:
    if isinstance(user_id, ObjectId):
        return user_id
    try:
        return ObjectId(str(user_id))
    except (InvalidId, TypeError):
        return None


class UserRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_by_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        return await self.collection.find_one({"_id": oid, **NOT_DELETED})

    async def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"username": username, **NOT_DELETED})

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"email": email, **NOT_DELETED})

    async def find_by_reset_code(self, code: str, now: Optional[datetime] = None) -> Optional[Dict[str, Any]]:
        """
        Returns the user holding ``code`` as an unexpired reset code.
        """
        return await self.collection.find_one({
            "reset_password_link.code": code,
            "reset_password_link.expire_time": {"$gt": now or utcnow()},
            **NOT_DELETED,
        })

    async def find_conflict(self, username: str, email: str) -> Optional[Dict[str, Any]]:
        """
        Returns a live user already holding the username or the email.
        """
        return await self.collection.find_one({
            "$or": [{"username": username}, {"email": email}],
            **NOT_DELETED,
        })

    async def insert(self, document: Dict[str, Any]) -> str:
        """
        Inserts a new user and returns its id.

        Raises:
            DuplicateEntityError: a unique index rejected the document
        """
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.warning("Insert rejected by unique index", extra={"username": document.get("username")})
            raise DuplicateEntityError() from e
        return str(result.inserted_id)

    async def increment_login_retry(self, user_id: ObjectId) -> int:
        """
        Atomically bumps the failed-login counter and returns the new value.
        """
        updated = await self.collection.find_one_and_update(
            {"_id": user_id},
            {"$inc": {"login_retry_limit": 1}, "$set": {"updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        return updated.get("login_retry_limit", 0) if updated else 0

    async def lock_login(self, user_id: ObjectId, reactive_time: datetime) -> None:
        await self.collection.update_one(
            {"_id": user_id},
            {"$set": {"login_reactive_time": reactive_time, "updated_at": utcnow()}},
        )

    async def reset_login_retry(self, user_id: ObjectId) -> None:
        await self.collection.update_one(
            {"_id": user_id},
            {"$set": {
                "login_retry_limit": 0,
                "login_reactive_time": None,
                "updated_at": utcnow(),
            }},
        )

    async def set_reset_password_link(self, user_id: ObjectId, link: Dict[str, Any]) -> None:
        """
        Stores ``link`` as the user's only reset state, replacing any earlier code.
        """
        await self.collection.update_one(
            {"_id": user_id},
            {"$set": {"reset_password_link": link, "updated_at": utcnow()}},
        )

    async def mark_otp_validated(self, user_id: ObjectId, code: str) -> bool:
        result = await self.collection.update_one(
            {"_id": user_id, "reset_password_link.code": code},
            {"$set": {"reset_password_link.validated": True, "updated_at": utcnow()}},
        )
        return result.matched_count > 0

    async def replace_password(self, user_id: ObjectId, code: str, password_hash: str) -> bool:
        """
        Swaps in a new password hash and consumes the reset code in one update.

        The filter requires the code to still be present, so two concurrent
        resets with the same code cannot both succeed.
        """
        result = await self.collection.update_one(
            {"_id": user_id, "reset_password_link.code": code},
            {"$set": {
                "password": password_hash,
                "reset_password_link": None,
                "login_retry_limit": 0,
                "login_reactive_time": None,
                "updated_at": utcnow(),
                "updated_by": str(user_id),
            }},
        )
        return result.modified_count > 0
