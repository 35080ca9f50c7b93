"""
app/services/user_service.py

Purpose: User record retrieval for the admin API

- Fetch a live user by id
- Render it without credentials
"""

from typing import Any, Dict

from app.core.exceptions import ResourceNotFoundError
from app.core.logging import get_logger
from app.models.user import public_user
from app.repositories.user_repository import UserRepository

logger = get_logger(__name__)


async def get_user_profile(users: UserRepository, user_id: str) -> Dict[str, Any]:
    """
    Retrieves a user by ID.

    Args:
        users: User repository
        user_id: Hex ObjectId of the user

    Returns:
        Public user dict (camelCase, ``id``, no password)

    Raises:
        ResourceNotFoundError: no live user with this id
    """
    user = await users.find_by_id(user_id)
    if not user:
        logger.debug(f"User {user_id} not found")
        raise ResourceNotFoundError()
    return public_user(user)
