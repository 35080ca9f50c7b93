"""
app/api/user.py

Purpose: Admin user lookup (bearer token required)
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_user_repository
from app.repositories.user_repository import UserRepository
from app.schemas.response import success
from app.services.user_service import get_user_profile

router = APIRouter()


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    current_user: Dict[str, Any] = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """Return a single user without the password hash."""
    return success(data=await get_user_profile(users, user_id))
