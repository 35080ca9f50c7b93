"""
app/api/deps.py

Purpose: FastAPI dependencies

- Hands the process-wide settings and Motor database to request handlers
- Builds the auth service from its collaborators
- Resolves the caller of protected routes from the bearer token
"""

from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import Settings, settings
from app.core.exceptions import AuthenticationError, InvalidTokenError
from app.core.security import TokenIssuer, build_password_hasher, build_token_issuer
from app.db.mongo import get_database
from app.repositories.user_repository import UserRepository
from app.services.auth_service import AuthPolicy, AuthService
from app.services.email_service import EmailService
from utils.constants import USERS_COLLECTION
from utils.otp_utils import OTPGenerator

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return settings


def get_db() -> AsyncIOMotorDatabase:
    return get_database()


def get_user_repository(db: AsyncIOMotorDatabase = Depends(get_db)) -> UserRepository:
    return UserRepository(db[USERS_COLLECTION])


def get_token_issuer(config: Settings = Depends(get_settings)) -> TokenIssuer:
    return build_token_issuer(config)


def get_email_service(config: Settings = Depends(get_settings)) -> EmailService:
    return EmailService(config)


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    tokens: TokenIssuer = Depends(get_token_issuer),
    notifier: EmailService = Depends(get_email_service),
    config: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(
        users=users,
        hasher=build_password_hasher(config),
        tokens=tokens,
        otp=OTPGenerator(length=config.OTP_LENGTH),
        notifier=notifier,
        policy=AuthPolicy.from_settings(config),
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
    users: UserRepository = Depends(get_user_repository),
) -> Dict[str, Any]:
    """
    Returns the user document behind the request's bearer token.

    Raises:
        AuthenticationError: no bearer token sent
        InvalidTokenError / ExpiredTokenError: token rejected
    """
    if credentials is None:
        raise AuthenticationError("Bearer token required")

    user_id = tokens.verify(credentials.credentials)
    user = await users.find_by_id(user_id)
    if not user:
        raise InvalidTokenError("Token user no longer exists")
    return user
