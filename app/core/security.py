"""
app/core/security.py

Purpose: Credential primitives

- bcrypt password hashing and verification
- Signed bearer tokens bound to a user id (HS256 JWT)
"""

import time
from typing import Optional

import bcrypt
import jwt

from app.core.config import Settings
from app.core.exceptions import ExpiredTokenError, InvalidPasswordError, InvalidTokenError
from app.core.logging import get_logger

logger = get_logger(__name__)


class PasswordHasher:
    """bcrypt password hashing utility."""

    # bcrypt only reads the first 72 bytes of a password
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Raises:
            InvalidPasswordError: password longer than MAX_BYTES once encoded
        """
        if len(password.encode("utf-8")) > self.MAX_BYTES:
            raise InvalidPasswordError(f"Password must not exceed {self.MAX_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """
        Checks a plain password against a stored hash.
        A missing or malformed hash never verifies.
        """
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.warning(f"Stored password hash could not be checked: {e}")
            return False


class TokenIssuer:
    """
    Issues and verifies HS256 bearer tokens.

    The token carries the user id in ``sub`` plus ``iat``/``exp`` claims.
    """

    algorithm = "HS256"

    def __init__(self, secret_key: str, expire_minutes: int = 10000):
        self.secret_key = secret_key
        self.expire_seconds = expire_minutes * 60

    def issue(self, user_id: str) -> str:
        now = int(time.time())
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.expire_seconds,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Returns the user id embedded in the token.

        Raises:
            ExpiredTokenError: token signature is fine but ``exp`` has passed
            InvalidTokenError: anything else (bad signature, malformed, no subject)
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token decode failed: {e}")
            raise InvalidTokenError() from e

        user_id = payload.get("sub")
        if not user_id:
            raise InvalidTokenError("Token has no subject")
        return user_id


def build_password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)


def build_token_issuer(settings: Settings) -> TokenIssuer:
    return TokenIssuer(settings.SECRET_KEY, expire_minutes=settings.TOKEN_EXPIRE_MINUTES)
