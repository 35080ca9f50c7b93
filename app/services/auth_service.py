"""
app/services/auth_service.py

Purpose: Authentication and password-reset flow

- Register: required fields, uniqueness, hashed password
- Login: credential check, retry counter, lockout window, bearer token
- Forgot password: issue an OTP and email it
- Validate OTP / reset password against the active reset code

Reset-password state per user:
    absent -> issued(code, expiry) -> [validated] -> absent
An expired code is simply never matched again; a new forgot-password
request overwrites the previous code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings
from app.core.exceptions import (
    AccountLockedError,
    DuplicateEntityError,
    InvalidCodeError,
    InvalidCredentialsError,
    InvalidOTPError,
    MissingParametersError,
    ValidationError,
)
from app.core.logging import get_logger, LogContext
from app.core.security import PasswordHasher, TokenIssuer
from app.models.user import PROTECTED_FIELDS, User
from app.repositories.user_repository import UserRepository
from app.services.email_service import EmailService
from utils.constants import MSG_LOGIN_FAILED
from utils.otp_utils import OTPGenerator
from utils.time_utils import calculate_expiry, is_locked_until, utcnow
from utils.validation_utils import is_blank, missing_fields, normalize_email, validate_otp_format

logger = get_logger(__name__)

REGISTER_REQUIRED = ("username", "password", "email")


class AuthOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"


@dataclass(frozen=True)
class AuthPolicy:
    otp_expire_minutes: int = 10
    max_login_retry_limit: int = 3
    login_reactive_minutes: int = 20

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthPolicy":
        return cls(
            otp_expire_minutes=settings.OTP_EXPIRE_MINUTES,
            max_login_retry_limit=settings.MAX_LOGIN_RETRY_LIMIT,
            login_reactive_minutes=settings.LOGIN_REACTIVE_MINUTES,
        )


@dataclass(frozen=True)
class LoginResult:
    id: str
    token: str


class AuthService:
    """
    Orchestrates the auth flow over the user repository.

    All collaborators are injected; nothing here reads global settings.
    """

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        otp: OTPGenerator,
        notifier: EmailService,
        policy: Optional[AuthPolicy] = None,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens
        self.otp = otp
        self.notifier = notifier
        self.policy = policy or AuthPolicy()

    # ------------------------------------------------------------------
    # Register
    # ------------------------------------------------------------------

    async def register(self, fields: Dict[str, Any], added_by: Optional[str] = None) -> str:
        """
        Creates a user and returns its id. Does not log the user in.

        Raises:
            MissingParametersError: username, password or email missing
            DuplicateEntityError: username or email already registered
            InvalidPasswordError: password too long to hash
            ValidationError: remaining fields do not fit the user shape
        """
        missing = missing_fields(fields, REGISTER_REQUIRED)
        if missing:
            raise MissingParametersError(details={"missing": missing})

        username = fields["username"].strip()
        email = normalize_email(fields["email"])

        with LogContext(username=username):
            conflict = await self.users.find_conflict(username, email)
            if conflict:
                field = "username" if conflict.get("username") == username else "email"
                logger.info(f"Registration rejected: {field} already taken")
                raise DuplicateEntityError(f"User with this {field} already exists")

            now = utcnow()
            profile = {k: v for k, v in fields.items() if k not in PROTECTED_FIELDS}
            profile.update(
                username=username,
                email=email,
                password=self.hasher.hash(fields["password"]),
                is_active=True,
                is_deleted=False,
                created_at=now,
                updated_at=now,
            )
            if added_by and not profile.get("added_by"):
                profile["added_by"] = added_by

            try:
                user = User.model_validate(profile)
            except PydanticValidationError as e:
                raise ValidationError(details=e.errors(include_url=False, include_context=False, include_input=False)) from e

            user_id = await self.users.insert(user.to_document())
            logger.info("User registered", extra={"user_id": user_id})
            return user_id

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    async def login(self, username: Optional[str], password: Optional[str]) -> LoginResult:
        """
        Verifies credentials and issues a bearer token.

        Unknown usernames, wrong passwords and locked accounts all answer
        with MSG_LOGIN_FAILED. Only existing users can be locked, so the
        lockout must not have a message of its own.

        Raises:
            MissingParametersError: username or password missing
            InvalidCredentialsError: unknown user or wrong password
            AccountLockedError: retry limit reached and lockout window open
        """
        if is_blank(username) or is_blank(password):
            raise MissingParametersError()

        username = username.strip()
        with LogContext(username=username):
            user = await self.users.find_by_username(username)
            if not user:
                logger.info("Login failed: unknown username")
                raise InvalidCredentialsError(MSG_LOGIN_FAILED)

            user_id = user["_id"]
            retries = user.get("login_retry_limit") or 0

            if retries >= self.policy.max_login_retry_limit:
                reactive_time = user.get("login_reactive_time")
                if is_locked_until(reactive_time):
                    remaining = max(1, int((reactive_time - utcnow()).total_seconds() // 60) + 1)
                    logger.warning(f"Login refused: account locked for {remaining} more minutes", extra={"user_id": user_id})
                    raise AccountLockedError(MSG_LOGIN_FAILED)
                # Lockout window is over, start counting afresh
                await self.users.reset_login_retry(user_id)
                retries = 0

            if not self.hasher.verify(password, user.get("password")):
                count = await self.users.increment_login_retry(user_id)
                logger.info(f"Login failed: wrong password (attempt {count})", extra={"user_id": user_id})
                if count >= self.policy.max_login_retry_limit:
                    await self.users.lock_login(
                        user_id, calculate_expiry(self.policy.login_reactive_minutes)
                    )
                    logger.warning("Account locked after repeated failures", extra={"user_id": user_id})
                raise InvalidCredentialsError(MSG_LOGIN_FAILED)

            if retries or user.get("login_reactive_time"):
                await self.users.reset_login_retry(user_id)

            token = self.tokens.issue(str(user_id))
            logger.info("Login successful", extra={"user_id": user_id})
            return LoginResult(id=str(user_id), token=token)

    # ------------------------------------------------------------------
    # Forgot password / OTP
    # ------------------------------------------------------------------

    async def forgot_password(self, email: Optional[str]) -> AuthOutcome:
        """
        Issues a fresh OTP for the user registered with ``email``.

        Returns RECORD_NOT_FOUND (not an error) when no user has that email.
        """
        if is_blank(email):
            raise MissingParametersError()

        email = normalize_email(email)
        with LogContext(email=email):
            user = await self.users.find_by_email(email)
            if not user:
                logger.info("Forgot password: no user with this email")
                return AuthOutcome.RECORD_NOT_FOUND

            issued = self.otp.issue(self.policy.otp_expire_minutes)
            await self.users.set_reset_password_link(user["_id"], {
                "code": issued.code,
                "expire_time": issued.expire_time,
                "validated": False,
            })

            sent = await self.notifier.send_reset_otp(user, issued.code, self.policy.otp_expire_minutes)
            if not sent:
                logger.warning("Reset OTP stored but email was not delivered", extra={"user_id": user["_id"]})

            logger.info("Reset OTP issued", extra={"user_id": user["_id"]})
            return AuthOutcome.SUCCESS

    async def validate_otp(self, otp: Optional[str]) -> AuthOutcome:
        """
        Confirms an OTP is active. The code stays usable until reset_password.

        Raises:
            MissingParametersError: otp missing
            InvalidOTPError: no user holds this code, or it has expired
        """
        if is_blank(otp):
            raise MissingParametersError()

        code = otp.strip()
        if not validate_otp_format(code, self.otp.length):
            raise InvalidOTPError()

        user = await self.users.find_by_reset_code(code)
        if not user:
            raise InvalidOTPError()

        if not await self.users.mark_otp_validated(user["_id"], code):
            # Replaced by a newer code between lookup and update
            raise InvalidOTPError()

        logger.info("Reset OTP validated", extra={"user_id": user["_id"]})
        return AuthOutcome.SUCCESS

    async def reset_password(self, code: Optional[str], new_password: Optional[str]) -> AuthOutcome:
        """
        Replaces the password of the user holding ``code`` and clears the code.

        Raises:
            MissingParametersError: code or new password missing
            InvalidCodeError: unknown or expired code
            InvalidPasswordError: new password too long to hash; the code stays usable
        """
        if is_blank(code) or is_blank(new_password):
            raise MissingParametersError()

        code = code.strip()
        if not validate_otp_format(code, self.otp.length):
            raise InvalidCodeError()

        user = await self.users.find_by_reset_code(code)
        if not user:
            raise InvalidCodeError()

        replaced = await self.users.replace_password(user["_id"], code, self.hasher.hash(new_password))
        if not replaced:
            raise InvalidCodeError()

        logger.info("Password reset", extra={"user_id": user["_id"]})
        await self.notifier.send_password_changed(user)
        return AuthOutcome.SUCCESS
