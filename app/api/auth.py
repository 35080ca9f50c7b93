"""
app/api/auth.py

Purpose: Admin authentication endpoints

- POST /auth/register
- POST /auth/login
- POST /auth/forgot-password
- POST /auth/validate-otp
- PUT  /auth/reset-password

Errors raised by the auth service are rendered by the handlers in
app/core/errors.py.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_auth_service
from app.core.logging import get_logger
from app.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    ValidateOTPRequest,
)
from app.schemas.response import record_not_found, success
from app.services.auth_service import AuthOutcome, AuthService
from utils.constants import (
    MSG_EMAIL_NOT_FOUND,
    MSG_LOGIN_SUCCESS,
    MSG_OTP_SENT,
    MSG_OTP_VALIDATED,
    MSG_PASSWORD_RESET,
    MSG_REGISTERED,
)

logger = get_logger(__name__)
router = APIRouter()


@router.post("/register")
async def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    """Create a user. Does not log in."""
    user_id = await auth.register(body.model_dump(exclude_none=True))
    return success(data={"id": user_id}, message=MSG_REGISTERED)


@router.post("/login")
async def login(body: Optional[LoginRequest] = None, auth: AuthService = Depends(get_auth_service)):
    """Exchange username/password for a bearer token."""
    body = body or LoginRequest()
    result = await auth.login(body.username, body.password)
    return success(data={"id": result.id, "token": result.token}, message=MSG_LOGIN_SUCCESS)


@router.post("/forgot-password")
async def forgot_password(body: ForgotPasswordRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Email a reset OTP. An unknown email is answered with 200 RECORD_NOT_FOUND.
    """
    outcome = await auth.forgot_password(body.email)
    if outcome is AuthOutcome.RECORD_NOT_FOUND:
        return record_not_found(MSG_EMAIL_NOT_FOUND)
    return success(message=MSG_OTP_SENT)


@router.post("/validate-otp")
async def validate_otp(body: Optional[ValidateOTPRequest] = None, auth: AuthService = Depends(get_auth_service)):
    body = body or ValidateOTPRequest()
    await auth.validate_otp(body.otp)
    return success(message=MSG_OTP_VALIDATED)


@router.put("/reset-password")
async def reset_password(body: Optional[ResetPasswordRequest] = None, auth: AuthService = Depends(get_auth_service)):
    body = body or ResetPasswordRequest()
    await auth.reset_password(body.code, body.new_password)
    return success(message=MSG_PASSWORD_RESET)
