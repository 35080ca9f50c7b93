"""
app/schemas/auth.py

Purpose: Request bodies for the auth and bulk-insert endpoints

Login, validate-otp and reset-password accept empty bodies on purpose:
missing fields are reported by the auth service as a 400 BAD_REQUEST,
not as a 422 schema failure.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.common import EntityModel
from app.models.user import ShippingAddress, WishlistItem
from utils.constants import UserType


class RegisterRequest(EntityModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    name: Optional[str] = None
    user_type: UserType = UserType.USER
    mobile_no: Optional[str] = None
    shipping_address: List[ShippingAddress] = Field(default_factory=list)
    wishlist: List[WishlistItem] = Field(default_factory=list)
    is_active: Optional[bool] = None
    added_by: Optional[str] = None
    updated_by: Optional[str] = None


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("email is required")
        return v


def stringify_code(v: Any) -> Any:
    # Clients sometimes send the code as a JSON number
    if v is None or isinstance(v, str):
        return v
    return str(v)


class ValidateOTPRequest(BaseModel):
    otp: Optional[str] = None

    @field_validator("otp", mode="before")
    @classmethod
    def otp_to_text(cls, v: Any) -> Any:
        return stringify_code(v)


class ResetPasswordRequest(EntityModel):
    code: Optional[str] = None
    new_password: Optional[str] = None

    @field_validator("code", mode="before")
    @classmethod
    def code_to_text(cls, v: Any) -> Any:
        return stringify_code(v)


class BulkInsertRequest(BaseModel):
    data: List[Dict[str, Any]] = Field(default_factory=list)
