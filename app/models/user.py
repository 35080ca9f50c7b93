"""
app/models/user.py

Purpose: User document model

- Identity (username, email, password hash)
- Profile (name, mobile, shipping addresses, wishlist)
- Login lockout counters
- Reset-password state (one active OTP at most)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from app.models.common import Bookkeeping, EntityModel, document_id
from utils.constants import UserType


class ShippingAddress(EntityModel):
    pincode: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    landmark: Optional[str] = None
    city: Optional[str] = None
    is_default: Optional[bool] = None
    state: Optional[str] = None
    address_type: Optional[str] = None
    full_name: Optional[str] = None
    mobile: Optional[Union[int, str]] = None
    address_no: Optional[Union[int, str]] = None


class WishlistItem(EntityModel):
    product_id: str


class ResetPasswordLink(EntityModel):
    code: str
    expire_time: datetime
    validated: bool = False


class User(Bookkeeping):
    username: str
    password: str
    email: str
    name: Optional[str] = None
    user_type: UserType = UserType.USER
    mobile_no: Optional[str] = None
    shipping_address: List[ShippingAddress] = Field(default_factory=list)
    wishlist: List[WishlistItem] = Field(default_factory=list)
    login_retry_limit: int = 0
    login_reactive_time: Optional[datetime] = None
    reset_password_link: Optional[ResetPasswordLink] = None


# Fields a client may never set through register
PROTECTED_FIELDS = {
    "login_retry_limit",
    "login_reactive_time",
    "reset_password_link",
    "is_deleted",
    "created_at",
    "updated_at",
}


def public_user(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Renders a stored user for API output: camelCase, ``id`` instead of
    ``_id``, and never the password hash.
    """
    fields = {k: v for k, v in document.items() if k != "_id"}
    data = User.model_validate(fields).to_wire()
    data.pop("password", None)
    data["id"] = document_id(document)
    return data
