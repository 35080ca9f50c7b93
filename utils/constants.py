"""
utils/constants.py

Purpose: Centralized static content

- User-facing response messages
- Email templates for OTP delivery
- Reusable enums and constants

(Prevents hardcoding across the codebase)
"""

from enum import IntEnum, Enum


# ============================================================
# ENUMS
# ============================================================

class UserType(IntEnum):
    USER = 1
    ADMIN = 2


class OrderStatus(str, Enum):
    PLACED = "Placed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    REFUNDED = "Refunded"


# ============================================================
# COLLECTIONS
# ============================================================

USERS_COLLECTION = "users"
CARTS_COLLECTION = "carts"
ORDERS_COLLECTION = "orders"
ROUTE_ROLES_COLLECTION = "route_roles"


# ============================================================
# RESPONSE MESSAGES
# ============================================================

MSG_REGISTERED = "User registered successfully"
MSG_LOGIN_SUCCESS = "Login successful"
MSG_OTP_SENT = "OTP sent to your registered email"
MSG_OTP_VALIDATED = "OTP verified"
MSG_PASSWORD_RESET = "Password reset successfully"
MSG_EMAIL_NOT_FOUND = "No user is registered with this email"
MSG_BULK_INSERTED = "Records created successfully"

# Single external message for every login failure, lockout included, so
# callers cannot tell an unknown username from a known one
MSG_LOGIN_FAILED = "Incorrect username or password"


# ============================================================
# EMAIL TEMPLATES
# ============================================================

EMAIL_SUBJECT_RESET_OTP = "Reset your password"

EMAIL_BODY_RESET_OTP = """Hi {name},

Use the code below to reset your password:

    {code}

The code expires in {minutes} minutes. If you did not request a password reset you can ignore this email.
"""

EMAIL_SUBJECT_PASSWORD_CHANGED = "Your password was changed"

EMAIL_BODY_PASSWORD_CHANGED = """Hi {name},

The password for your account ({username}) was just changed.

If this was not you, contact an administrator immediately.
"""
