"""
utils/validation_utils.py

Purpose: Input validation

- Required-field checks for request payloads
- OTP format validation
- Input normalization
"""

import re
from typing import Any, Iterable, List, Mapping, Optional


def is_blank(value: Any) -> bool:
    """
    True for None, empty strings and whitespace-only strings.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(payload: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    """
    Returns the names of required fields that are absent or blank.

    Args:
        payload: Request fields
        required: Field names that must carry a value

    Returns:
        List of missing field names, in the order given
    """
    return [name for name in required if is_blank(payload.get(name))]


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_otp_format(otp: Optional[str], length: int = 6) -> bool:
    """
    Validates OTP format (exactly ``length`` digits).

    Args:
        otp: OTP string
        length: Expected number of digits

    Returns:
        True if valid
    """
    if not otp:
        return False

    return bool(re.fullmatch(rf"\d{{{length}}}", otp.strip()))
