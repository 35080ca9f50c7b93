"""
utils/otp_utils.py

Purpose: One-time codes for the forgot-password flow

- Fixed-length numeric codes from a CSPRNG
- Expiry stamped by the caller's policy
"""

import secrets
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from utils.time_utils import calculate_expiry


@dataclass(frozen=True)
class IssuedOTP:
    code: str
    expire_time: datetime


class OTPGenerator:
    """
    Produces numeric OTPs. Holds no state; issued codes live on the user document.
    """

    def __init__(self, length: int = 6):
        self.length = length

    def generate(self) -> str:
        # Leading zeros are kept, so every code has exactly ``length`` digits
        return "".join(secrets.choice("0123456789") for _ in range(self.length))

    def issue(self, expire_minutes: int, now: Optional[datetime] = None) -> IssuedOTP:
        return IssuedOTP(code=self.generate(), expire_time=calculate_expiry(expire_minutes, now))
