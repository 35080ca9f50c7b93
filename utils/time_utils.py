"""
utils/time_utils.py

Purpose: Time and expiry helpers

- OTP expiry calculation and checks
- Login lockout window checks
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    """
    Naive UTC timestamp, matching what pymongo hands back for stored datetimes.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def calculate_expiry(minutes: int, start: Optional[datetime] = None) -> datetime:
    """
    Returns ``start`` (default now) plus ``minutes``.
    """
    return (start or utcnow()) + timedelta(minutes=minutes)


def is_locked_until(reactive_time: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """
    True while a login lockout window is still open.
    """
    if not reactive_time:
        return False
    return (now or utcnow()) < reactive_time
