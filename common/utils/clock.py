"""
Timestamp helpers shared by the OKAIgpt stores
"""
from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC now, matching the TIMESTAMP (without time zone) columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def bump_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Return a fresh timestamp that is strictly later than ``previous``.

    Two writes inside the same clock tick would otherwise leave
    ``updated_at`` unchanged.
    """
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an offset-aware datetime to naive UTC; naive values are taken as UTC already"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
