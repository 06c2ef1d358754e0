"""
DateTime utilities for consistent timezone handling.
"""
from datetime import datetime, timedelta, timezone
from typing import Union


Timestamp = Union[int, float, datetime]


def to_utc(dt: datetime) -> datetime:
    """
    Convert a datetime to UTC timezone.

    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def timestamp_to_utc(timestamp: Union[int, float]) -> datetime:
    """
    Convert Unix timestamp to UTC datetime.
    """
    return datetime.fromtimestamp(timestamp, timezone.utc)


def to_timestamp(value: Timestamp) -> float:
    """
    Normalize a Unix timestamp or datetime to seconds since the epoch.

    Raises:
        TypeError: If the value is neither a number nor a datetime
    """
    if isinstance(value, datetime):
        return to_utc(value).timestamp()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a Unix timestamp or datetime, got {type(value).__name__}")
    return float(value)


def to_seconds(duration: Union[int, float, timedelta]) -> float:
    """
    Normalize a duration given in seconds or as a timedelta.

    Raises:
        TypeError: If the value is neither a number nor a timedelta
    """
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise TypeError(f"Expected seconds or timedelta, got {type(duration).__name__}")
    return float(duration)
