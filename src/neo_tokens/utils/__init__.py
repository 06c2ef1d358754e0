"""Utility helpers for neo-tokens."""

from .datetime import Timestamp, timestamp_to_utc, to_seconds, to_timestamp, to_utc

__all__ = [
    "Timestamp",
    "timestamp_to_utc",
    "to_seconds",
    "to_timestamp",
    "to_utc",
]
