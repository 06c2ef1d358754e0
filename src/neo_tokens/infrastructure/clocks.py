"""Clock implementations."""

import threading
import time
from datetime import timedelta
from typing import Union

from ..utils.datetime import Timestamp, to_seconds, to_timestamp


class SystemClock:
    """Wall-clock time source backed by ``time.time()``."""

    def now(self) -> float:
        return time.time()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Manually controlled time source.

    Returns the same instant until moved with ``set`` or ``advance``.
    Intended for tests and for replaying verification at a known time.
    """

    def __init__(self, start: Timestamp = 0):
        self._lock = threading.Lock()
        self._now = to_timestamp(start)

    def now(self) -> float:
        with self._lock:
            return self._now

    def set(self, value: Timestamp) -> None:
        """Move the clock to an absolute time."""
        with self._lock:
            self._now = to_timestamp(value)

    def advance(self, delta: Union[int, float, timedelta]) -> float:
        """Move the clock forward (or backward for negative deltas).

        Returns:
            The new current time
        """
        with self._lock:
            self._now += to_seconds(delta)
            return self._now

    def __repr__(self) -> str:
        return f"FixedClock(now={self._now})"
