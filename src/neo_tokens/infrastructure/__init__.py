"""Infrastructure for neo-tokens: clocks and factories."""

from .clocks import FixedClock, SystemClock

__all__ = ["FixedClock", "SystemClock"]
