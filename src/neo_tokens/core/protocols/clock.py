"""Clock protocol contract."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for time sources used by the token engine.

    Defines ONLY the contract for reading the current time. Implementations
    must not block or perform I/O.
    """

    def now(self) -> float:
        """Return the current time as a Unix timestamp in seconds."""
        ...
