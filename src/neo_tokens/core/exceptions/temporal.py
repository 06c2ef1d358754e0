"""Validity window exceptions with timestamp information."""

from datetime import datetime
from typing import Optional

from ...utils.datetime import timestamp_to_utc
from ..enums import TokenErrorKind
from .base import TokenError


class TokenExpired(TokenError):
    """Raised when the current time is at or past the token's expiry.

    Callers usually map this to a refresh flow.
    """

    kind = TokenErrorKind.TOKEN_EXPIRED
    public_message = "token expired"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        expired_at: Optional[int] = None,
        current_time: Optional[float] = None,
        clock_skew_seconds: int = 0,
    ) -> None:
        """Initialize token expiration exception.

        Args:
            message: Human-readable error message
            expired_at: The token's ``exp`` claim
            current_time: Verification time as a Unix timestamp
            clock_skew_seconds: Skew tolerance that was applied
        """
        self.expired_at = expired_at
        self.current_time = current_time
        self.clock_skew_seconds = clock_skew_seconds
        super().__init__(
            message,
            details={
                "expired_at": expired_at,
                "current_time": current_time,
                "seconds_expired": self.seconds_expired,
                "clock_skew_seconds": clock_skew_seconds,
            },
        )

    @property
    def seconds_expired(self) -> Optional[int]:
        """Get number of seconds since the token expired."""
        if self.expired_at is None or self.current_time is None:
            return None
        return max(0, int(self.current_time - self.expired_at))

    @property
    def expired_at_datetime(self) -> Optional[datetime]:
        """Get expiry as a UTC datetime."""
        if self.expired_at is None:
            return None
        return timestamp_to_utc(self.expired_at)


class TokenNotYetValid(TokenError):
    """Raised when the current time is before the token's not-before time.

    Callers usually map this to "retry later".
    """

    kind = TokenErrorKind.TOKEN_NOT_YET_VALID
    public_message = "token not yet valid"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        not_before: Optional[int] = None,
        current_time: Optional[float] = None,
        clock_skew_seconds: int = 0,
    ) -> None:
        self.not_before = not_before
        self.current_time = current_time
        self.clock_skew_seconds = clock_skew_seconds
        super().__init__(
            message,
            details={
                "not_before": not_before,
                "current_time": current_time,
                "seconds_until_valid": self.seconds_until_valid,
                "clock_skew_seconds": clock_skew_seconds,
            },
        )

    @property
    def seconds_until_valid(self) -> Optional[int]:
        """Get number of seconds until the token becomes valid."""
        if self.not_before is None or self.current_time is None:
            return None
        return max(0, int(self.not_before - self.current_time))
