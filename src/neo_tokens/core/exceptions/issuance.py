"""Issuance exceptions."""

from typing import Any

from ..enums import TokenErrorKind
from .base import TokenError


class InvalidTTL(TokenError):
    """Raised when a token is requested with a non-positive time-to-live.

    This is a programming error in the caller, not an attack.
    """

    kind = TokenErrorKind.INVALID_TTL
    public_message = "invalid time-to-live"

    @classmethod
    def for_value(cls, ttl: Any) -> "InvalidTTL":
        return cls(f"ttl must be a positive duration, got {ttl!r}", details={"ttl": repr(ttl)})
