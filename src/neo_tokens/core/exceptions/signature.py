"""Signature exceptions.

Both kinds are reported to callers as "invalid token"; the distinction
exists for server-side logging only.
"""

from typing import Optional

from ..enums import TokenErrorKind
from .base import TokenError


class AlgorithmMismatch(TokenError):
    """Raised when the header algorithm differs from the configured algorithm."""

    kind = TokenErrorKind.ALGORITHM_MISMATCH

    @classmethod
    def for_header(cls, expected: str, received: Optional[str]) -> "AlgorithmMismatch":
        """Create exception for a header naming the wrong algorithm."""
        return cls(
            f"Token algorithm '{received}' does not match configured algorithm '{expected}'",
            details={"expected_algorithm": expected, "received_algorithm": received},
        )


class InvalidSignature(TokenError):
    """Raised when the signature does not verify under the configured key."""

    kind = TokenErrorKind.INVALID_SIGNATURE
