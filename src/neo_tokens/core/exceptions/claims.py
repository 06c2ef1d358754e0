"""Claim structure exceptions."""

from typing import Any

from ..enums import TokenErrorKind
from .base import TokenError


class MissingClaim(TokenError):
    """Raised when a required claim is absent from the payload."""

    kind = TokenErrorKind.MISSING_CLAIM

    @classmethod
    def for_claim(cls, name: str) -> "MissingClaim":
        return cls(f"Required claim '{name}' is missing", details={"claim": name})


class InvalidClaimType(TokenError):
    """Raised when a claim holds a value of the wrong type."""

    kind = TokenErrorKind.INVALID_CLAIM_TYPE

    @classmethod
    def for_claim(cls, name: str, expected: str, value: Any) -> "InvalidClaimType":
        return cls(
            f"Claim '{name}' must be {expected}, got {type(value).__name__}",
            details={"claim": name, "expected": expected, "received_type": type(value).__name__},
        )
