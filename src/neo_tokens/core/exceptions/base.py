"""Base exceptions for neo-tokens.

This module defines the base exception hierarchy for the token engine.
Every taxonomy exception inherits from TokenError and carries an error kind,
internal details for server-side logging, and a caller-safe public message.
"""

from typing import Any, ClassVar, Dict, Optional

from ..enums import TokenErrorKind


INVALID_TOKEN_MESSAGE = "invalid token"


class NeoTokensError(Exception):
    """Base exception for all neo-tokens errors.

    Includes structured error information for debugging. Details may contain
    internal information and must never be sent to the token holder.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NeoTokensError):
    """Raised when engine configuration or key material is invalid."""


class TokenError(NeoTokensError):
    """Base exception for failures of token issuance and verification."""

    kind: ClassVar[TokenErrorKind]
    public_message: ClassVar[str] = INVALID_TOKEN_MESSAGE

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or self.public_message,
            error_code=self.kind.value,
            details=details,
        )

    @property
    def is_verification_failure(self) -> bool:
        """True when the error rejects a presented token (maps to 401)."""
        return self.kind is not TokenErrorKind.INVALID_TTL

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, message={self.message!r})"


def create_error_response(exception: TokenError) -> Dict[str, Any]:
    """Create a caller-safe error response from a token error.

    Only the error kind and the public message are exposed; internal
    details stay in server-side logs.

    Args:
        exception: The token error

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.kind.value,
            "message": exception.public_message,
        }
    }
