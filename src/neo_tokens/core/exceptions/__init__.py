"""Token engine exceptions.

One exception class per failure kind. All of them derive from TokenError,
which carries the kind, internal details and a caller-safe message.
"""

from .base import (
    INVALID_TOKEN_MESSAGE,
    ConfigurationError,
    NeoTokensError,
    TokenError,
    create_error_response,
)
from .claims import InvalidClaimType, MissingClaim
from .issuance import InvalidTTL
from .malformed import MalformedEncoding, MalformedToken
from .signature import AlgorithmMismatch, InvalidSignature
from .temporal import TokenExpired, TokenNotYetValid

__all__ = [
    "INVALID_TOKEN_MESSAGE",
    "NeoTokensError",
    "ConfigurationError",
    "TokenError",
    "create_error_response",
    "MalformedToken",
    "MalformedEncoding",
    "AlgorithmMismatch",
    "InvalidSignature",
    "MissingClaim",
    "InvalidClaimType",
    "TokenExpired",
    "TokenNotYetValid",
    "InvalidTTL",
]
