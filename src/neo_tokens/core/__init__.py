"""Core token domain: enums, exceptions, value objects and protocols."""

from .enums import (
    DEFAULT_TOKEN_TYPE,
    REGISTERED_CLAIMS,
    STRING_CLAIMS,
    TIMESTAMP_CLAIMS,
    Algorithm,
    TokenErrorKind,
    TokenState,
)
from .protocols import Clock
from .value_objects import EncodedToken, SigningKey, TokenClaims, TokenHeader

__all__ = [
    "DEFAULT_TOKEN_TYPE",
    "REGISTERED_CLAIMS",
    "STRING_CLAIMS",
    "TIMESTAMP_CLAIMS",
    "Algorithm",
    "TokenErrorKind",
    "TokenState",
    "Clock",
    "EncodedToken",
    "SigningKey",
    "TokenClaims",
    "TokenHeader",
]
