"""Token value objects.

Immutable value objects for the token domain. Each value object handles
exactly one token concept.
"""

from .encoded_token import SEGMENT_SEPARATOR, EncodedToken, mask_token
from .signing_key import SigningKey
from .token_claims import TokenClaims
from .token_header import TokenHeader

__all__ = [
    "SEGMENT_SEPARATOR",
    "EncodedToken",
    "SigningKey",
    "TokenClaims",
    "TokenHeader",
    "mask_token",
]
