"""
Core token enums.

Defines the algorithm identifiers, failure kinds and lifecycle states
used throughout the token engine.
"""

from enum import Enum


class Algorithm(str, Enum):
    """
    Signing algorithms the engine can be configured with.

    Exactly one algorithm is active per engine instance. The value is the
    name written into the token header's ``alg`` field.
    """
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"
    ES256 = "ES256"
    ES384 = "ES384"
    ES512 = "ES512"

    @property
    def is_symmetric(self) -> bool:
        """True for HMAC algorithms keyed with a shared secret."""
        return self.value.startswith("HS")

    @property
    def digest_size(self) -> int:
        """Output size in bytes of the hash function behind the algorithm."""
        return int(self.value[2:]) // 8


class TokenErrorKind(str, Enum):
    """
    Failure kinds reported by the token engine.

    Every failure path of issue/verify maps to exactly one kind:
    - MALFORMED_TOKEN / MALFORMED_ENCODING: structurally invalid input
    - ALGORITHM_MISMATCH / INVALID_SIGNATURE: forged, tampered or wrong-key token
    - MISSING_CLAIM / INVALID_CLAIM_TYPE: payload violates the required shape
    - TOKEN_EXPIRED / TOKEN_NOT_YET_VALID: outside the validity window
    - INVALID_TTL: issuance requested with a non-positive lifetime
    """
    MALFORMED_TOKEN = "malformed_token"
    MALFORMED_ENCODING = "malformed_encoding"
    ALGORITHM_MISMATCH = "algorithm_mismatch"
    INVALID_SIGNATURE = "invalid_signature"
    MISSING_CLAIM = "missing_claim"
    INVALID_CLAIM_TYPE = "invalid_claim_type"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_NOT_YET_VALID = "token_not_yet_valid"
    INVALID_TTL = "invalid_ttl"


class TokenState(Enum):
    """
    Lifecycle state of a token, computed at verification time.

    States are never stored; they derive from token content and the clock:
    NOT_YET_VALID -> VALID -> EXPIRED, with INVALID reachable from anywhere.
    """
    NOT_YET_VALID = "not_yet_valid"
    VALID = "valid"
    EXPIRED = "expired"
    INVALID = "invalid"


# Registered claim names and the Python types they must hold.
TIMESTAMP_CLAIMS = ("exp", "nbf", "iat")
STRING_CLAIMS = ("iss", "sub")
REGISTERED_CLAIMS = frozenset(TIMESTAMP_CLAIMS + STRING_CLAIMS)

DEFAULT_TOKEN_TYPE = "JWT"
