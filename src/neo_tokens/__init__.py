"""Neo-Tokens - signed, self-contained authentication tokens.

Issues and verifies compact JWS tokens (``header.payload.signature``) that
bind a claim set to a signature, so services can trust presented identity
without a session lookup.

Typical use::

    from neo_tokens import EngineConfig, SigningKey, TokenEngine

    engine = TokenEngine(EngineConfig(key=SigningKey.symmetric("HS256", secret)))
    token = engine.issue({"sub": "123"}, ttl=60).unwrap()
    result = engine.verify(token)
    if result.is_valid:
        user_id = result.claims.subject
"""

from .__version__ import __version__

from .config import EngineConfig, TokenSettings, get_token_settings, setup_logging

from .core import (
    Algorithm,
    Clock,
    EncodedToken,
    SigningKey,
    TokenClaims,
    TokenErrorKind,
    TokenHeader,
    TokenState,
)

from .core.exceptions import (
    AlgorithmMismatch,
    ConfigurationError,
    InvalidClaimType,
    InvalidSignature,
    InvalidTTL,
    MalformedEncoding,
    MalformedToken,
    MissingClaim,
    NeoTokensError,
    TokenError,
    TokenExpired,
    TokenNotYetValid,
    create_error_response,
)

from .application import (
    ClaimsValidator,
    IssueResult,
    Signer,
    TokenCodec,
    TokenEngine,
    VerificationResult,
)

from .infrastructure import FixedClock, SystemClock
from .infrastructure.factories import create_token_engine

__all__ = [
    "__version__",
    # Configuration
    "EngineConfig",
    "TokenSettings",
    "get_token_settings",
    "setup_logging",
    # Domain
    "Algorithm",
    "Clock",
    "EncodedToken",
    "SigningKey",
    "TokenClaims",
    "TokenErrorKind",
    "TokenHeader",
    "TokenState",
    # Exceptions
    "NeoTokensError",
    "ConfigurationError",
    "TokenError",
    "MalformedToken",
    "MalformedEncoding",
    "AlgorithmMismatch",
    "InvalidSignature",
    "MissingClaim",
    "InvalidClaimType",
    "TokenExpired",
    "TokenNotYetValid",
    "InvalidTTL",
    "create_error_response",
    # Engine
    "TokenCodec",
    "Signer",
    "ClaimsValidator",
    "TokenEngine",
    "IssueResult",
    "VerificationResult",
    # Infrastructure
    "FixedClock",
    "SystemClock",
    "create_token_engine",
]
