"""Token engine: issuance and verification.

Orchestrates the codec, the signer and the claims validator. Every public
operation returns a result object carrying either a value or a TokenError;
taxonomy errors never escape as exceptions unless the caller asks for them
with ``unwrap()``.
"""

import logging
import math
import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple, Union

from ..config.engine_config import EngineConfig
from ..core.enums import TokenErrorKind, TokenState
from ..core.exceptions import (
    AlgorithmMismatch,
    ConfigurationError,
    InvalidClaimType,
    InvalidSignature,
    InvalidTTL,
    MalformedEncoding,
    TokenError,
    TokenExpired,
    TokenNotYetValid,
)
from ..core.protocols import Clock
from ..core.value_objects import TokenClaims, TokenHeader, mask_token
from ..infrastructure.clocks import SystemClock
from ..utils.datetime import Timestamp, to_timestamp
from .codec import TokenCodec
from .signer import Signer
from .validators import ClaimsValidator, check_registered_claim, normalize_claim_value

logger = logging.getLogger(__name__)

TTL = Union[int, float, timedelta]

_TEMPORAL_KINDS = (TokenErrorKind.TOKEN_EXPIRED, TokenErrorKind.TOKEN_NOT_YET_VALID)


@dataclass(frozen=True)
class IssueResult:
    """Outcome of token issuance."""

    token: Optional[str] = None
    claims: Optional[TokenClaims] = None
    error: Optional[TokenError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[TokenErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> str:
        """Return the token or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.token


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of token verification."""

    claims: Optional[TokenClaims] = None
    error: Optional[TokenError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[TokenErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def state(self) -> TokenState:
        """Lifecycle state implied by this result."""
        if self.error is None:
            return TokenState.VALID
        if isinstance(self.error, TokenExpired):
            return TokenState.EXPIRED
        if isinstance(self.error, TokenNotYetValid):
            return TokenState.NOT_YET_VALID
        return TokenState.INVALID

    def unwrap(self) -> TokenClaims:
        """Return the verified claims or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.claims


class _Snapshot(NamedTuple):
    """Everything derived from one EngineConfig, swapped as a unit."""

    config: EngineConfig
    signer: Signer
    validator: ClaimsValidator
    header_segment: str


class TokenEngine:
    """Issues and verifies signed compact tokens.

    The engine holds no per-token state. Issue and verify are pure functions
    of their input, the current configuration snapshot and the clock, and
    can be called concurrently without coordination. Each call reads the
    snapshot exactly once, so ``rotate`` never exposes a half-updated key.
    """

    def __init__(
        self,
        config: EngineConfig,
        clock: Optional[Clock] = None,
        codec: Optional[TokenCodec] = None,
    ):
        """Initialize token engine.

        Args:
            config: Immutable configuration snapshot
            clock: Time source, defaults to the system clock
            codec: Segment codec, defaults to TokenCodec

        Raises:
            ConfigurationError: If the configuration or key material is invalid
        """
        self._clock = clock or SystemClock()
        self._codec = codec or TokenCodec()
        self._rotation_lock = threading.Lock()
        self._snapshot = self._build_snapshot(config)

    @property
    def config(self) -> EngineConfig:
        """The configuration snapshot currently in use."""
        return self._snapshot.config

    @property
    def clock(self) -> Clock:
        return self._clock

    def rotate(self, config: EngineConfig) -> None:
        """Atomically replace the configuration snapshot.

        The new snapshot is fully built and validated before it becomes
        visible; calls already in flight finish with the previous one.

        Raises:
            ConfigurationError: If the new configuration is invalid; the
                current snapshot stays in place
        """
        snapshot = self._build_snapshot(config)
        with self._rotation_lock:
            previous = self._snapshot
            self._snapshot = snapshot
        logger.info(
            f"Token engine configuration rotated: {previous.config.algorithm.value} -> {config.algorithm.value}"
        )

    def issue(self, claims: Optional[Mapping[str, Any]] = None, ttl: Optional[TTL] = None) -> IssueResult:
        """Issue a signed token.

        The engine stamps ``iat`` and ``exp`` (plus ``nbf`` and ``iss`` when
        configured). Engine-computed registered claims always replace caller
        values of the same name.

        Args:
            claims: Caller claims (custom and registered)
            ttl: Positive lifetime in seconds or as a timedelta; defaults to
                the configured default TTL

        Returns:
            IssueResult with the token, or with InvalidTTL/InvalidClaimType

        Raises:
            ConfigurationError: If the engine has no signing material
        """
        snapshot = self._snapshot
        try:
            token, signed_claims = self._issue(snapshot, claims, ttl)
        except TokenError as e:
            logger.warning(f"Token issuance rejected: kind={e.kind.value} reason={e.message}")
            return IssueResult(error=e)

        logger.debug(
            f"Issued token: alg={snapshot.config.algorithm.value} sub={signed_claims.get('sub')} "
            f"exp={signed_claims['exp']}"
        )
        return IssueResult(token=token, claims=signed_claims)

    def verify(self, token: str, now: Optional[Timestamp] = None) -> VerificationResult:
        """Verify a token and return its claims.

        Checks run in a fixed order and stop at the first failure:
        segment structure, segment encoding, header algorithm, signature,
        claim structure, validity window. No claim content is interpreted
        before the signature is established.

        Args:
            token: Compact token string
            now: Verification time (Unix timestamp or datetime); defaults to
                the engine clock

        Returns:
            VerificationResult with the claims or the first failing error

        Raises:
            TypeError: If ``now`` is neither a Unix timestamp nor a datetime;
                this is a caller bug, not a token failure
        """
        snapshot = self._snapshot
        current_time = self._clock.now() if now is None else to_timestamp(now)
        try:
            claims = self._verify(snapshot, token, current_time)
        except TokenError as e:
            self._log_verification_failure(e, token)
            return VerificationResult(error=e)

        logger.debug(f"Token verified: sub={claims.get('sub')} token={_mask(token)}")
        return VerificationResult(claims=claims)

    def state(self, token: str, now: Optional[Timestamp] = None) -> TokenState:
        """Compute the lifecycle state of a token at a given time."""
        return self.verify(token, now).state

    def decode_unverified(self, token: str) -> Tuple[TokenHeader, Dict[str, Any]]:
        """Decode header and claims WITHOUT any verification.

        Only for debugging and logging. Never base an authorization decision
        on the result.
        """
        return self._codec.decode_unverified(token)

    def _build_snapshot(self, config: EngineConfig) -> _Snapshot:
        if not isinstance(config, EngineConfig):
            raise ConfigurationError("TokenEngine requires an EngineConfig")
        signer = Signer(config.key)
        validator = ClaimsValidator(
            required_claims=config.required_claims,
            clock_skew_seconds=config.clock_skew_seconds,
            require_expiration=config.require_expiration,
        )
        header = TokenHeader(alg=config.algorithm.value, typ=config.token_type)
        return _Snapshot(
            config=config,
            signer=signer,
            validator=validator,
            header_segment=self._codec.encode_segment(header.to_dict()),
        )

    def _issue(
        self,
        snapshot: _Snapshot,
        claims: Optional[Mapping[str, Any]],
        ttl: Optional[TTL],
    ) -> Tuple[str, TokenClaims]:
        lifetime = _ttl_seconds(ttl if ttl is not None else snapshot.config.default_ttl_seconds)
        payload = _merge_claims(snapshot.config, claims, int(self._clock.now()), lifetime)

        payload_segment = self._codec.encode_segment(payload)
        signing_input = f"{snapshot.header_segment}.{payload_segment}".encode("ascii")
        signature = snapshot.signer.sign(signing_input)

        token = self._codec.join(snapshot.header_segment, payload_segment, self._codec.encode_bytes(signature))
        return token, TokenClaims(payload)

    def _verify(self, snapshot: _Snapshot, token: str, now: float) -> TokenClaims:
        # Step 1: Segment structure
        encoded = self._codec.split(token)

        # Step 2: Segment encoding
        header = self._codec.decode_header(encoded.header)
        payload = self._codec.decode_segment(encoded.payload, "payload")

        # Step 3: Algorithm pinned by configuration, never chosen by the token
        expected_algorithm = snapshot.config.algorithm.value
        if header.alg != expected_algorithm:
            raise AlgorithmMismatch.for_header(expected_algorithm, header.alg)

        # Step 4: Signature
        try:
            signature = self._codec.decode_bytes(encoded.signature, "signature")
        except MalformedEncoding as e:
            raise InvalidSignature("Token signature segment is not valid base64url") from e

        if not snapshot.signer.verify(encoded.signing_input, signature):
            raise InvalidSignature(
                "Token signature does not match",
                details={"algorithm": expected_algorithm},
            )

        # Step 5: Claim structure
        snapshot.validator.check_structure(payload)

        # Step 6: Validity window
        snapshot.validator.check_temporal(payload, now)

        return TokenClaims(payload)

    def _log_verification_failure(self, error: TokenError, token: Any) -> None:
        message = (
            f"Token verification failed: kind={error.kind.value} reason={error.message} "
            f"details={error.details} token={_mask(token)}"
        )
        if error.kind in _TEMPORAL_KINDS:
            logger.info(message)
        else:
            logger.warning(message)


def _ttl_seconds(ttl: Optional[TTL]) -> int:
    """Convert a ttl to whole seconds, rounding fractions up."""
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    elif isinstance(ttl, (int, float)) and not isinstance(ttl, bool):
        seconds = float(ttl)
    else:
        raise InvalidTTL.for_value(ttl)

    if not math.isfinite(seconds) or seconds <= 0:
        raise InvalidTTL.for_value(ttl)
    return math.ceil(seconds)


def _merge_claims(
    config: EngineConfig,
    claims: Optional[Mapping[str, Any]],
    issued_at: int,
    lifetime: int,
) -> Dict[str, Any]:
    """Validate caller claims and stamp the engine-computed registered claims."""
    if claims is None:
        claims = {}
    if not isinstance(claims, Mapping):
        raise InvalidClaimType(
            "Claims must be a mapping",
            details={"received_type": type(claims).__name__},
        )

    payload: Dict[str, Any] = {}
    for name, value in claims.items():
        if not isinstance(name, str):
            raise InvalidClaimType("Claim names must be strings", details={"claim": repr(name)})
        check_registered_claim(name, value)
        payload[name] = normalize_claim_value(name, value)

    computed: Dict[str, Any] = {"iat": issued_at, "exp": issued_at + lifetime}
    if config.include_not_before:
        computed["nbf"] = issued_at
    if config.issuer is not None:
        computed["iss"] = config.issuer

    for name, value in computed.items():
        if name in payload and payload[name] != value:
            logger.debug(f"Replacing caller-supplied '{name}' claim with engine-computed value")
        payload[name] = value
    return payload


def _mask(token: Any) -> str:
    if not isinstance(token, str):
        return f"<{type(token).__name__}>"
    return mask_token(token)
