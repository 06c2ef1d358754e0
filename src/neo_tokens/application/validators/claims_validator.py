"""Claim structure and validity window validation."""

import math
from typing import AbstractSet, Any, Iterable, Mapping

from ...core.enums import STRING_CLAIMS, TIMESTAMP_CLAIMS
from ...core.exceptions import (
    ConfigurationError,
    InvalidClaimType,
    MissingClaim,
    TokenExpired,
    TokenNotYetValid,
)

_MAX_NESTING_DEPTH = 32


class ClaimsValidator:
    """Claims validator following maximum separation principle.

    Handles ONLY claim presence, claim types and the validity window.
    Does not handle token format or signatures; callers must only pass
    claims whose signature has already been verified.
    """

    def __init__(
        self,
        required_claims: Iterable[str] = (),
        clock_skew_seconds: int = 0,
        require_expiration: bool = True,
    ):
        """Initialize claims validator.

        Args:
            required_claims: Claim names every token must carry
            clock_skew_seconds: Tolerance added to temporal boundaries to
                absorb clock drift between servers
            require_expiration: Whether a token without 'exp' is rejected
        """
        if isinstance(clock_skew_seconds, bool) or not isinstance(clock_skew_seconds, int) or clock_skew_seconds < 0:
            raise ConfigurationError("Clock skew must be a non-negative integer")

        required = frozenset(required_claims)
        if require_expiration:
            required = required | {"exp"}

        self._required_claims = required
        self._clock_skew_seconds = clock_skew_seconds
        self._require_expiration = require_expiration

    @property
    def required_claims(self) -> AbstractSet[str]:
        return self._required_claims

    @property
    def clock_skew_seconds(self) -> int:
        return self._clock_skew_seconds

    def check_structure(self, claims: Mapping[str, Any]) -> None:
        """Check required claims are present and registered claims are typed.

        Raises:
            MissingClaim: If a required claim is absent
            InvalidClaimType: If a registered claim holds the wrong type
        """
        for name in sorted(self._required_claims):
            if name not in claims:
                raise MissingClaim.for_claim(name)

        for name, value in claims.items():
            check_registered_claim(name, value)

    def check_temporal(self, claims: Mapping[str, Any], now: float) -> None:
        """Check the validity window, expiration first.

        A token is expired when ``now >= exp + skew`` and not yet valid when
        ``now < nbf - skew``. Absent claims are not enforced here.

        Raises:
            TokenExpired: If the token has expired
            TokenNotYetValid: If the token is not valid yet
        """
        exp = claims.get("exp")
        if exp is not None and now >= exp + self._clock_skew_seconds:
            raise TokenExpired(
                f"Token expired at {exp}",
                expired_at=exp,
                current_time=now,
                clock_skew_seconds=self._clock_skew_seconds,
            )

        nbf = claims.get("nbf")
        if nbf is not None and now < nbf - self._clock_skew_seconds:
            raise TokenNotYetValid(
                f"Token not valid before {nbf}",
                not_before=nbf,
                current_time=now,
                clock_skew_seconds=self._clock_skew_seconds,
            )


def check_registered_claim(name: str, value: Any) -> None:
    """Check a single claim against the type mandated for registered names.

    Custom claims are accepted as-is.

    Raises:
        InvalidClaimType: If a registered claim holds the wrong type
    """
    if name in TIMESTAMP_CLAIMS:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidClaimType.for_claim(name, "a non-negative integer timestamp", value)
    elif name in STRING_CLAIMS:
        if not isinstance(value, str):
            raise InvalidClaimType.for_claim(name, "a string", value)


def normalize_claim_value(name: str, value: Any, depth: int = 0) -> Any:
    """Check that a claim value is JSON-like and return its plain JSON form.

    Accepted: str, int, finite float, bool, None, and sequences (list or
    tuple) or string-keyed mappings of those. Sequences come back as lists
    and mappings as dicts, so the value equals what verification decodes.

    Raises:
        InvalidClaimType: If the value cannot be represented in a token
    """
    if depth > _MAX_NESTING_DEPTH:
        raise InvalidClaimType(f"Claim '{name}' is nested too deeply", details={"claim": name})

    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidClaimType.for_claim(name, "a finite number", value)
        return value
    if isinstance(value, (list, tuple)):
        return [normalize_claim_value(name, item, depth + 1) for item in value]
    if isinstance(value, Mapping):
        normalized = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidClaimType(
                    f"Claim '{name}' contains a non-string key", details={"claim": name}
                )
            normalized[key] = normalize_claim_value(name, item, depth + 1)
        return normalized
    raise InvalidClaimType.for_claim(name, "a JSON-compatible value", value)
