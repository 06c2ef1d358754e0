"""Immutable engine configuration snapshot."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet, Iterable, Optional

from ..core.enums import DEFAULT_TOKEN_TYPE, Algorithm
from ..core.exceptions import ConfigurationError
from ..core.value_objects import SigningKey

if TYPE_CHECKING:
    from .settings import TokenSettings


@dataclass(frozen=True)
class EngineConfig:
    """Configuration snapshot read by every issue/verify call.

    Instances are never mutated. Key rotation replaces the whole snapshot
    on the engine, so concurrent verifiers always see a consistent key.
    """

    key: SigningKey
    required_claims: FrozenSet[str] = field(default_factory=frozenset)
    clock_skew_seconds: int = 0
    require_expiration: bool = True
    include_not_before: bool = False
    issuer: Optional[str] = None
    default_ttl_seconds: Optional[int] = None
    token_type: str = DEFAULT_TOKEN_TYPE

    def __post_init__(self) -> None:
        if not isinstance(self.key, SigningKey):
            raise ConfigurationError("EngineConfig.key must be a SigningKey")
        if isinstance(self.required_claims, str):
            raise ConfigurationError("required_claims must be a collection of claim names")
        object.__setattr__(self, "required_claims", frozenset(self.required_claims))
        if isinstance(self.clock_skew_seconds, bool) or not isinstance(self.clock_skew_seconds, int) \
                or self.clock_skew_seconds < 0:
            raise ConfigurationError("Clock skew must be a non-negative integer")
        if self.issuer is not None and not isinstance(self.issuer, str):
            raise ConfigurationError("issuer must be a string")
        if self.default_ttl_seconds is not None and (
            isinstance(self.default_ttl_seconds, bool)
            or not isinstance(self.default_ttl_seconds, int)
            or self.default_ttl_seconds <= 0
        ):
            raise ConfigurationError("default_ttl_seconds must be a positive integer")
        if not self.token_type or not isinstance(self.token_type, str):
            raise ConfigurationError("token_type must be a non-empty string")

    @property
    def algorithm(self) -> Algorithm:
        """The single algorithm tokens are signed and verified with."""
        return self.key.algorithm

    @classmethod
    def from_settings(cls, settings: "TokenSettings") -> "EngineConfig":
        """Build a snapshot from environment-driven settings.

        Raises:
            ConfigurationError: If key material is missing or inconsistent
        """
        algorithm = Algorithm(settings.algorithm)
        if algorithm.is_symmetric:
            secret = _load_key(
                settings.secret_key.get_secret_value() if settings.secret_key else None,
                settings.secret_key_file,
                "secret key",
            )
            if secret is None:
                raise ConfigurationError(
                    f"{algorithm.value} requires NEO_TOKENS_SECRET_KEY or NEO_TOKENS_SECRET_KEY_FILE"
                )
            # Secret files usually end with a newline that is not part of the key
            key = SigningKey.symmetric(algorithm, secret.rstrip("\r\n"))
        else:
            private_key = _load_key(
                settings.private_key.get_secret_value() if settings.private_key else None,
                settings.private_key_file,
                "private key",
            )
            public_key = _load_key(settings.public_key, settings.public_key_file, "public key")
            key = SigningKey.asymmetric(algorithm, private_key=private_key, public_key=public_key)

        return cls(
            key=key,
            required_claims=_as_claim_names(settings.get_required_claims()),
            clock_skew_seconds=settings.clock_skew_seconds,
            require_expiration=settings.require_expiration,
            include_not_before=settings.include_not_before,
            issuer=settings.issuer,
            default_ttl_seconds=settings.default_ttl_seconds,
        )


def _load_key(value: Optional[str], file_path: Optional[Path], label: str) -> Optional[str]:
    if value:
        return value
    if file_path is None:
        return None
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {label} file {file_path}") from exc


def _as_claim_names(names: Iterable[str]) -> FrozenSet[str]:
    return frozenset(name.strip() for name in names if name and name.strip())
