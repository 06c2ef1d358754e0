"""Token claims value object."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from ...utils.datetime import timestamp_to_utc
from ..enums import REGISTERED_CLAIMS


@dataclass(frozen=True)
class TokenClaims(Mapping[str, Any]):
    """Verified claim set.

    Read-only mapping over the decoded payload with typed accessors for the
    registered claims. Instances are only produced after the signature and
    the claim checks succeeded.
    """

    raw_claims: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.raw_claims, Mapping):
            raise TypeError("Token claims must be a mapping")
        object.__setattr__(self, "raw_claims", MappingProxyType(dict(self.raw_claims)))

    def __getitem__(self, name: str) -> Any:
        return self.raw_claims[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.raw_claims)

    def __len__(self) -> int:
        return len(self.raw_claims)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenClaims):
            return dict(self.raw_claims) == dict(other.raw_claims)
        if isinstance(other, Mapping):
            return dict(self.raw_claims) == dict(other)
        return NotImplemented

    @property
    def subject(self) -> Optional[str]:
        """Get subject (sub) claim."""
        return self.raw_claims.get("sub")

    @property
    def issuer(self) -> Optional[str]:
        """Get issuer (iss) claim."""
        return self.raw_claims.get("iss")

    @property
    def issued_at(self) -> Optional[datetime]:
        """Get issued at time as datetime."""
        return self._timestamp("iat")

    @property
    def expires_at(self) -> Optional[datetime]:
        """Get expiration time as datetime."""
        return self._timestamp("exp")

    @property
    def not_before(self) -> Optional[datetime]:
        """Get not before time as datetime."""
        return self._timestamp("nbf")

    @property
    def custom(self) -> Dict[str, Any]:
        """Get the application-defined claims."""
        return {name: value for name, value in self.raw_claims.items() if name not in REGISTERED_CLAIMS}

    def as_dict(self) -> Dict[str, Any]:
        """Return a mutable copy of the claims."""
        return dict(self.raw_claims)

    def _timestamp(self, name: str) -> Optional[datetime]:
        value = self.raw_claims.get(name)
        if value is None:
            return None
        return timestamp_to_utc(value)

    def __repr__(self) -> str:
        return f"TokenClaims({dict(self.raw_claims)!r})"
