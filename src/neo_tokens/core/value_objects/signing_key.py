"""Signing key value object."""

from dataclasses import dataclass
from typing import Any, Optional, Union

from ..enums import Algorithm
from ..exceptions import ConfigurationError


KeyMaterial = Union[str, bytes, Any]


@dataclass(frozen=True, repr=False)
class SigningKey:
    """Key material for exactly one signing algorithm.

    Symmetric algorithms use ``secret``; asymmetric algorithms use a private
    key (signing, and verification through its public half) and/or a public
    key (verification only). Keys may be PEM text or ``cryptography`` key
    objects. The material never appears in ``repr`` or in a token.
    """

    algorithm: Algorithm
    secret: Optional[bytes] = None
    private_key: Optional[KeyMaterial] = None
    public_key: Optional[KeyMaterial] = None

    def __post_init__(self) -> None:
        """Validate that the material matches the algorithm family."""
        try:
            algorithm = Algorithm(self.algorithm)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unsupported algorithm '{self.algorithm}'",
                details={"supported_algorithms": [a.value for a in Algorithm]},
            ) from exc
        object.__setattr__(self, "algorithm", algorithm)

        if algorithm.is_symmetric:
            if self.private_key is not None or self.public_key is not None:
                raise ConfigurationError(f"{algorithm.value} takes a shared secret, not a key pair")
            if self.secret is None:
                raise ConfigurationError(f"{algorithm.value} requires a shared secret")
            secret = self.secret.encode("utf-8") if isinstance(self.secret, str) else bytes(self.secret)
            if len(secret) < algorithm.digest_size:
                raise ConfigurationError(
                    f"{algorithm.value} secret must be at least {algorithm.digest_size} bytes",
                    details={"secret_length": len(secret)},
                )
            object.__setattr__(self, "secret", secret)
        else:
            if self.secret is not None:
                raise ConfigurationError(f"{algorithm.value} takes a key pair, not a shared secret")
            if self.private_key is None and self.public_key is None:
                raise ConfigurationError(f"{algorithm.value} requires a private or public key")
            object.__setattr__(self, "private_key", _normalize_pem(self.private_key))
            object.__setattr__(self, "public_key", _normalize_pem(self.public_key))

    @classmethod
    def symmetric(cls, algorithm: Union[Algorithm, str], secret: Union[str, bytes]) -> "SigningKey":
        """Create a key for an HMAC algorithm."""
        return cls(algorithm=algorithm, secret=secret)

    @classmethod
    def asymmetric(
        cls,
        algorithm: Union[Algorithm, str],
        *,
        private_key: Optional[KeyMaterial] = None,
        public_key: Optional[KeyMaterial] = None,
    ) -> "SigningKey":
        """Create a key for an RSA, RSA-PSS or ECDSA algorithm."""
        return cls(algorithm=algorithm, private_key=private_key, public_key=public_key)

    @property
    def can_sign(self) -> bool:
        """True if the key holds material able to produce signatures."""
        return self.secret is not None or self.private_key is not None

    def __repr__(self) -> str:
        material = "secret" if self.algorithm.is_symmetric else (
            "private" if self.private_key is not None else "public"
        )
        return f"SigningKey(algorithm={self.algorithm.value!r}, material={material!r})"


def _normalize_pem(value: Optional[KeyMaterial]) -> Optional[KeyMaterial]:
    if isinstance(value, str):
        # Support \n-delimited environment secrets
        return value.strip().replace("\\n", "\n")
    return value
