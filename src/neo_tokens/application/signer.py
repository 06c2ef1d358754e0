"""Signature computation and verification.

Handles ONLY signing and verifying bytes with the configured algorithm and
key. Does not handle token format, header checks or claims.
"""

import hmac
import logging
from typing import Any, Dict, Optional

from cryptography.hazmat.primitives.asymmetric import ec, rsa
from jwt.algorithms import get_default_algorithms
from jwt.exceptions import InvalidKeyError

from ..core.enums import Algorithm
from ..core.exceptions import ConfigurationError
from ..core.value_objects import SigningKey

logger = logging.getLogger(__name__)

_EC_CURVES: Dict[Algorithm, type] = {
    Algorithm.ES256: ec.SECP256R1,
    Algorithm.ES384: ec.SECP384R1,
    Algorithm.ES512: ec.SECP521R1,
}


class Signer:
    """Signer/verifier bound to exactly one algorithm and key.

    HMAC signatures are verified by recomputing the MAC and comparing it in
    constant time. RSA, RSA-PSS and ECDSA verification delegates to the
    ``cryptography`` backend through PyJWT's algorithm implementations, so
    signature bytes are interoperable with any JWS implementation.
    """

    def __init__(self, key: SigningKey):
        """Initialize signer and prepare key material.

        Args:
            key: Key material for the configured algorithm

        Raises:
            ConfigurationError: If the algorithm is unavailable or the key
                material does not fit the algorithm
        """
        self._algorithm = key.algorithm
        self._impl = self._resolve_algorithm(key.algorithm)

        if key.algorithm.is_symmetric:
            prepared = self._prepare_key(key.secret)
            self._signing_key: Optional[Any] = prepared
            self._verification_key: Any = prepared
            return

        private = self._prepare_key(key.private_key) if key.private_key is not None else None
        public = self._prepare_key(key.public_key) if key.public_key is not None else None
        self._check_key_type(private, public)

        self._signing_key = private
        self._verification_key = public if public is not None else private.public_key()

    @property
    def algorithm(self) -> Algorithm:
        """The algorithm this signer is bound to."""
        return self._algorithm

    @property
    def can_sign(self) -> bool:
        """True if private or secret material is available."""
        return self._signing_key is not None

    def sign(self, message: bytes) -> bytes:
        """Compute the signature over message.

        Raises:
            ConfigurationError: If only public key material is configured
        """
        if self._signing_key is None:
            raise ConfigurationError(f"No private key configured for {self._algorithm.value}; cannot sign")
        return self._impl.sign(message, self._signing_key)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Check signature over message.

        Returns:
            True if the signature is valid for the configured key
        """
        if self._algorithm.is_symmetric:
            expected = self._impl.sign(message, self._verification_key)
            return hmac.compare_digest(expected, signature)

        try:
            return bool(self._impl.verify(message, self._verification_key, signature))
        except Exception as e:
            logger.debug(f"{self._algorithm.value} verification raised {type(e).__name__}: {e}")
            return False

    def _resolve_algorithm(self, algorithm: Algorithm) -> Any:
        implementations = get_default_algorithms()
        try:
            return implementations[algorithm.value]
        except KeyError as e:
            raise ConfigurationError(
                f"Algorithm {algorithm.value} is unavailable; install the 'cryptography' package"
            ) from e

    def _prepare_key(self, material: Any) -> Any:
        try:
            return self._impl.prepare_key(material)
        except (InvalidKeyError, TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Key material is not usable with {self._algorithm.value}: {e}"
            ) from e

    def _check_key_type(self, private: Any, public: Any) -> None:
        if self._algorithm in _EC_CURVES:
            private_type, public_type = ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey
        else:
            private_type, public_type = rsa.RSAPrivateKey, rsa.RSAPublicKey

        if private is not None and not isinstance(private, private_type):
            raise ConfigurationError(f"Private key is not a {self._algorithm.value} private key")
        if public is not None and not isinstance(public, public_type):
            raise ConfigurationError(f"Public key is not a {self._algorithm.value} public key")

        curve = _EC_CURVES.get(self._algorithm)
        if curve is not None:
            for candidate in (private, public):
                if candidate is not None and not isinstance(candidate.curve, curve):
                    raise ConfigurationError(
                        f"{self._algorithm.value} requires curve {curve.name}, got {candidate.curve.name}"
                    )
