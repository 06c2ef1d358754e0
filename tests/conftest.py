"""Pytest configuration and fixtures for neo-tokens tests."""

from typing import Any, Dict, Mapping, Optional

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from neo_tokens import (
    EngineConfig,
    FixedClock,
    Signer,
    SigningKey,
    TokenCodec,
    TokenEngine,
)

ISSUED_AT = 1000
HMAC_SECRET = b"neo-tokens-test-secret-0123456789abcdef"
OTHER_HMAC_SECRET = b"another-test-secret-fedcba9876543210xyz"


def sign_payload(
    key: SigningKey,
    payload: Mapping[str, Any],
    header: Optional[Dict[str, Any]] = None,
) -> str:
    """Build a token from an arbitrary payload, bypassing issuance rules."""
    codec = TokenCodec()
    header_segment = codec.encode_segment(header or {"alg": key.algorithm.value, "typ": "JWT"})
    payload_segment = codec.encode_segment(payload)
    signature = Signer(key).sign(f"{header_segment}.{payload_segment}".encode("ascii"))
    return codec.join(header_segment, payload_segment, codec.encode_bytes(signature))


def _pem_private(key) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def _pem_public(key) -> bytes:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture
def hmac_secret():
    """Shared secret long enough for HS256."""
    return HMAC_SECRET


@pytest.fixture
def other_hmac_secret():
    """A second, unrelated HS256 secret."""
    return OTHER_HMAC_SECRET


@pytest.fixture
def sign_token():
    """Helper that signs arbitrary payloads, bypassing issuance rules."""
    return sign_payload


@pytest.fixture
def clock():
    """Clock frozen at the standard issuance time."""
    return FixedClock(ISSUED_AT)


@pytest.fixture
def hmac_key():
    """HS256 signing key."""
    return SigningKey.symmetric("HS256", HMAC_SECRET)


@pytest.fixture
def hmac_config(hmac_key):
    """Default HS256 engine configuration."""
    return EngineConfig(key=hmac_key)


@pytest.fixture
def engine(hmac_config, clock):
    """HS256 engine on a fixed clock."""
    return TokenEngine(hmac_config, clock=clock)


@pytest.fixture(scope="session")
def rsa_private_key():
    """RSA private key shared by the test session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_private_pem(rsa_private_key):
    return _pem_private(rsa_private_key)


@pytest.fixture(scope="session")
def rsa_public_pem(rsa_private_key):
    return _pem_public(rsa_private_key)


@pytest.fixture(scope="session")
def ec_private_key():
    """P-256 private key shared by the test session."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_private_pem(ec_private_key):
    return _pem_private(ec_private_key)


@pytest.fixture(scope="session")
def ec_public_pem(ec_private_key):
    return _pem_public(ec_private_key)
