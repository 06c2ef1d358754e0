"""
Unit tests for token value objects.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from neo_tokens import EncodedToken, MalformedEncoding, TokenClaims, TokenHeader
from neo_tokens.core.value_objects import mask_token


class TestTokenClaims:
    """Test the verified claim set."""

    @pytest.fixture
    def claims(self):
        return TokenClaims(
            {"sub": "123", "iss": "neo-auth", "iat": 1000, "exp": 1060, "nbf": 1000, "role": "admin"}
        )

    def test_mapping_interface(self, claims):
        assert claims["sub"] == "123"
        assert claims.get("missing") is None
        assert "role" in claims
        assert len(claims) == 6
        assert set(claims) == {"sub", "iss", "iat", "exp", "nbf", "role"}

    def test_registered_accessors(self, claims):
        assert claims.subject == "123"
        assert claims.issuer == "neo-auth"
        assert claims.issued_at == datetime(1970, 1, 1, 0, 16, 40, tzinfo=timezone.utc)
        assert claims.expires_at == datetime(1970, 1, 1, 0, 17, 40, tzinfo=timezone.utc)
        assert claims.not_before == claims.issued_at

    def test_absent_accessors(self):
        claims = TokenClaims({"data": 1})

        assert claims.subject is None
        assert claims.expires_at is None

    def test_custom_claims(self, claims):
        assert claims.custom == {"role": "admin"}

    def test_equality_with_mapping(self, claims):
        assert claims == claims.as_dict()
        assert claims == TokenClaims(claims.as_dict())
        assert claims != {"sub": "123"}

    def test_immutable(self, claims):
        with pytest.raises(TypeError):
            claims.raw_claims["sub"] = "456"
        with pytest.raises(FrozenInstanceError):
            claims.raw_claims = {}

    def test_isolated_from_source(self):
        source = {"sub": "123"}
        claims = TokenClaims(source)

        source["sub"] = "456"

        assert claims.subject == "123"

    def test_as_dict_is_a_copy(self, claims):
        copy = claims.as_dict()
        copy["sub"] = "456"

        assert claims.subject == "123"

    def test_rejects_non_mapping(self):
        with pytest.raises(TypeError):
            TokenClaims(["sub"])


class TestTokenHeader:
    """Test the token header."""

    def test_defaults(self):
        header = TokenHeader(alg="HS256")

        assert header.to_dict() == {"alg": "HS256", "typ": "JWT"}

    def test_from_dict(self):
        assert TokenHeader.from_dict({"alg": "ES256", "typ": "JWT"}) == TokenHeader("ES256", "JWT")

    @pytest.mark.parametrize(
        "data",
        [{}, {"alg": "HS256"}, {"alg": "HS256", "typ": "JWT", "jku": "x"}, {"alg": None, "typ": "JWT"}],
    )
    def test_from_dict_rejects(self, data):
        with pytest.raises(MalformedEncoding):
            TokenHeader.from_dict(data)


class TestEncodedToken:
    """Test encoded token masking."""

    def test_masked_representation(self):
        token = EncodedToken(header="h" * 20, payload="p" * 20, signature="s" * 20)

        assert token.mask_for_logging() == "hhhhhhhh...ssssssss"
        assert "p" not in str(token)
        assert "p" not in repr(token).replace("EncodedToken", "")

    def test_short_token_fully_masked(self):
        assert EncodedToken("a", "b", "c").mask_for_logging() == "***"

    def test_mask_token_matches_encoded_token(self):
        token = EncodedToken(header="h" * 20, payload="p" * 20, signature="s" * 20)

        assert mask_token(token.value) == token.mask_for_logging()
        assert mask_token("short.token.x") == "***"
