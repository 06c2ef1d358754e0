"""
Unit tests for claim structure and validity window checks.
"""

from types import MappingProxyType

import pytest

from neo_tokens import (
    ClaimsValidator,
    ConfigurationError,
    InvalidClaimType,
    MissingClaim,
    TokenErrorKind,
    TokenExpired,
    TokenNotYetValid,
)
from neo_tokens.application.validators import check_registered_claim, normalize_claim_value


class TestConfiguration:
    """Test validator construction."""

    def test_expiration_required_by_default(self):
        validator = ClaimsValidator()

        assert validator.required_claims == {"exp"}
        assert validator.clock_skew_seconds == 0

    def test_expiration_not_required(self):
        validator = ClaimsValidator(required_claims=["sub"], require_expiration=False)

        assert validator.required_claims == {"sub"}

    @pytest.mark.parametrize("skew", [-1, 1.5, True, "5"])
    def test_invalid_skew_rejected(self, skew):
        with pytest.raises(ConfigurationError):
            ClaimsValidator(clock_skew_seconds=skew)


class TestStructure:
    """Test required claim presence and registered claim types."""

    def test_required_claim_missing(self):
        validator = ClaimsValidator(required_claims={"sub", "tenant_id"})

        with pytest.raises(MissingClaim) as exc_info:
            validator.check_structure({"exp": 1060, "sub": "123"})

        assert exc_info.value.kind is TokenErrorKind.MISSING_CLAIM
        assert exc_info.value.details["claim"] == "tenant_id"

    def test_missing_expiration(self):
        with pytest.raises(MissingClaim) as exc_info:
            ClaimsValidator().check_structure({"sub": "123"})

        assert exc_info.value.details["claim"] == "exp"

    def test_expiration_optional_when_disabled(self):
        ClaimsValidator(require_expiration=False).check_structure({"sub": "123"})

    def test_custom_claims_accept_any_json(self):
        ClaimsValidator().check_structure(
            {"exp": 1060, "roles": ["admin"], "meta": {"x": 1.5}, "flag": None}
        )

    @pytest.mark.parametrize(
        "claims,claim",
        [
            ({"exp": "1060"}, "exp"),
            ({"exp": 1060.5}, "exp"),
            ({"exp": True}, "exp"),
            ({"exp": -1}, "exp"),
            ({"exp": 1060, "nbf": None}, "nbf"),
            ({"exp": 1060, "iat": "now"}, "iat"),
            ({"exp": 1060, "sub": 123}, "sub"),
            ({"exp": 1060, "iss": ["a"]}, "iss"),
        ],
    )
    def test_registered_claim_types(self, claims, claim):
        with pytest.raises(InvalidClaimType) as exc_info:
            ClaimsValidator().check_structure(claims)

        assert exc_info.value.details["claim"] == claim

    def test_missing_checked_before_types(self):
        validator = ClaimsValidator(required_claims={"sub"})

        with pytest.raises(MissingClaim):
            validator.check_structure({"exp": "bad"})


class TestTemporal:
    """Test the validity window."""

    def test_valid_before_expiry(self):
        ClaimsValidator().check_temporal({"exp": 1060}, 1059)

    def test_expired_at_boundary(self):
        with pytest.raises(TokenExpired) as exc_info:
            ClaimsValidator().check_temporal({"exp": 1060}, 1060)

        error = exc_info.value
        assert error.expired_at == 1060
        assert error.current_time == 1060
        assert error.seconds_expired == 0

    def test_skew_extends_expiry(self):
        validator = ClaimsValidator(clock_skew_seconds=5)

        validator.check_temporal({"exp": 1060}, 1064)
        with pytest.raises(TokenExpired):
            validator.check_temporal({"exp": 1060}, 1065)

    def test_not_before_boundary(self):
        validator = ClaimsValidator()

        validator.check_temporal({"exp": 2000, "nbf": 1000}, 1000)
        with pytest.raises(TokenNotYetValid) as exc_info:
            validator.check_temporal({"exp": 2000, "nbf": 1000}, 999)

        assert exc_info.value.seconds_until_valid == 1

    def test_skew_extends_not_before(self):
        validator = ClaimsValidator(clock_skew_seconds=5)

        validator.check_temporal({"exp": 2000, "nbf": 1000}, 995)
        with pytest.raises(TokenNotYetValid):
            validator.check_temporal({"exp": 2000, "nbf": 1000}, 994)

    def test_expiry_checked_first(self):
        with pytest.raises(TokenExpired):
            ClaimsValidator().check_temporal({"exp": 10, "nbf": 20}, 15)

    def test_absent_claims_not_enforced(self):
        ClaimsValidator(require_expiration=False).check_temporal({}, 10**12)

    def test_fractional_time(self):
        with pytest.raises(TokenExpired):
            ClaimsValidator().check_temporal({"exp": 1060}, 1060.0)
        ClaimsValidator().check_temporal({"exp": 1060}, 1059.999)


class TestClaimValues:
    """Test claim value helpers."""

    def test_registered_claim_accepts_valid_values(self):
        check_registered_claim("exp", 0)
        check_registered_claim("sub", "")
        check_registered_claim("custom", object())

    @pytest.mark.parametrize(
        "value",
        [{1, 2}, b"bytes", float("inf"), float("nan"), {"nested": {1: "x"}}, [object()]],
    )
    def test_non_json_values_rejected(self, value):
        with pytest.raises(InvalidClaimType):
            normalize_claim_value("data", value)

    def test_json_values_accepted(self):
        value = {"a": [1, 2.5, "x", None, True], "b": ["t", {"c": {}}]}

        assert normalize_claim_value("data", value) == value

    def test_containers_become_plain_json(self):
        value = MappingProxyType({"pair": ("a", 1), "inner": MappingProxyType({"x": (True,)})})

        normalized = normalize_claim_value("data", value)

        assert normalized == {"pair": ["a", 1], "inner": {"x": [True]}}
        assert type(normalized) is dict
        assert type(normalized["inner"]) is dict
        assert type(normalized["pair"]) is list

    def test_nesting_limit(self):
        value = []
        for _ in range(40):
            value = [value]

        with pytest.raises(InvalidClaimType):
            normalize_claim_value("deep", value)
