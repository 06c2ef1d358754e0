"""Token validators.

Each validator handles exactly one validation concern.
"""

from .claims_validator import ClaimsValidator, check_registered_claim, normalize_claim_value

__all__ = [
    "ClaimsValidator",
    "check_registered_claim",
    "normalize_claim_value",
]
