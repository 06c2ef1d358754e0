"""Token engine application layer: codec, signer, validators and engine."""

from .codec import TokenCodec
from .engine import IssueResult, TokenEngine, VerificationResult
from .signer import Signer
from .validators import ClaimsValidator

__all__ = [
    "TokenCodec",
    "Signer",
    "ClaimsValidator",
    "TokenEngine",
    "IssueResult",
    "VerificationResult",
]
