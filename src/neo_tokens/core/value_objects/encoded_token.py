"""Encoded token value object."""

from dataclasses import dataclass


SEGMENT_SEPARATOR = "."


def mask_token(value: str) -> str:
    """Mask a compact token for logging, keeping the first and last 8 characters."""
    if len(value) <= 20:
        return "***"
    return f"{value[:8]}...{value[-8:]}"


@dataclass(frozen=True)
class EncodedToken:
    """The three raw segments of a compact token.

    Handles ONLY segment representation. Decoding and signature checks
    belong to the codec and the signer.
    """

    header: str
    payload: str
    signature: str

    @property
    def signing_input(self) -> bytes:
        """Bytes the signature is computed over (``header.payload``)."""
        return f"{self.header}{SEGMENT_SEPARATOR}{self.payload}".encode("ascii")

    @property
    def value(self) -> str:
        """The full compact token."""
        return SEGMENT_SEPARATOR.join((self.header, self.payload, self.signature))

    def mask_for_logging(self) -> str:
        """Return masked token safe for logging."""
        return mask_token(self.value)

    def __str__(self) -> str:
        return f"EncodedToken({self.mask_for_logging()})"

    def __repr__(self) -> str:
        return f"EncodedToken(value='{self.mask_for_logging()}')"
