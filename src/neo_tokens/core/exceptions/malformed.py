"""Structural token exceptions."""

from ..enums import TokenErrorKind
from .base import TokenError


class MalformedToken(TokenError):
    """Raised when a token is not three non-empty dot-separated segments."""

    kind = TokenErrorKind.MALFORMED_TOKEN


class MalformedEncoding(TokenError):
    """Raised when a segment is not valid base64url-encoded JSON of the expected shape."""

    kind = TokenErrorKind.MALFORMED_ENCODING
