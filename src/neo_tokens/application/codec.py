"""Canonical encoding of token segments.

Handles ONLY the textual representation of tokens: JSON serialization,
base64url without padding, and splitting/joining the three segments.
Does not handle signatures or claim semantics.
"""

import base64
import binascii
import json
import re
from typing import Any, Dict, List, Mapping, Tuple

from ..core.exceptions import MalformedEncoding, MalformedToken
from ..core.value_objects import SEGMENT_SEPARATOR, EncodedToken, TokenHeader

_BASE64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


class TokenCodec:
    """Deterministic codec for compact tokens.

    The same logical value always encodes to the same text: keys are sorted,
    no insignificant whitespace is emitted, and base64url output carries no
    padding. Decoding is strict and accepts only the canonical form, so a
    token has exactly one textual representation.
    """

    def encode_segment(self, value: Mapping[str, Any]) -> str:
        """Encode a header or claim set as a token segment.

        Args:
            value: JSON-compatible mapping with string keys

        Returns:
            base64url text without padding

        Raises:
            MalformedEncoding: If the value cannot be serialized as JSON
        """
        try:
            serialized = json.dumps(
                value,
                sort_keys=True,
                separators=(",", ":"),
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise MalformedEncoding(f"Value cannot be serialized: {e}") from e
        return self.encode_bytes(serialized.encode("utf-8"))

    def decode_segment(self, text: str, part_name: str = "segment") -> Dict[str, Any]:
        """Decode a token segment into a JSON object.

        Args:
            text: base64url segment
            part_name: Name of the part for error messages

        Returns:
            Decoded JSON object

        Raises:
            MalformedEncoding: If the segment is not canonical base64url,
                not UTF-8, not JSON, or not a JSON object
        """
        raw = self.decode_bytes(text, part_name)

        try:
            document = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedEncoding(f"Token {part_name} is not valid UTF-8") from e

        try:
            decoded = json.loads(
                document,
                object_pairs_hook=_reject_duplicate_keys,
                parse_constant=_reject_constant,
            )
        except ValueError as e:
            raise MalformedEncoding(f"Token {part_name} is not valid JSON: {e}") from e
        except RecursionError as e:
            raise MalformedEncoding(f"Token {part_name} is nested too deeply") from e

        if not isinstance(decoded, dict):
            raise MalformedEncoding(f"Token {part_name} is not a JSON object")
        return decoded

    def encode_bytes(self, data: bytes) -> str:
        """Encode raw bytes as base64url without padding."""
        return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")

    def decode_bytes(self, text: str, part_name: str = "segment") -> bytes:
        """Decode canonical base64url text without padding.

        Raises:
            MalformedEncoding: On characters outside the alphabet, an
                impossible length, or non-zero trailing bits
        """
        if not isinstance(text, str) or not _BASE64URL_PATTERN.fullmatch(text):
            raise MalformedEncoding(f"Token {part_name} contains invalid characters")

        if len(text) % 4 == 1:
            raise MalformedEncoding(f"Token {part_name} has an invalid length")

        try:
            data = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
        except (binascii.Error, ValueError) as e:
            raise MalformedEncoding(f"Token {part_name} is not valid base64url") from e

        # Unused trailing bits must be zero, otherwise two texts decode to the same bytes.
        if self.encode_bytes(data) != text:
            raise MalformedEncoding(f"Token {part_name} is not canonically encoded")
        return data

    def split(self, token: str) -> EncodedToken:
        """Split a compact token into its three segments.

        Raises:
            MalformedToken: Unless the token has exactly two separators
                producing three non-empty segments
        """
        if not isinstance(token, str):
            raise MalformedToken("Token must be a string", details={"received_type": type(token).__name__})

        parts = token.split(SEGMENT_SEPARATOR)
        if len(parts) != 3:
            raise MalformedToken(
                "Token must have three segments",
                details={"parts_count": len(parts), "token_length": len(token)},
            )
        for index, part in enumerate(parts):
            if not part:
                raise MalformedToken(f"Token segment {index + 1} is empty", details={"segment": index + 1})

        header, payload, signature = parts
        return EncodedToken(header=header, payload=payload, signature=signature)

    def join(self, header: str, payload: str, signature: str) -> str:
        """Join encoded segments into a compact token."""
        return SEGMENT_SEPARATOR.join((header, payload, signature))

    def decode_header(self, segment: str) -> TokenHeader:
        """Decode the header segment into a TokenHeader."""
        return TokenHeader.from_dict(self.decode_segment(segment, "header"))

    def decode_unverified(self, token: str) -> Tuple[TokenHeader, Dict[str, Any]]:
        """Decode header and claims WITHOUT signature verification.

        Only for debugging and logging. Never use the result for an
        authorization decision.
        """
        encoded = self.split(token)
        return self.decode_header(encoded.header), self.decode_segment(encoded.payload, "payload")


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"duplicate key '{key}'")
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number '{name}'")
