"""Token header value object."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..enums import DEFAULT_TOKEN_TYPE
from ..exceptions import MalformedEncoding


@dataclass(frozen=True)
class TokenHeader:
    """JOSE header of a compact token.

    Holds exactly two fields: the algorithm identifier and the token type tag.
    """

    alg: str
    typ: str = DEFAULT_TOKEN_TYPE

    def to_dict(self) -> Dict[str, str]:
        """Return the header as the mapping that gets serialized."""
        return {"alg": self.alg, "typ": self.typ}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenHeader":
        """Create a header from a decoded JSON object.

        Raises:
            MalformedEncoding: If the object is not exactly {alg, typ} with string values
        """
        if set(data) != {"alg", "typ"}:
            raise MalformedEncoding(
                "Token header must contain exactly 'alg' and 'typ'",
                details={"header_fields": sorted(str(key) for key in data)},
            )
        alg, typ = data["alg"], data["typ"]
        if not isinstance(alg, str) or not isinstance(typ, str):
            raise MalformedEncoding("Token header fields 'alg' and 'typ' must be strings")
        return cls(alg=alg, typ=typ)
