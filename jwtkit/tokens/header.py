"""Token header."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from jwtkit.exceptions import SerializationError
from jwtkit.tokens.segments import dump_json

JWT_TYPE = "JWT"


class Header(BaseModel):
    """The header of a token.

    Identifies the signing algorithm and the type of token.

    Attributes:
        alg: The algorithm used to sign the token, see RFC 7518 section 3.
        typ: The token type, always "JWT" for tokens produced here.
        cty: The content type. Used for nested tokens, or to tell apart kinds of
            tokens such as access and refresh tokens.

    """

    model_config = ConfigDict(frozen=True, strict=True)

    alg: str
    typ: str
    cty: Any = None

    @classmethod
    def for_algorithm(cls, identifier: str, cty: Any = None) -> Self:
        """Create the header for a token signed with the given algorithm."""
        return cls(alg=identifier, typ=JWT_TYPE, cty=cty)

    @classmethod
    def from_json(cls, data: bytes) -> Self:
        """Parse a header from its JSON encoding.

        Raises:
            SerializationError: If the data is not a valid header.

        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise SerializationError(f"Invalid token header: {e}") from e

    def to_json(self) -> bytes:
        """Serialize the header to compact JSON, leaving out an absent `cty`."""
        data: dict[str, Any] = {"alg": self.alg, "typ": self.typ}
        if self.cty is not None:
            data["cty"] = self.cty
        return dump_json(data)
