"""Exceptions raised by the token codec and the claims checks.

Every failure the library can produce is a subclass of `JWTError`. Each class
carries a default `detail` and an `error_code` derived from its name, so
callers can map failures to responses without matching on messages.

Example:
```
    try:
        jwt = Jwt.check(token, algorithm)
    except AlgorithmMismatchError:
        ...  # token was signed with a different algorithm
    except InvalidSignatureError:
        ...  # covers AlgorithmError as well
    except JWTError as exc:
        logger.info("Rejected token: %s", exc.error_code)
```

"""

from typing import ClassVar

from jwtkit.utils.strings import to_constant_case


class JWTError(Exception):
    """Base class for all token errors."""

    detail: ClassVar[str] = "Token error"

    def __init__(self, detail: str | None = None) -> None:
        """Exception init method.

        Args:
            detail: Overrides the class level detail message.

        """
        self.current_detail = detail or self.detail
        super().__init__(self.current_detail)

    @classmethod
    def get_class_error_code(cls) -> str:
        """Get error code. It's a constant case of the class name."""
        return to_constant_case(cls.__name__)

    @property
    def error_code(self) -> str:
        """Error code."""
        return self.get_class_error_code()

    def __repr__(self) -> str:
        """Representation of the exception."""
        return f"<{self.__class__.__name__} ({self.error_code})> {self.current_detail}"


class SerializationError(JWTError):
    """A value could not be serialized to, or parsed from, JSON."""

    detail = "Could not serialize or deserialize token JSON"


class EncodingDecodingError(JWTError):
    """A segment is not valid unpadded base64url."""

    detail = "Malformed base64url segment"


class AlgorithmMismatchError(JWTError):
    """The header `alg` does not match the verifying algorithm."""

    detail = "JWT token does not specify the correct `alg` in the header"


class MissingSegmentError(JWTError):
    """A token segment is missing."""

    detail = "Token segment is missing"


class MissingHeaderSegmentError(MissingSegmentError):
    """The header segment is missing."""

    detail = "No header"


class MissingPayloadSegmentError(MissingSegmentError):
    """The payload segment is missing."""

    detail = "No payload"


class MissingSignatureSegmentError(MissingSegmentError):
    """The signature segment is missing."""

    detail = "No signature"


class InvalidSignatureError(JWTError):
    """The signature does not match the signed segments."""

    detail = "Invalid signature"


class AlgorithmError(InvalidSignatureError):
    """A signing provider failed.

    The provider's own exception is chained as `__cause__` and its message is kept
    in the detail.
    """

    detail = "Signing algorithm failed"


class PayloadNotAnObjectError(JWTError):
    """Claims were set on a payload that does not serialize to a JSON object."""

    detail = "When setting claims, the payload must serialize to a JSON object"


class UnsupportedAlgorithmError(JWTError):
    """No provider is registered for the requested algorithm."""

    detail = "Unsupported algorithm"


class ConfigurationError(JWTError):
    """The configuration cannot produce a working algorithm."""

    detail = "Invalid JWT configuration"


class ClaimError(JWTError):
    """A claim did not satisfy the expected claims."""

    claim: ClassVar[str]


class MissingClaimError(ClaimError):
    """An expected claim was not present in the token."""

    def __init__(self, detail: str | None = None) -> None:
        """Exception init method."""
        super().__init__(detail or f"`{self.claim}` was not found in claims")


class MismatchedClaimError(ClaimError):
    """A claim was present but did not match the expected value."""

    def __init__(self, detail: str | None = None) -> None:
        """Exception init method."""
        super().__init__(detail or f"`{self.claim}` claim was not correct")


class MissingIssClaimError(MissingClaimError):
    """Missing `iss` claim."""

    claim = "iss"


class MismatchedIssClaimError(MismatchedClaimError):
    """Mismatched `iss` claim."""

    claim = "iss"


class MissingAudClaimError(MissingClaimError):
    """Missing `aud` claim."""

    claim = "aud"


class MismatchedAudClaimError(MismatchedClaimError):
    """Mismatched `aud` claim."""

    claim = "aud"


class MissingNbfClaimError(MissingClaimError):
    """Missing `nbf` claim."""

    claim = "nbf"


class MismatchedNbfClaimError(MismatchedClaimError):
    """The token is not valid yet."""

    claim = "nbf"


class MissingExpClaimError(MissingClaimError):
    """Missing `exp` claim."""

    claim = "exp"


class MismatchedExpClaimError(MismatchedClaimError):
    """The token has expired."""

    claim = "exp"


class MissingJtiClaimError(MissingClaimError):
    """Missing `jti` claim."""

    claim = "jti"


class MismatchedJtiClaimError(MismatchedClaimError):
    """Mismatched `jti` claim."""

    claim = "jti"
