"""The token codec."""

import logging
import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Any, Self

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from jwtkit.algorithms.abstract import AbstractAlgorithm
from jwtkit.exceptions import (
    AlgorithmError,
    AlgorithmMismatchError,
    EncodingDecodingError,
    InvalidSignatureError,
    JWTError,
    MissingHeaderSegmentError,
    MissingPayloadSegmentError,
    MissingSignatureSegmentError,
    PayloadNotAnObjectError,
    SerializationError,
)
from jwtkit.tokens.claims import Claims
from jwtkit.tokens.header import Header
from jwtkit.tokens.segments import decode_segment, dump_json, encode_segment

logger = logging.getLogger(__name__)

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@lru_cache(maxsize=128)
def _type_adapter(payload_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(payload_type)


@dataclass(frozen=True)
class Jwt[T]:
    """A token: a payload plus the claims that travel with it.

    Build a token with `Jwt(payload)`, decorate it with claims and call `encode`.
    Every decoration returns a new token, the original is never modified.

    Decode a token with `check`, which only validates the structure and the
    signature, or with `verify_now`, which also checks that the token is live.
    Further checks go through `against` and `guard`.

    Example:
        ```python
        algorithm = HS256Algorithm("secret")
        token = Jwt({"role": "admin"}).issuer("auth").expire_in(timedelta(minutes=5)).encode(algorithm)

        jwt = Jwt.verify_now(token, algorithm).against(Claims().with_issuer("auth"))
        jwt.payload["role"]  # "admin"
        ```

    Attributes:
        payload: The application payload.
        claims: The registered claims. On encode they are merged into the payload,
            which must then serialize to a JSON object.
        content_type: The `cty` header value.

    """

    payload: T
    claims: Claims = field(default_factory=Claims)
    content_type: Any = None

    def encode(self, algorithm: AbstractAlgorithm) -> str:
        """Sign the token and return its compact string form.

        Args:
            algorithm: The algorithm to sign with.

        Returns:
            The token as `header.payload.signature`.

        Raises:
            SerializationError: If the payload is not JSON serializable.
            PayloadNotAnObjectError: If claims are set and the payload does not
                serialize to a JSON object.
            AlgorithmError: If the algorithm cannot sign.

        """
        header = Header.for_algorithm(algorithm.identifier, self.content_type)
        header_segment = encode_segment(header.to_json())
        payload_segment = encode_segment(dump_json(self._payload_json()))

        signing_input = f"{header_segment}.{payload_segment}"
        signature = algorithm.sign(signing_input.encode("ascii"))

        return f"{signing_input}.{encode_segment(signature)}"

    @classmethod
    def check[P](
        cls,
        token: str,
        algorithm: AbstractAlgorithm,
        payload_type: type[P] | Any = Any,
    ) -> "Jwt[P]":
        """Decode a token and verify its signature.

        Claims are not checked. Use `verify_now` for a liveness check, or `against`
        and `guard` on the result.

        The header `alg` is compared with the algorithm before any cryptographic
        work, and the signature is verified before the payload is parsed.

        Args:
            token: The compact token.
            algorithm: The algorithm the token is expected to be signed with.
            payload_type: The type to validate the payload into. Anything a pydantic
                `TypeAdapter` accepts. Defaults to plain JSON values.

        Returns:
            The decoded token.

        Raises:
            MissingSegmentError: If a segment is missing.
            EncodingDecodingError: If a segment is not valid base64url, or the token
                has more than three segments.
            SerializationError: If the header or the payload is not valid JSON for
                its type.
            AlgorithmMismatchError: If the token was not signed with the algorithm.
            InvalidSignatureError: If the signature is invalid. `AlgorithmError`
                if the algorithm failed while verifying.

        """
        try:
            return cls._check(token, algorithm, payload_type)
        except JWTError as e:
            logger.debug("Rejected %s token: %s", algorithm.identifier, e.error_code)
            raise

    @classmethod
    def verify_now[P](
        cls,
        token: str,
        algorithm: AbstractAlgorithm,
        payload_type: type[P] | Any = Any,
        *,
        leeway: int = 0,
    ) -> "Jwt[P]":
        """Decode a token, verify its signature and check that it is live.

        The token must carry `nbf` and `exp`, be valid already and not be expired.

        Args:
            token: The compact token.
            algorithm: The algorithm the token is expected to be signed with.
            payload_type: The type to validate the payload into.
            leeway: Clock skew tolerance in seconds.

        Raises:
            JWTError: Anything `check` raises, or a claim error.

        """
        expected = Claims.grace(leeway) if leeway else Claims.now()
        return cls.check(token, algorithm, payload_type).against(expected)

    def against(self, expected: Claims) -> Self:
        """Verify the claims against the expected claims and return the token.

        Raises:
            ClaimError: If a claim does not satisfy the expectation.

        """
        self.guard(expected)
        return self

    def guard(self, expected: Claims) -> None:
        """Verify the claims against the expected claims.

        Raises:
            ClaimError: If a claim does not satisfy the expectation.

        """
        self.claims.verify(expected)

    def into_payload(self) -> T:
        """Get the payload."""
        return self.payload

    def with_claims(self, claims: Claims) -> Self:
        """Replace the claims."""
        return replace(self, claims=claims)

    def with_merge(self, claims: Claims) -> Self:
        """Overlay the present fields of `claims` onto the current claims."""
        return self.with_claims(self.claims.merge(claims))

    def with_content_type(self, content_type: Any) -> Self:
        """Set the `cty` header."""
        return replace(self, content_type=content_type)

    def issuer(self, issuer: str) -> Self:
        """Set the `iss` claim."""
        return self.with_claims(self.claims.with_issuer(issuer))

    def subject(self, subject: str) -> Self:
        """Set the `sub` claim."""
        return self.with_claims(self.claims.with_subject(subject))

    def audience(self, audience: str) -> Self:
        """Set the `aud` claim."""
        return self.with_claims(self.claims.for_audience(audience))

    def issued_at(self, issued_at: datetime) -> Self:
        """Set the `iat` claim."""
        return self.issued_at_timestamp(int(issued_at.timestamp()))

    def issued_at_timestamp(self, timestamp: int) -> Self:
        """Set the `iat` claim from a Unix timestamp."""
        return self.with_claims(self.claims.model_copy(update={"iat": int(timestamp)}))

    def expire_in(self, duration: timedelta) -> Self:
        """Set the `exp` claim relative to now."""
        return self.with_claims(self.claims.expire_in(duration))

    def expire_in_seconds(self, seconds: int) -> Self:
        """Set the `exp` claim to `seconds` from now."""
        return self.with_claims(self.claims.expire_in_seconds(seconds))

    def not_before(self, duration: timedelta) -> Self:
        """Set the `nbf` claim relative to now."""
        return self.with_claims(self.claims.valid_after(duration))

    def not_before_seconds(self, seconds: int) -> Self:
        """Set the `nbf` claim to `seconds` from now."""
        return self.with_claims(self.claims.valid_after_seconds(seconds))

    def with_jti(self, jti: str) -> Self:
        """Set the `jti` claim."""
        return self.with_claims(self.claims.with_jti(jti))

    def _payload_json(self) -> Any:
        """Get the payload as JSON values with the claims merged in.

        Claims override payload fields of the same name.
        """
        try:
            _reject_non_finite(_ANY_ADAPTER.dump_python(self.payload))
            data = _ANY_ADAPTER.dump_python(self.payload, mode="json")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(f"Payload is not JSON serializable: {e}") from e

        if self.claims.is_empty():
            return data

        if not isinstance(data, dict):
            raise PayloadNotAnObjectError

        return data | self.claims.to_json_dict()

    @classmethod
    def _check(cls, token: str, algorithm: AbstractAlgorithm, payload_type: Any) -> "Jwt[Any]":
        header_segment, payload_segment, signature_segment = _split(token)

        header = Header.from_json(decode_segment(header_segment))
        if header.alg != algorithm.identifier:
            raise AlgorithmMismatchError

        signature = decode_segment(signature_segment)
        _verify_signature(algorithm, f"{header_segment}.{payload_segment}".encode(), signature)

        payload_bytes = decode_segment(payload_segment)
        adapter = _ANY_ADAPTER if payload_type is Any else _type_adapter(payload_type)
        try:
            payload = adapter.validate_json(payload_bytes)
        except ValidationError as e:
            raise SerializationError(f"Invalid token payload: {e}") from e

        # Absent or malformed registered claims mean no claims are asserted.
        try:
            claims = Claims.model_validate_json(payload_bytes)
        except ValidationError:
            claims = Claims()

        return cls(payload=payload, claims=claims, content_type=header.cty)


def _split(token: str) -> tuple[str, str, str]:
    """Split a token into its header, payload and signature segments."""
    parts = token.split(".")

    if not parts[0]:
        raise MissingHeaderSegmentError
    if len(parts) < 2 or not parts[1]:  # noqa: PLR2004
        raise MissingPayloadSegmentError
    if len(parts) < 3:  # noqa: PLR2004
        raise MissingSignatureSegmentError
    if len(parts) > 3:  # noqa: PLR2004
        raise EncodingDecodingError("Token has more than three segments")

    return parts[0], parts[1], parts[2]


def _verify_signature(algorithm: AbstractAlgorithm, signing_input: bytes, signature: bytes) -> None:
    try:
        verified = algorithm.verify(signing_input, signature)
    except AlgorithmError:
        raise
    except Exception as e:
        raise AlgorithmError(f"{algorithm.identifier} verification failed: {e}") from e

    if verified is not True:
        raise InvalidSignatureError


def _reject_non_finite(value: Any) -> None:
    """Raise if a dumped payload holds NaN or an infinity, which JSON cannot carry."""
    if isinstance(value, float) and not math.isfinite(value):
        raise SerializationError(f"Payload is not JSON serializable: {value} is not a finite number")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, list | tuple | set | frozenset):
        for item in value:
            _reject_non_finite(item)
