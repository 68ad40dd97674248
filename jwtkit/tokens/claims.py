"""Registered claims, see RFC 7519 section 4.1."""

from datetime import timedelta
from typing import Any, Self
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from jwtkit.exceptions import (
    MismatchedAudClaimError,
    MismatchedExpClaimError,
    MismatchedIssClaimError,
    MismatchedJtiClaimError,
    MismatchedNbfClaimError,
    MissingAudClaimError,
    MissingExpClaimError,
    MissingIssClaimError,
    MissingJtiClaimError,
    MissingNbfClaimError,
)
from jwtkit.utils.time import utc_timestamp


class Claims(BaseModel):
    """Claims carried in the payload of a token.

    Every claim is optional and an absent claim means it is not asserted. The
    same model is used for the claims received in a token and for the expected
    claims a token is verified against, where each present claim declares a check.

    Claims are immutable, all builder methods return a new instance.

    Example:
        ```python
        expected = Claims.now().with_issuer("auth.example.com").for_audience("billing")
        received.verify(expected)
        ```

    """

    model_config = ConfigDict(frozen=True, strict=True)

    iss: str | None = Field(default=None, description="The principal that issued the token.")
    sub: str | None = Field(default=None, description="The principal that is the subject of the token.")
    aud: str | None = Field(default=None, description="The recipient the token is intended for.")
    exp: int | None = Field(default=None, description="Unix time on or after which the token must be rejected.")
    nbf: int | None = Field(default=None, description="Unix time before which the token must be rejected.")
    iat: int | None = Field(default=None, description="Unix time at which the token was issued.")
    jti: str | None = Field(default=None, description="Unique identifier of the token.")

    @classmethod
    def now(cls, timestamp: int | None = None) -> Self:
        """Expected claims for a plain liveness check.

        Asserts `exp`, `nbf` and `iat` at the current time, so a token passes if it
        has not expired and is already valid.

        Args:
            timestamp: The reference time. Defaults to the current time.

        """
        now = utc_timestamp() if timestamp is None else timestamp
        return cls(exp=now, nbf=now, iat=now)

    @classmethod
    def grace(cls, seconds: int, timestamp: int | None = None) -> Self:
        """Expected claims for a liveness check tolerating clock skew.

        Tokens that expired at most `seconds` ago, or become valid at most
        `seconds` from now, are still accepted.

        Args:
            seconds: The tolerance in seconds.
            timestamp: The reference time. Defaults to the current time.

        Raises:
            ValueError: If seconds is negative.

        """
        if seconds < 0:
            message = f"Grace must not be negative, got {seconds}"
            raise ValueError(message)

        now = utc_timestamp() if timestamp is None else timestamp
        return cls(exp=now - seconds, nbf=now + seconds, iat=now)

    def any_set(self) -> bool:
        """Whether any claim is present."""
        return any(getattr(self, name) is not None for name in type(self).model_fields)

    def is_empty(self) -> bool:
        """Whether no claim is present."""
        return not self.any_set()

    def to_json_dict(self) -> dict[str, Any]:
        """Get the present claims as a JSON object."""
        return self.model_dump(exclude_none=True)

    def merge(self, other: "Claims") -> Self:
        """Overlay the present claims of `other` onto these claims.

        Claims present in `other` take precedence.
        """
        return self.model_copy(update=other.to_json_dict())

    def with_issuer(self, issuer: str) -> Self:
        """Set the `iss` claim."""
        return self.model_copy(update={"iss": issuer})

    def with_subject(self, subject: str) -> Self:
        """Set the `sub` claim."""
        return self.model_copy(update={"sub": subject})

    def for_audience(self, audience: str) -> Self:
        """Set the `aud` claim."""
        return self.model_copy(update={"aud": audience})

    def expire_in(self, duration: timedelta) -> Self:
        """Set the `exp` claim relative to now."""
        return self.expire_in_seconds(int(duration.total_seconds()))

    def expire_in_seconds(self, seconds: int) -> Self:
        """Set the `exp` claim to `seconds` from now."""
        return self.model_copy(update={"exp": utc_timestamp() + int(seconds)})

    def valid_after(self, duration: timedelta) -> Self:
        """Set the `nbf` claim relative to now."""
        return self.valid_after_seconds(int(duration.total_seconds()))

    def valid_after_seconds(self, seconds: int) -> Self:
        """Set the `nbf` claim to `seconds` from now."""
        return self.model_copy(update={"nbf": utc_timestamp() + int(seconds)})

    def issued_now(self) -> Self:
        """Set the `iat` claim to now."""
        return self.model_copy(update={"iat": utc_timestamp()})

    def with_jti(self, jti: str) -> Self:
        """Set the `jti` claim."""
        return self.model_copy(update={"jti": jti})

    def with_random_jti(self) -> Self:
        """Set the `jti` claim to a random UUID."""
        return self.with_jti(str(uuid4()))

    def verify(self, expected: "Claims") -> None:
        """Verify these received claims against the expected claims.

        Only the claims present in `expected` are checked, in the order `nbf`,
        `exp`, `iss`, `aud`, `jti`. The first violation is raised.

        * `nbf` fails if the expected time is before the received one, i.e. the
          token is not valid yet.
        * `exp` fails if the expected time is after the received one, i.e. the
          token has expired. Equal times pass.
        * `iss`, `aud` and `jti` must be equal.

        Args:
            expected: The expected claims.

        Raises:
            MissingClaimError: If an expected claim is absent.
            MismatchedClaimError: If a claim does not satisfy the expectation.

        """
        if expected.nbf is not None:
            if self.nbf is None:
                raise MissingNbfClaimError
            if expected.nbf < self.nbf:
                raise MismatchedNbfClaimError

        if expected.exp is not None:
            if self.exp is None:
                raise MissingExpClaimError
            if expected.exp > self.exp:
                raise MismatchedExpClaimError

        if expected.iss is not None:
            if self.iss is None:
                raise MissingIssClaimError
            if expected.iss != self.iss:
                raise MismatchedIssClaimError

        if expected.aud is not None:
            if self.aud is None:
                raise MissingAudClaimError
            if expected.aud != self.aud:
                raise MismatchedAudClaimError

        if expected.jti is not None:
            if self.jti is None:
                raise MissingJtiClaimError
            if expected.jti != self.jti:
                raise MismatchedJtiClaimError
