"""Encoder interface for issuing and verifying tokens under a fixed policy."""

from datetime import timedelta
from typing import Any, Protocol


class AbstractJWTEncoder(Protocol):
    """Issues and verifies tokens with one algorithm and one claims policy.

    The policy covers the token lifetime, the leeway for clock skew and the
    issuer and audience that are stamped on issued tokens and required on
    received ones. Signature problems and claim violations are reported as
    `jwtkit.exceptions.JWTError` subclasses.
    """

    def encode(
        self,
        payload: object,
        expires_in: timedelta | None = None,
    ) -> str:
        """Sign a payload, adding the registered claims of the policy.

        Args:
            payload: A pydantic model, dataclass, mapping or anything else a pydantic
                `TypeAdapter` dumps to a JSON object. The registered claims are
                merged into it.
            expires_in: Lifetime of this token. Falls back to the policy lifetime
                when not given, `timedelta(0)` expires the token immediately.

        Returns:
            The compact token.

        Raises:
            PayloadNotAnObjectError: If the payload does not dump to a JSON object.
            SerializationError: If the payload cannot be represented as JSON.

        """
        ...

    def decode[T: Any](
        self,
        token: str,
        payload_class: type[T] | None = None,
    ) -> T:
        """Verify a token and return its payload.

        The signature is verified first. Then `exp` and `nbf` are checked, if the
        token carries them, with the leeway of the policy, and `iss` and `aud` are
        required to match the policy when it sets them.

        Args:
            token: The compact token.
            payload_class: The type to validate the payload into. Plain JSON values
                are returned when not given.

        Raises:
            InvalidSignatureError: If the signature does not verify.
            AlgorithmMismatchError: If the token names another algorithm.
            ClaimError: If a claim breaks the policy.
            JWTError: For any other malformed token.

        """
        ...
