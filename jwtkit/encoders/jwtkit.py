"""Config driven encoder built on the token codec."""

import logging
from datetime import timedelta
from typing import Any

from jwtkit.configs.jwt import JWTConfig
from jwtkit.encoders.abstract import AbstractJWTEncoder
from jwtkit.tokens.claims import Claims
from jwtkit.tokens.jwt import Jwt
from jwtkit.utils.time import utc_timestamp

logger = logging.getLogger(__name__)


class JwtkitEncoder(AbstractJWTEncoder):
    """Encoder for issuing and verifying tokens with the settings of a `JWTConfig`.

    Issued tokens carry `iat`, plus `exp`, `nbf`, `iss` and `aud` when configured.
    Decoding verifies the signature, then checks the time claims the token carries
    (with the configured leeway) and the configured issuer and audience.
    """

    def __init__(self, config: JWTConfig) -> None:
        """Initialize the encoder.

        Args:
            config: The JWT config.

        Raises:
            ConfigurationError: If no key is configured for the algorithm.
            UnsupportedAlgorithmError: If the algorithm is unknown or disabled.

        """
        self._config = config
        self._algorithm = config.build_algorithm()
        logger.info("JWT encoder is using the %s algorithm", self._algorithm.identifier)

    def encode(
        self,
        payload: Any,
        expires_in: timedelta | None = None,
    ) -> str:
        """Encode payload into a JWT token.

        Args:
            payload: The payload to encode into the JWT payload. Must serialize to
                a JSON object.
            expires_in: The expiration time (optional). Defaults to the configured
                expiration.

        Returns:
            The encoded JWT token string with given payload.

        Raises:
            PayloadNotAnObjectError: If the payload does not serialize to a JSON object.
            SerializationError: If the payload is not JSON serializable.

        """
        jwt = Jwt(payload).issued_at_timestamp(utc_timestamp())

        if expires_in is None:
            expires_in = self._config.expires_in
        if expires_in is not None:
            jwt = jwt.expire_in(expires_in)
        if self._config.not_before is not None:
            jwt = jwt.not_before(self._config.not_before)
        if self._config.issuer is not None:
            jwt = jwt.issuer(self._config.issuer)
        if self._config.audience is not None:
            jwt = jwt.audience(self._config.audience)

        return jwt.encode(self._algorithm)

    def decode[T: Any](
        self,
        token: str,
        payload_class: type[T] | None = None,
    ) -> T:
        """Decode a JWT and validate its claims.

        Args:
            token: The JWT string to decode.
            payload_class: The payload class to decode the JWT into (optional).

        Returns:
            The decoded JWT payload as a payload class.

        Raises:
            jwtkit.exceptions.JWTError: If the token is invalid.
            jwtkit.exceptions.MismatchedExpClaimError: If the token has expired.

        """
        jwt = Jwt.check(token, self._algorithm, payload_class or Any)
        jwt.guard(self._expected_claims(jwt.claims))
        return jwt.payload

    def _expected_claims(self, received: Claims) -> Claims:
        """Build the expected claims for a received token."""
        window = Claims.grace(self._config.leeway)
        return Claims(
            exp=window.exp if received.exp is not None else None,
            nbf=window.nbf if received.nbf is not None else None,
            iss=self._config.issuer,
            aud=self._config.audience,
        )
