"""JWT config."""

from datetime import timedelta

from pydantic import Field
from pydantic_settings import BaseSettings

from jwtkit.algorithms.abstract import AbstractAlgorithm
from jwtkit.algorithms.hs256 import HS256Algorithm
from jwtkit.algorithms.none import NoneAlgorithm
from jwtkit.algorithms.registry import get_algorithm
from jwtkit.exceptions import ConfigurationError


class JWTConfig(BaseSettings):
    """JWT config.

    Settings are read from environment variables named after the fields, e.g.
    `SECRET_KEY`. Durations in the environment use ISO 8601, e.g. `PT5M`.

    Attributes:
        algorithm (str): The algorithm identifier. Defaults to "HS256".
        secret_key (str | None): The shared secret for HS256.
        private_key (str | None): The PEM private key for RS256 and ES256.
        public_key (str | None): The PEM public key for RS256 and ES256. Used when
            no private key is configured, to verify tokens only.
        expires_in (timedelta | None): Lifetime of issued tokens.
        not_before (timedelta | None): Delay before issued tokens become valid.
        issuer (str | None): The `iss` claim to issue and to expect.
        audience (str | None): The `aud` claim to issue and to expect.
        leeway (int): Clock skew tolerance in seconds. Defaults to 0.
        allow_unsigned (bool): Whether the unsigned "none" algorithm may be used.
            Defaults to False.

    """

    algorithm: str = Field(default=HS256Algorithm.identifier, description="The algorithm identifier.")
    secret_key: str | None = Field(default=None, description="The shared secret for HS256.")
    private_key: str | None = Field(default=None, description="The PEM private key for RS256 and ES256.")
    public_key: str | None = Field(default=None, description="The PEM public key for RS256 and ES256.")
    expires_in: timedelta | None = Field(default=None, description="Lifetime of issued tokens.")
    not_before: timedelta | None = Field(default=None, description="Delay before issued tokens become valid.")
    issuer: str | None = Field(default=None, description="The `iss` claim to issue and to expect.")
    audience: str | None = Field(default=None, description="The `aud` claim to issue and to expect.")
    leeway: int = Field(default=0, ge=0, description="Clock skew tolerance in seconds.")
    allow_unsigned: bool = Field(default=False, description="Whether the unsigned `none` algorithm may be used.")

    def build_algorithm(self) -> AbstractAlgorithm:
        """Build the configured algorithm.

        Returns:
            The algorithm.

        Raises:
            ConfigurationError: If no key is configured for the algorithm.
            UnsupportedAlgorithmError: If the algorithm is unknown or disabled.
            AlgorithmError: If the key cannot be used with the algorithm.

        """
        if self.algorithm == NoneAlgorithm.identifier:
            return get_algorithm(self.algorithm, allow_unsigned=self.allow_unsigned)

        key = self.secret_key if self.algorithm == HS256Algorithm.identifier else self.private_key or self.public_key
        if key is None:
            message = f"No key configured for {self.algorithm}"
            raise ConfigurationError(message)

        return get_algorithm(self.algorithm, key, allow_unsigned=self.allow_unsigned)
