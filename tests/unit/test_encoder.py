"""Tests for JwtkitEncoder."""

from datetime import timedelta

import pytest
from pydantic import BaseModel

from jwtkit.algorithms import HS256Algorithm
from jwtkit.configs.jwt import JWTConfig
from jwtkit.encoders import AbstractJWTEncoder, JwtkitEncoder
from jwtkit.exceptions import (
    AlgorithmMismatchError,
    ClaimError,
    InvalidSignatureError,
    MismatchedAudClaimError,
    MismatchedExpClaimError,
    MismatchedIssClaimError,
    MismatchedNbfClaimError,
    MissingIssClaimError,
    PayloadNotAnObjectError,
)
from jwtkit.tokens import Jwt
from tests.utils import Clock


class UserPayload(BaseModel):
    """Payload model for tests."""

    user_id: int
    role: str


@pytest.fixture
def config() -> JWTConfig:
    """Encoder config for tests."""
    return JWTConfig(
        secret_key="qwed",
        expires_in=timedelta(minutes=5),
        issuer="auth",
        audience="api",
    )


@pytest.fixture
def encoder(config: JWTConfig) -> JwtkitEncoder:
    """Encoder for tests."""
    return JwtkitEncoder(config)


class TestJwtkitEncoder:
    """Tests for JwtkitEncoder."""

    def test_round_trip(self, encoder: JwtkitEncoder, clock: Clock) -> None:
        """Test a model payload survives encoding and decoding."""
        token = encoder.encode(UserPayload(user_id=1, role="admin"))

        assert encoder.decode(token, UserPayload) == UserPayload(user_id=1, role="admin")

        claims = Jwt.check(token, HS256Algorithm("qwed")).claims
        assert claims.iat == clock.now
        assert claims.exp == clock.now + 300
        assert claims.iss == "auth"
        assert claims.aud == "api"

    def test_decode_without_payload_class(self, encoder: JwtkitEncoder) -> None:
        """Test the payload is plain JSON when no class is given."""
        payload = encoder.decode(encoder.encode({"user_id": 1}))

        assert payload["user_id"] == 1
        assert payload["iss"] == "auth"

    def test_expires_in_argument(self, encoder: JwtkitEncoder, clock: Clock) -> None:
        """Test the argument overrides the configured lifetime."""
        token = encoder.encode({"user_id": 1}, expires_in=timedelta(seconds=10))

        assert Jwt.check(token, HS256Algorithm("qwed")).claims.exp == clock.now + 10

    def test_zero_expires_in(self, encoder: JwtkitEncoder, clock: Clock) -> None:
        """Test an explicit zero lifetime is not replaced by the configured one."""
        token = encoder.encode({"user_id": 1}, expires_in=timedelta(0))

        claims = Jwt.check(token, HS256Algorithm("qwed")).claims
        assert claims.exp == clock.now
        assert claims.exp == claims.iat

    def test_expired(self, encoder: JwtkitEncoder, clock: Clock) -> None:
        """Test an expired token is refused."""
        token = encoder.encode({"user_id": 1})

        clock.advance(300)
        encoder.decode(token)

        clock.advance(1)
        with pytest.raises(MismatchedExpClaimError):
            encoder.decode(token)

    def test_leeway(self, config: JWTConfig, clock: Clock) -> None:
        """Test the leeway accepts recently expired tokens."""
        encoder = JwtkitEncoder(config.model_copy(update={"leeway": 30}))
        token = encoder.encode({"user_id": 1})

        clock.advance(330)
        encoder.decode(token)

        clock.advance(1)
        with pytest.raises(MismatchedExpClaimError):
            encoder.decode(token)

    def test_not_before(self, config: JWTConfig, clock: Clock) -> None:
        """Test a token is refused before it becomes valid."""
        encoder = JwtkitEncoder(config.model_copy(update={"not_before": timedelta(seconds=60)}))
        token = encoder.encode({"user_id": 1})

        with pytest.raises(MismatchedNbfClaimError):
            encoder.decode(token)

        clock.advance(60)
        encoder.decode(token)

    def test_wrong_audience(self, encoder: JwtkitEncoder, config: JWTConfig) -> None:
        """Test a token for another audience is refused."""
        other = JwtkitEncoder(config.model_copy(update={"audience": "billing"}))

        with pytest.raises(MismatchedAudClaimError):
            encoder.decode(other.encode({"user_id": 1}))

    def test_wrong_issuer(self, encoder: JwtkitEncoder, config: JWTConfig) -> None:
        """Test a token from another issuer is refused."""
        other = JwtkitEncoder(config.model_copy(update={"issuer": "elsewhere"}))

        with pytest.raises(MismatchedIssClaimError):
            encoder.decode(other.encode({"user_id": 1}))

    def test_missing_issuer(self, encoder: JwtkitEncoder) -> None:
        """Test the configured issuer must be present."""
        token = Jwt({"user_id": 1}).audience("api").encode(HS256Algorithm("qwed"))

        with pytest.raises(MissingIssClaimError):
            encoder.decode(token)

    def test_token_without_time_claims(self) -> None:
        """Test time claims are only checked when the token carries them."""
        encoder = JwtkitEncoder(JWTConfig(secret_key="qwed"))
        token = Jwt({"user_id": 1}).encode(HS256Algorithm("qwed"))

        assert encoder.decode(token) == {"user_id": 1}

    def test_wrong_secret(self, encoder: JwtkitEncoder) -> None:
        """Test a token signed with another secret is refused."""
        other = JwtkitEncoder(JWTConfig(secret_key="other", issuer="auth", audience="api"))

        with pytest.raises(InvalidSignatureError):
            encoder.decode(other.encode({"user_id": 1}))

    def test_other_algorithm(self, encoder: JwtkitEncoder) -> None:
        """Test a token for another algorithm is refused."""
        unsigned = JwtkitEncoder(JWTConfig(algorithm="none", allow_unsigned=True))

        with pytest.raises(AlgorithmMismatchError):
            encoder.decode(unsigned.encode({"user_id": 1}))

    @pytest.mark.parametrize("payload", [[1, 2], "text", 1])
    def test_payload_not_an_object(self, encoder: JwtkitEncoder, payload: object) -> None:
        """Test claims cannot be added to a payload that is not an object."""
        with pytest.raises(PayloadNotAnObjectError):
            encoder.encode(payload)


def test_encoder_interface(config: JWTConfig) -> None:
    """Test the encoder honours the interface contract."""
    encoder: AbstractJWTEncoder = JwtkitEncoder(config)
    other: AbstractJWTEncoder = JwtkitEncoder(config.model_copy(update={"audience": "billing"}))

    assert AbstractJWTEncoder in JwtkitEncoder.__mro__
    assert encoder.decode(encoder.encode({"user_id": 1}))["user_id"] == 1

    with pytest.raises(ClaimError):
        encoder.decode(other.encode({"user_id": 1}))
