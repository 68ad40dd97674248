"""Compact signed tokens with registered claims.

The package issues and verifies JWT-style tokens carrying an arbitrary payload
plus the registered claims of RFC 7519, signed with a pluggable algorithm.
"""

from jwtkit.algorithms import (
    AbstractAlgorithm,
    ES256Algorithm,
    HS256Algorithm,
    NoneAlgorithm,
    RS256Algorithm,
    get_algorithm,
)
from jwtkit.configs.jwt import JWTConfig
from jwtkit.encoders import AbstractJWTEncoder, JwtkitEncoder
from jwtkit.exceptions import (
    AlgorithmError,
    AlgorithmMismatchError,
    ClaimError,
    ConfigurationError,
    EncodingDecodingError,
    InvalidSignatureError,
    JWTError,
    MismatchedAudClaimError,
    MismatchedClaimError,
    MismatchedExpClaimError,
    MismatchedIssClaimError,
    MismatchedJtiClaimError,
    MismatchedNbfClaimError,
    MissingAudClaimError,
    MissingClaimError,
    MissingExpClaimError,
    MissingHeaderSegmentError,
    MissingIssClaimError,
    MissingJtiClaimError,
    MissingNbfClaimError,
    MissingPayloadSegmentError,
    MissingSegmentError,
    MissingSignatureSegmentError,
    PayloadNotAnObjectError,
    SerializationError,
    UnsupportedAlgorithmError,
)
from jwtkit.tokens import Claims, Header, Jwt

__all__ = [
    "AbstractAlgorithm",
    "AbstractJWTEncoder",
    "AlgorithmError",
    "AlgorithmMismatchError",
    "ClaimError",
    "Claims",
    "ConfigurationError",
    "ES256Algorithm",
    "EncodingDecodingError",
    "HS256Algorithm",
    "Header",
    "InvalidSignatureError",
    "JWTConfig",
    "JWTError",
    "Jwt",
    "JwtkitEncoder",
    "MismatchedAudClaimError",
    "MismatchedClaimError",
    "MismatchedExpClaimError",
    "MismatchedIssClaimError",
    "MismatchedJtiClaimError",
    "MismatchedNbfClaimError",
    "MissingAudClaimError",
    "MissingClaimError",
    "MissingExpClaimError",
    "MissingHeaderSegmentError",
    "MissingIssClaimError",
    "MissingJtiClaimError",
    "MissingNbfClaimError",
    "MissingPayloadSegmentError",
    "MissingSegmentError",
    "MissingSignatureSegmentError",
    "NoneAlgorithm",
    "PayloadNotAnObjectError",
    "RS256Algorithm",
    "SerializationError",
    "UnsupportedAlgorithmError",
    "get_algorithm",
]
