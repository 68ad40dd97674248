"""RSASSA-PKCS1-v1_5 with SHA-256."""

from typing import ClassVar

from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import Algorithm, RSAAlgorithm

from jwtkit.algorithms.asymmetric import AsymmetricAlgorithm


class RS256Algorithm(AsymmetricAlgorithm):
    """RSA PKCS#1 v1.5 signatures using SHA-256. Signing is deterministic."""

    identifier: ClassVar[str] = "RS256"
    private_key_type: ClassVar[type] = rsa.RSAPrivateKey
    public_key_type: ClassVar[type] = rsa.RSAPublicKey

    key_size: ClassVar[int] = 2048

    @classmethod
    def _make_algorithm(cls) -> Algorithm:
        return RSAAlgorithm(RSAAlgorithm.SHA256)

    @classmethod
    def _generate_private_key(cls) -> rsa.RSAPrivateKey:
        return rsa.generate_private_key(public_exponent=65537, key_size=cls.key_size)
