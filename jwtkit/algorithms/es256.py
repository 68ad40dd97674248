"""ECDSA on P-256 with SHA-256."""

from typing import ClassVar

from cryptography.hazmat.primitives.asymmetric import ec
from jwt.algorithms import Algorithm, ECAlgorithm

from jwtkit.algorithms.asymmetric import AsymmetricAlgorithm
from jwtkit.exceptions import AlgorithmError


class ES256Algorithm(AsymmetricAlgorithm):
    """ECDSA signatures on the P-256 curve using SHA-256.

    Signatures use a random nonce, so signing the same message twice gives
    different signatures. They are encoded as the raw 64 byte `r || s` pair.
    """

    identifier: ClassVar[str] = "ES256"
    private_key_type: ClassVar[type] = ec.EllipticCurvePrivateKey
    public_key_type: ClassVar[type] = ec.EllipticCurvePublicKey

    @classmethod
    def _make_algorithm(cls) -> Algorithm:
        return ECAlgorithm(ECAlgorithm.SHA256)

    @classmethod
    def _generate_private_key(cls) -> ec.EllipticCurvePrivateKey:
        return ec.generate_private_key(ec.SECP256R1())

    def _validate_key(self, key: ec.EllipticCurvePrivateKey | ec.EllipticCurvePublicKey) -> None:
        if not isinstance(key.curve, ec.SECP256R1):
            message = f"ES256 requires a P-256 key, got {key.curve.name}"
            raise AlgorithmError(message)
