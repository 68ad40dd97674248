"""HMAC-SHA256 algorithm."""

from typing import ClassVar

from jwt.algorithms import HMACAlgorithm
from jwt.exceptions import InvalidKeyError

from jwtkit.exceptions import AlgorithmError


class HS256Algorithm:
    """HMAC using SHA-256.

    Signing is deterministic and verification compares digests in constant time.
    """

    identifier: ClassVar[str] = "HS256"

    def __init__(self, key: str | bytes) -> None:
        """Initialize the HMAC algorithm.

        Args:
            key: The shared secret. Strings are encoded as UTF-8.

        Raises:
            AlgorithmError: If the key looks like an asymmetric PEM or SSH key.

        """
        self._algorithm = HMACAlgorithm(HMACAlgorithm.SHA256)
        try:
            self._key = self._algorithm.prepare_key(key)
        except InvalidKeyError as e:
            raise AlgorithmError(str(e)) from e

    def sign(self, message: bytes) -> bytes:
        """Compute the MAC of a message."""
        return self._algorithm.sign(message, self._key)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Check the MAC of a message in constant time."""
        return self._algorithm.verify(message, self._key, signature)

    def __repr__(self) -> str:
        """Representation of the algorithm without the key."""
        return "HS256Algorithm(..)"
