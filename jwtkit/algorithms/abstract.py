"""Signing algorithm interface."""

from typing import ClassVar, Protocol


class AbstractAlgorithm(Protocol):
    """Abstract signing algorithm.

    Implementations must be safe to share between threads: they hold only
    immutable key material and build a fresh hashing context per call.

    Attributes:
        identifier: The name written verbatim into the `alg` header field.

    """

    identifier: ClassVar[str]

    def sign(self, message: bytes) -> bytes:
        """Sign a message.

        Args:
            message: The bytes to sign.

        Returns:
            The raw signature bytes.

        Raises:
            jwtkit.exceptions.AlgorithmError: If the provider cannot sign, e.g. it
                only holds a public key.

        """
        ...

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Verify a signature of a message.

        Malformed signatures (wrong length or encoding) must be reported as
        False, never accepted.

        Args:
            message: The bytes that were signed.
            signature: The raw signature bytes.

        Returns:
            True if the signature is valid for the message, False otherwise.

        Raises:
            jwtkit.exceptions.AlgorithmError: If the provider itself fails.

        """
        ...
