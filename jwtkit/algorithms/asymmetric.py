"""Shared machinery for public key algorithms."""

from typing import Any, ClassVar, Self

from cryptography.exceptions import UnsupportedAlgorithm
from jwt.algorithms import Algorithm
from jwt.exceptions import InvalidKeyError

from jwtkit.exceptions import AlgorithmError


class AsymmetricAlgorithm:
    """Base class for algorithms backed by a private/public key pair.

    The key may be a private key, which can sign and verify, or a public key,
    which can only verify. Keys are accepted as PEM text or bytes, or as
    `cryptography` key objects.

    Subclasses set `identifier`, the PyJWT algorithm to delegate to and the key
    types they accept.
    """

    identifier: ClassVar[str]
    private_key_type: ClassVar[type]
    public_key_type: ClassVar[type]

    def __init__(self, key: Any) -> None:
        """Initialize the algorithm.

        Args:
            key: The private or public key.

        Raises:
            AlgorithmError: If the key cannot be loaded or is of the wrong type.

        """
        self._algorithm = self._make_algorithm()
        try:
            prepared = self._algorithm.prepare_key(key)
        except (InvalidKeyError, UnsupportedAlgorithm, TypeError, ValueError) as e:
            raise AlgorithmError(f"Could not load {self.identifier} key: {e}") from e

        if not isinstance(prepared, (self.private_key_type, self.public_key_type)):
            message = f"Wrong key type for {self.identifier}: {type(prepared).__name__}"
            raise AlgorithmError(message)

        self._validate_key(prepared)
        self._key = prepared

    @classmethod
    def generate(cls) -> Self:
        """Create an algorithm with a freshly generated private key."""
        return cls(cls._generate_private_key())

    @property
    def can_sign(self) -> bool:
        """Whether the algorithm holds a private key."""
        return isinstance(self._key, self.private_key_type)

    def public_key(self) -> Any:
        """Get the public key."""
        if self.can_sign:
            return self._key.public_key()
        return self._key

    def verifier(self) -> Self:
        """Get an algorithm that holds only the public key."""
        return type(self)(self.public_key())

    def sign(self, message: bytes) -> bytes:
        """Sign a message with the private key.

        Raises:
            AlgorithmError: If only a public key is available.

        """
        if not self.can_sign:
            error_message = f"{self.identifier} algorithm holds a public key only and cannot sign"
            raise AlgorithmError(error_message)
        return self._algorithm.sign(message, self._key)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Verify a signature with the public key."""
        return self._algorithm.verify(message, self.public_key(), signature)

    def __repr__(self) -> str:
        """Representation of the algorithm without the key."""
        kind = "private" if self.can_sign else "public"
        return f"{self.__class__.__name__}(<{kind} key>)"

    @classmethod
    def _make_algorithm(cls) -> Algorithm:
        raise NotImplementedError

    @classmethod
    def _generate_private_key(cls) -> Any:
        raise NotImplementedError

    def _validate_key(self, key: Any) -> None:
        """Hook for extra key checks."""
