"""Unsigned algorithm."""

import logging
from typing import ClassVar

logger = logging.getLogger(__name__)


class NoneAlgorithm:
    """The `none` algorithm.

    Signs to an empty signature and accepts any signature. Anyone can forge a
    token this algorithm accepts, so only use it where tokens are trusted for
    other reasons, e.g. in tests.
    """

    identifier: ClassVar[str] = "none"

    def __init__(self) -> None:
        """Initialize the unsigned algorithm."""
        logger.warning("Unsigned `none` algorithm is in use, tokens will not be authenticated")

    def sign(self, message: bytes) -> bytes:  # noqa: ARG002
        """Return an empty signature."""
        return b""

    def verify(self, message: bytes, signature: bytes) -> bool:  # noqa: ARG002
        """Accept any signature."""
        return True

    def __repr__(self) -> str:
        """Representation of the algorithm."""
        return "NoneAlgorithm()"
