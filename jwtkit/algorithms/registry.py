"""Algorithm lookup by identifier."""

import logging
from collections.abc import Callable
from typing import Any

from jwtkit.algorithms.abstract import AbstractAlgorithm
from jwtkit.algorithms.es256 import ES256Algorithm
from jwtkit.algorithms.hs256 import HS256Algorithm
from jwtkit.algorithms.none import NoneAlgorithm
from jwtkit.algorithms.rs256 import RS256Algorithm
from jwtkit.exceptions import ConfigurationError, UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

_KEYED_ALGORITHMS: dict[str, Callable[[Any], AbstractAlgorithm]] = {
    HS256Algorithm.identifier: HS256Algorithm,
    RS256Algorithm.identifier: RS256Algorithm,
    ES256Algorithm.identifier: ES256Algorithm,
}


def supported_algorithms(*, allow_unsigned: bool = False) -> list[str]:
    """Get the identifiers `get_algorithm` accepts."""
    identifiers = list(_KEYED_ALGORITHMS)
    if allow_unsigned:
        identifiers.append(NoneAlgorithm.identifier)
    return identifiers


def get_algorithm(identifier: str, key: Any = None, *, allow_unsigned: bool = False) -> AbstractAlgorithm:
    """Build an algorithm from its identifier.

    Use this when the algorithm is chosen at runtime, e.g. from configuration.
    Identifiers are matched exactly, as in the `alg` header.

    Args:
        identifier: The algorithm identifier, e.g. "HS256".
        key: The key for the algorithm. Ignored for "none".
        allow_unsigned: Whether the unsigned "none" algorithm may be returned.

    Returns:
        The algorithm.

    Raises:
        UnsupportedAlgorithmError: If the identifier is unknown, or is "none" and
            unsigned tokens are not allowed.
        ConfigurationError: If a keyed algorithm was requested without a key.
        AlgorithmError: If the key cannot be used with the algorithm.

    """
    if identifier == NoneAlgorithm.identifier:
        if not allow_unsigned:
            raise UnsupportedAlgorithmError("The `none` algorithm is disabled, pass allow_unsigned=True to enable it")
        return NoneAlgorithm()

    factory = _KEYED_ALGORITHMS.get(identifier)
    if factory is None:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {identifier!r}")

    if key is None:
        raise ConfigurationError(f"Algorithm {identifier} requires a key")

    logger.debug("Building %s algorithm", identifier)
    return factory(key)
