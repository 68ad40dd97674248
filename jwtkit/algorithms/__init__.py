"""Signing algorithms."""

from jwtkit.algorithms.abstract import AbstractAlgorithm
from jwtkit.algorithms.asymmetric import AsymmetricAlgorithm
from jwtkit.algorithms.es256 import ES256Algorithm
from jwtkit.algorithms.hs256 import HS256Algorithm
from jwtkit.algorithms.none import NoneAlgorithm
from jwtkit.algorithms.registry import get_algorithm, supported_algorithms
from jwtkit.algorithms.rs256 import RS256Algorithm

__all__ = [
    "AbstractAlgorithm",
    "AsymmetricAlgorithm",
    "ES256Algorithm",
    "HS256Algorithm",
    "NoneAlgorithm",
    "RS256Algorithm",
    "get_algorithm",
    "supported_algorithms",
]
