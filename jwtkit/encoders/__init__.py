"""JWT encoders."""

from jwtkit.encoders.abstract import AbstractJWTEncoder
from jwtkit.encoders.jwtkit import JwtkitEncoder

__all__ = ["AbstractJWTEncoder", "JwtkitEncoder"]
