"""Token codec and claims."""

from jwtkit.tokens.claims import Claims
from jwtkit.tokens.header import Header
from jwtkit.tokens.jwt import Jwt

__all__ = ["Claims", "Header", "Jwt"]
