"""Conftest."""

from datetime import UTC, datetime

import pytest

from jwtkit.algorithms import ES256Algorithm, HS256Algorithm, NoneAlgorithm, RS256Algorithm
from jwtkit.utils import time as time_utils
from tests.utils import FROZEN_TIMESTAMP, Clock


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> Clock:
    """Freeze the library clock at a known timestamp."""
    frozen = Clock(now=FROZEN_TIMESTAMP)
    monkeypatch.setattr(time_utils, "utc_now", lambda: datetime.fromtimestamp(frozen.now, UTC))
    return frozen


@pytest.fixture
def hs256() -> HS256Algorithm:
    """HS256 algorithm with a test secret."""
    return HS256Algorithm("qwed")


@pytest.fixture(scope="session")
def rs256() -> RS256Algorithm:
    """RS256 algorithm with a generated key."""
    return RS256Algorithm.generate()


@pytest.fixture(scope="session")
def es256() -> ES256Algorithm:
    """ES256 algorithm with a generated key."""
    return ES256Algorithm.generate()


@pytest.fixture
def none_algorithm() -> NoneAlgorithm:
    """Unsigned algorithm."""
    return NoneAlgorithm()


@pytest.fixture(params=["hs256", "rs256", "es256", "none_algorithm"])
def any_algorithm(request: pytest.FixtureRequest) -> object:
    """Each of the algorithms in turn."""
    return request.getfixturevalue(request.param)
