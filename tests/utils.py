"""Utils for tests."""

from dataclasses import dataclass

FROZEN_TIMESTAMP = 1_700_000_000


@dataclass
class Clock:
    """Mutable clock for tests."""

    now: int

    def advance(self, seconds: int) -> None:
        """Move the clock forward."""
        self.now += seconds
