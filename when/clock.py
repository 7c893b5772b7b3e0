"""Time sources for "now".

A clock is passed to whatever needs the current time, so tests (and the
``-now`` option) can pin it to a known instant instead of the wall clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

from typing_extensions import override


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        pass


class SystemClock(Clock):
    """Wall-clock time, reported in UTC."""

    @override
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """A clock stopped at a single instant."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise TypeError(
                f"FixedClock instant must be a timezone-aware datetime.\n"
                f"Got naive datetime: {instant!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        self.instant: datetime = instant

    @classmethod
    def at_timestamp(cls, seconds: int) -> "FixedClock":
        """Stop the clock at a Unix timestamp (UTC)."""
        return cls(datetime.fromtimestamp(seconds, tz=timezone.utc))

    @override
    def now(self) -> datetime:
        return self.instant
