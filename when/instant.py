from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from when.util import UNITS


@dataclass(frozen=True, kw_only=True)
class Instant:
    """A point in time as six calendar fields in one already-chosen zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        """Read the calendar fields of ``dt`` as-is, without any zone conversion."""
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    def fields(self) -> tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


@dataclass(frozen=True, kw_only=True)
class Breakdown:
    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (unit, value) pairs from years down to seconds."""
        values = (
            self.years,
            self.months,
            self.days,
            self.hours,
            self.minutes,
            self.seconds,
        )
        return zip(UNITS, values)

    @property
    def is_zero(self) -> bool:
        return all(value == 0 for _, value in self.items())

    def __str__(self) -> str:
        """Compact form such as ``Breakdown(1y 0mo 3d 17h 15m 47s)``."""
        return (
            f"Breakdown({self.years}y {self.months}mo {self.days}d "
            f"{self.hours}h {self.minutes}m {self.seconds}s)"
        )
