from .clock import Clock, FixedClock, SystemClock
from .core import breakdown, describe, render
from .errors import TimezoneError, UsageError, WhenError
from .instant import Breakdown, Instant

__all__ = [
    "Instant",
    "Breakdown",
    "Clock",
    "SystemClock",
    "FixedClock",
    "breakdown",
    "render",
    "describe",
    "WhenError",
    "UsageError",
    "TimezoneError",
]
