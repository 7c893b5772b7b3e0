"""Calendar difference between two instants, rendered as relative text.

The difference is computed field by field (seconds up to years) with
borrowing, so month and year lengths follow the calendar instead of a fixed
number of seconds.
"""

import calendar
from datetime import datetime, timedelta, timezone

from when.instant import Breakdown, Instant
from when.util import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
    pluralize,
)

NOW = "now"
PAST_SUFFIX = "ago"
FUTURE_SUFFIX = "in the future"

_NEAR_ZERO = timedelta(seconds=1)


def days_in_preceding_month(year: int, month: int) -> int:
    """Return the length of the month before ``year``/``month``.

    January wraps around to December of the previous year.
    """
    if month == 1:
        year, month = year - 1, 12
    else:
        month -= 1
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


def breakdown(earlier: Instant, later: Instant) -> Breakdown:
    """Subtract ``earlier`` from ``later`` one calendar field at a time.

    Works from seconds upward. A negative field borrows from the next coarser
    field of ``later`` before that field is subtracted. A day borrow adds the
    length of the month preceding ``later``'s month and leaves the month
    field itself untouched.
    """
    year, month, day, hour, minute, second = later.fields()

    seconds = second - earlier.second
    if seconds < 0:
        seconds += SECONDS_PER_MINUTE
        minute -= 1

    minutes = minute - earlier.minute
    if minutes < 0:
        minutes += MINUTES_PER_HOUR
        hour -= 1

    hours = hour - earlier.hour
    if hours < 0:
        hours += HOURS_PER_DAY
        day -= 1

    days = day - earlier.day
    if days < 0:
        days += days_in_preceding_month(year, month)

    months = month - earlier.month
    if months < 0:
        months += MONTHS_PER_YEAR
        year -= 1

    years = year - earlier.year

    return Breakdown(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def render(diff: Breakdown, past: bool) -> str:
    """Join the positive fields of ``diff`` and append the direction.

    >>> render(Breakdown(hours=1, minutes=9, seconds=7), past=True)
    '1 hour, 9 minutes, 7 seconds ago'
    """
    suffix = PAST_SUFFIX if past else FUTURE_SUFFIX
    parts = [pluralize(value, unit) for unit, value in diff.items() if value > 0]
    if not parts:
        return suffix
    return f"{', '.join(parts)} {suffix}"


def describe(then: datetime, now: datetime) -> str:
    """Describe ``then`` relative to ``now``.

    Both datetimes must be timezone-aware and localized to the zone whose
    calendar the difference is measured in. Gaps under one second read as
    ``"now"``.

    Example:
        >>> from datetime import datetime, timezone
        >>> now = datetime(2019, 9, 21, 23, 56, 59, tzinfo=timezone.utc)
        >>> describe(datetime(2019, 9, 21, 23, 57, 29, tzinfo=timezone.utc), now)
        '30 seconds in the future'
    """
    for name, value in (("then", then), ("now", now)):
        if value.tzinfo is None or value.utcoffset() is None:
            raise TypeError(
                f"describe() {name} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}"
            )

    # Same-tzinfo subtraction ignores offsets, so compare in UTC
    delta = now.astimezone(timezone.utc) - then.astimezone(timezone.utc)
    if abs(delta) < _NEAR_ZERO:
        return NOW

    past = delta > timedelta(0)
    if past:
        earlier, later = then, now
    else:
        earlier, later = now, then

    diff = breakdown(Instant.from_datetime(earlier), Instant.from_datetime(later))
    return render(diff, past)
