"""Calendar unit labels and constants for when.

Unit constants represent durations in seconds.
Labels are listed coarse-to-fine, the order a breakdown is rendered in.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

# Calendar units, coarsest first
UNITS = ("year", "month", "day", "hour", "minute", "second")

# Borrow sizes for the fixed-length units
SECONDS_PER_MINUTE = MINUTE // SECOND
MINUTES_PER_HOUR = HOUR // MINUTE
HOURS_PER_DAY = DAY // HOUR
MONTHS_PER_YEAR = 12


def pluralize(value: int, unit: str) -> str:
    """Format a count with its unit, adding an "s" above one."""
    return f"{value} {unit}s" if value > 1 else f"{value} {unit}"
