"""
Command-line interface for when.

Turns a Unix timestamp argument into an RFC 3339 timestamp plus a relative
description, e.g. ``2019-09-21T23:56:59Z (30 seconds ago)``.
"""

import argparse
import logging as _logging
import re
import sys
from datetime import datetime, timedelta, timezone
from typing import NoReturn, TextIO
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse

from when import logger
from when.clock import Clock, FixedClock, SystemClock
from when.core import describe
from when.errors import TimezoneError, UsageError, handle_error
from when.logger import logging

DEFAULT_TZ = "UTC"

SUMMARY = (
    "when is a cmdline utility which accepts a unix timestamp and prints an "
    "RFC3339 datetime string and a human readable relative difference from now."
)

EXAMPLES = """\
examples:
  $> when 1569054942
  2019-09-21T08:35:42Z (15 hours, 3 minutes, 56 seconds ago)

  $> when 15
  1970-01-01T00:00:15Z (49 years, 8 months, 21 days, 51 minutes, 33 seconds ago)

  $> when 2000000000
  2033-05-18T03:33:20Z (13 years, 8 months, 26 days, 2 hours, 40 minutes, 1 second in the future)

  $> when -tz America/Los_Angeles -now 2019-09-21T16:56:59 1569106072
  2019-09-21T15:47:52-07:00 (1 hour, 9 minutes, 7 seconds ago)
"""

USAGE_ERROR = "Usage error. Expecting a Unix Timestamp as an argument."

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="when",
        add_help=False,
        description=SUMMARY,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "timestamp",
        nargs="?",
        metavar="unix-timestamp",
        help="Seconds since the Unix epoch (may be negative)",
    )

    parser.add_argument(
        "-tz",
        action="store",
        metavar="zone",
        default=DEFAULT_TZ,
        help=f"IANA timezone to show both instants in (default: {DEFAULT_TZ})",
    )
    parser.add_argument(
        "-now",
        action="store",
        metavar="time",
        help=(
            "Measure from this instant instead of the current time. "
            "Unix timestamp or ISO 8601; naive values are read in -tz"
        ),
    )
    parser.add_argument(
        "-debug",
        action="store_true",
        help="Turn debug output on",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show this help message and exit",
    )

    return parser


def parse_timestamp(text: str | None) -> int:
    """Parse a base-10 Unix timestamp, with an optional sign."""
    if text is None:
        raise UsageError("missing timestamp argument")
    if not _TIMESTAMP_RE.fullmatch(text):
        raise UsageError(f"not a unix timestamp: {text!r}")
    return int(text)


def load_zone(name: str = DEFAULT_TZ) -> ZoneInfo:
    """Resolve an IANA timezone name such as "UTC" or "America/Los_Angeles"."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneError(name, e) from e


def from_timestamp(seconds: int, zone: ZoneInfo) -> datetime:
    """Return the instant ``seconds`` after the epoch, localized to ``zone``."""
    try:
        return (_EPOCH + timedelta(seconds=seconds)).astimezone(zone)
    except (OverflowError, ValueError) as e:
        raise UsageError(f"timestamp out of range: {seconds}") from e


def parse_now(text: str, zone: ZoneInfo) -> datetime:
    """Parse the ``-now`` option: a Unix timestamp or an ISO 8601 string."""
    if _TIMESTAMP_RE.fullmatch(text):
        return from_timestamp(int(text), zone)

    try:
        instant = isoparse(text)
    except (ValueError, OverflowError) as e:
        raise UsageError(f"invalid -now value {text!r}: {e}") from e

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=zone)
    return instant


def format_rfc3339(dt: datetime) -> str:
    """Format ``dt`` to the second, using "Z" for a zero UTC offset.

    >>> format_rfc3339(datetime(2019, 9, 21, 23, 56, 59, tzinfo=timezone.utc))
    '2019-09-21T23:56:59Z'
    """
    base = dt.replace(tzinfo=None, microsecond=0).isoformat()
    offset = dt.utcoffset()
    if offset is None:
        return base

    total = int(offset.total_seconds())
    if total == 0:
        return f"{base}Z"

    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"


def report(then_seconds: int, clock: Clock, zone: ZoneInfo) -> str:
    """Build the output line for ``then_seconds`` as seen from ``clock``."""
    then = from_timestamp(then_seconds, zone)
    now = clock.now().astimezone(zone)
    logging.debug(f"Comparing {then.isoformat()} against {now.isoformat()}")
    return f"{format_rfc3339(then)} ({describe(then, now)})"


def print_usage_error(
    parser: argparse.ArgumentParser, file: TextIO | None = None
) -> None:
    out = file if file is not None else sys.stderr
    print(USAGE_ERROR, file=out)
    parser.print_help(out)


def main(argv: list[str] | None = None) -> int:
    logger.init()

    parser = build_parser()

    try:
        options = parser.parse_args(argv)
    except UsageError:
        print_usage_error(parser)
        return 1

    if options.help:
        parser.print_help(sys.stdout)
        return 0

    if options.debug:
        logging.setLevel(_logging.DEBUG)
        logger.set_verbose(True)
    else:
        logging.setLevel(_logging.INFO)
        logger.set_verbose(False)

    try:
        then_seconds = parse_timestamp(options.timestamp)
        zone = load_zone(options.tz)
        logging.debug(f"Using timezone {zone.key}")

        clock: Clock
        if options.now is not None:
            clock = FixedClock(parse_now(options.now, zone))
            logging.debug(f"Clock fixed at {clock.now().isoformat()}")
        else:
            clock = SystemClock()

        print(report(then_seconds, clock, zone))
    except UsageError as e:
        logging.debug(f"Usage error: {e}")
        print_usage_error(parser)
        return 1
    except TimezoneError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Got error: {e}")
        handle_error()
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
