"""
Error types raised at the command-line boundary.

The calculator in ``when.core`` has no failure modes for well-formed input;
everything that can go wrong happens while turning arguments into instants.
"""

import traceback

from when.logger import is_verbose, logging


class WhenError(Exception):
    """Base class for errors reported by the ``when`` command."""


class UsageError(WhenError):
    """The command line could not be turned into a timestamp."""


class TimezoneError(WhenError):
    """The requested timezone could not be loaded."""

    def __init__(self, name: str, reason: object):
        self.name: str = name
        self.reason: object = reason
        super().__init__(f"Unable to load timezone ({name}): {reason}")


def handle_error(is_warning: bool = False) -> None:
    """
    Report how to get more detail about the exception being handled.

    Prints the full traceback in verbose mode, otherwise logs a hint about
    the ``-debug`` flag.
    """
    if is_verbose():
        traceback.print_exc()
    else:
        msg = "Use -debug to print a stacktrace"
        if is_warning:
            logging.warning(msg)
        else:
            logging.error(msg)
