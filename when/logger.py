"""
Logging configuration for when.

Log lines go to stdout with a bullet prefix per level, the same stream the
result line is printed on.
"""

import logging as _logging
import sys

_IS_VERBOSE = False


def set_verbose(is_verbose: bool) -> None:
    """Enable or disable verbose output (stack traces on failure)."""
    global _IS_VERBOSE
    _IS_VERBOSE = is_verbose


def is_verbose() -> bool:
    return _IS_VERBOSE


# Bullet point mapping for different log levels
BULLET_POINTS: dict[int, str] = {
    _logging.INFO: "[*]",
    _logging.DEBUG: "[+]",
    _logging.WARNING: "[!]",
    _logging.ERROR: "[-]",
    _logging.CRITICAL: "[-]",
}


class Formatter(_logging.Formatter):
    """Prefix each message with the bullet for its level."""

    def __init__(self) -> None:
        super().__init__("%(bullet)s %(message)s")

    def format(self, record: _logging.LogRecord) -> str:
        record.bullet = BULLET_POINTS.get(record.levelno, "[-]")
        return super().format(record)


def init(
    level: int = _logging.INFO, logger_name: str = "when", propagate: bool = False
) -> None:
    """
    Attach a stdout handler with the bullet formatter to the named logger.

    Safe to call more than once: existing handlers are replaced, not stacked.

    Args:
        level: Log level to set (default: INFO)
        logger_name: Name of the logger to configure (default: "when")
        propagate: Whether to propagate logs to parent loggers (default: False)
    """
    # sys.stdout is looked up at call time so redirected streams are honoured
    handler = _logging.StreamHandler(sys.stdout)
    handler.setFormatter(Formatter())

    logger = _logging.getLogger(logger_name)
    if logger.handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


logging = _logging.getLogger("when")
