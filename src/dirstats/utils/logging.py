"""Logging infrastructure with directory context tracking.

This module configures the ``dirstats`` package logger. Diagnostics go to
standard error so they never interleave with the listing on standard
output. Every record carries the directory under inspection, taken from a
ContextVar, so per-entry warnings can be traced back to their run.
"""

import contextvars
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final, TextIO, override

# Directory under inspection, set for the duration of a traversal
directory_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "directory",
    default=None,
)

PACKAGE_LOGGER: Final[str] = "dirstats"

DEFAULT_LOG_FORMAT: Final[str] = "%(name)s - %(levelname)s - [%(directory)s] - %(message)s"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


class DirectoryContextFilter(logging.Filter):
    """Logging filter that adds the inspected directory to log records.

    Reads the directory from the ContextVar and stores it on the record
    as ``directory``; records logged outside a traversal get ``"N/A"``.
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add directory context to the log record.

        Args:
            record: Log record to enhance

        Returns:
            True to allow the record to be logged
        """
        directory = directory_var.get()
        record.directory = directory if directory is not None else "N/A"
        return True


def configure_logging(
    *,
    log_level: str = DEFAULT_LOG_LEVEL,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger with a single console handler.

    Existing handlers on the package logger are replaced, so calling this
    once per invocation never duplicates output.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        stream: Destination stream (default: the current ``sys.stderr``)

    Returns:
        The configured package logger

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logging.getLogger("dirstats.core.traversal").warning("skipped entry")
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    level = getattr(logging, log_level.upper(), logging.WARNING)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    console_handler.addFilter(DirectoryContextFilter())
    package_logger.addHandler(console_handler)

    return package_logger


@contextmanager
def directory_context(directory: str) -> Iterator[None]:
    """Tag all log records emitted inside the block with ``directory``.

    Args:
        directory: Directory being inspected

    Example:
        >>> with directory_context("/tmp"):
        ...     logger.warning("Cannot stat file")
    """
    token = directory_var.set(directory)
    try:
        yield
    finally:
        directory_var.reset(token)
