"""Pure formatting utilities for human-readable output.

This module provides stateless functions for converting raw filesystem
metadata (sizes, timestamps, entry kinds) into display strings. All
functions are pure with no side effects.
"""

from datetime import datetime
from typing import Final

from dirstats.types.models import EntryType

# Binary unit ladder (1024-based), capped at petabytes
_SIZE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB", "PB")
_UNIT_STEP: Final[float] = 1024.0

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

_TYPE_LABELS: Final[dict[EntryType, str]] = {
    EntryType.REGULAR_FILE: "regular file",
    EntryType.DIRECTORY: "directory",
    EntryType.SYMLINK: "symlink",
    EntryType.CHAR_DEVICE: "char device",
    EntryType.BLOCK_DEVICE: "block device",
    EntryType.FIFO: "FIFO/pipe",
    EntryType.SOCKET: "socket",
    EntryType.UNKNOWN: "unknown",
}


def format_size(bytes: int, *, precision: int = 2) -> str:
    """Convert bytes to a human-readable size.

    The value is divided by 1024 while it is at least 1024 and a larger
    unit remains. PB is the last unit, so very large values stay in PB
    even when the scaled value is still 1024 or more.

    Args:
        bytes: Number of bytes to format (must be non-negative)
        precision: Number of decimal places (default: 2)

    Returns:
        String of the form ``"<value> <unit>"``.

    Examples:
        >>> format_size(500)
        '500.00 B'
        >>> format_size(1024)
        '1.00 KB'
        >>> format_size(1048576)
        '1.00 MB'
        >>> format_size(1536)
        '1.50 KB'
    """
    if bytes < 0:
        msg = "bytes must be non-negative"
        raise ValueError(msg)

    value = float(bytes)
    unit_index = 0
    while value >= _UNIT_STEP and unit_index < len(_SIZE_UNITS) - 1:
        value /= _UNIT_STEP
        unit_index += 1

    return f"{value:.{precision}f} {_SIZE_UNITS[unit_index]}"


def format_timestamp(epoch_seconds: float) -> str:
    """Render a modification time in the local time zone.

    Args:
        epoch_seconds: Seconds since the epoch (sub-second part is dropped)

    Returns:
        Timestamp formatted as ``YYYY-MM-DD HH:MM:SS``.

    Raises:
        ValueError: If the time cannot be represented as a local date
    """
    try:
        moment = datetime.fromtimestamp(int(epoch_seconds))
    except (OverflowError, OSError) as exc:
        msg = f"timestamp {epoch_seconds!r} is out of range: {exc}"
        raise ValueError(msg) from exc
    return moment.strftime(TIMESTAMP_FORMAT)


def describe_entry_type(entry_type: EntryType) -> str:
    """Return the display label used in full listings for an entry type."""
    return _TYPE_LABELS[entry_type]
