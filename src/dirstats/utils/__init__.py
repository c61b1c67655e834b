"""Shared utility modules for common operations.

This package provides:
- Pure formatting helpers (sizes, timestamps, entry type labels)
- Logging setup with directory context tracking
"""

from dirstats.utils.formatting import (
    describe_entry_type,
    format_size,
    format_timestamp,
)

__all__ = [
    "describe_entry_type",
    "format_size",
    "format_timestamp",
]
