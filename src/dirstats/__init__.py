"""dirstats - Inspect the entries of a single directory.

This package lists one directory with per-entry metadata (name, type,
size, modification time) and totals for its regular files, in one of
three modes: full listing, text-file filtering with largest-file
tracking, and symlink-aware listing.
"""

from dirstats.__main__ import legacy_main, main

__all__ = ["legacy_main", "main"]
