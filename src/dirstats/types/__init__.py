"""Type definitions and protocols for dirstats.

This package provides:
- Data models (entry snapshots and traversal totals)
- Protocol definitions (structural subtyping interfaces)
"""

from dirstats.types.models import (
    DirectoryEntry,
    EntryType,
    LargestFile,
    ListingMode,
    TraversalSummary,
)
from dirstats.types.protocols import (
    LinkReader,
    TraversalPolicy,
)

__all__ = [
    # Data models
    "DirectoryEntry",
    "EntryType",
    "LargestFile",
    "ListingMode",
    "TraversalSummary",
    # Protocols
    "LinkReader",
    "TraversalPolicy",
]
