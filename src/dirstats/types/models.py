"""Data models for dirstats.

This module defines the dataclasses passed between the traversal engine,
its policies and the report emitter.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class EntryType(str, Enum):
    """Kind of a directory entry as reported by stat/lstat."""

    REGULAR_FILE = "RegularFile"
    DIRECTORY = "Directory"
    SYMLINK = "Symlink"
    CHAR_DEVICE = "CharDevice"
    BLOCK_DEVICE = "BlockDevice"
    FIFO = "Fifo"
    SOCKET = "Socket"
    UNKNOWN = "Unknown"


class ListingMode(IntEnum):
    """Listing modes selectable on the command line."""

    FULL = 1
    TEXT = 2
    SYMLINK = 3


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """Immutable metadata snapshot for one directory entry.

    Produced by a single traversal step and discarded once reported.
    ``link_target`` is only populated for symbolic links, and only when the
    active policy asked for it.
    """

    name: str
    full_path: str
    entry_type: EntryType
    size_bytes: int
    modified_at: float
    link_target: str | None = None

    @property
    def is_regular_file(self) -> bool:
        return self.entry_type is EntryType.REGULAR_FILE


@dataclass(slots=True, frozen=True)
class LargestFile:
    """Name and size of the largest regular file seen so far."""

    name: str
    size_bytes: int


@dataclass(slots=True)
class TraversalSummary:
    """Aggregate totals accumulated during one traversal.

    Counters only ever grow. ``regular_file_count`` and ``total_bytes`` count
    exactly the entries whose resolved type is a regular file; the text-file
    counters are the subset matched by the text filter.
    """

    regular_file_count: int = 0
    total_bytes: int = 0
    largest_file: LargestFile | None = None
    text_file_count: int = 0
    text_bytes: int = 0
    failed_entries: int = 0

    def add_regular_file(self, entry: DirectoryEntry) -> None:
        self.regular_file_count += 1
        self.total_bytes += entry.size_bytes

    def add_text_file(self, entry: DirectoryEntry) -> None:
        self.text_file_count += 1
        self.text_bytes += entry.size_bytes

    def offer_largest(self, entry: DirectoryEntry) -> None:
        """Record ``entry`` as largest if none is recorded or it is strictly bigger."""
        if self.largest_file is None or entry.size_bytes > self.largest_file.size_bytes:
            self.largest_file = LargestFile(name=entry.name, size_bytes=entry.size_bytes)
