"""Protocol definitions for component interfaces.

This module defines structural subtyping protocols that establish
contracts between the traversal engine and its pluggable parts without
requiring inheritance.
"""

from typing import Protocol, runtime_checkable

from dirstats.types.models import DirectoryEntry, TraversalSummary


@runtime_checkable
class TraversalPolicy(Protocol):
    """Per-entry visitor that gives one listing mode its behaviour.

    The traversal engine owns the directory handle and metadata lookups;
    a policy only decides how resolved entries are reported and aggregated.
    """

    @property
    def follow_symlinks(self) -> bool:
        """Whether metadata lookups follow symbolic links (stat vs lstat)."""
        ...

    @property
    def sort_names(self) -> bool:
        """Whether entry names are sorted byte-wise before lookups."""
        ...

    @property
    def resolve_link_targets(self) -> bool:
        """Whether symbolic link targets are read for symlink entries."""
        ...

    def begin(self, directory: str) -> None:
        """Called once the directory handle is open, before any entry.

        Args:
            directory: Directory being traversed
        """
        ...

    def visit(self, entry: DirectoryEntry, summary: TraversalSummary) -> None:
        """Report and aggregate a single resolved entry.

        Args:
            entry: Metadata for the current entry
            summary: Running totals for this traversal
        """
        ...

    def finish(self, summary: TraversalSummary) -> None:
        """Emit the trailing aggregate summary.

        Args:
            summary: Final totals for this traversal
        """
        ...


class LinkReader(Protocol):
    """Bounded read of a symbolic link target.

    Implementations return the complete target when it fits in
    ``capacity`` bytes and ``None`` when more space is needed. Operating
    system failures propagate as ``OSError``.
    """

    def __call__(self, path: str, capacity: int) -> str | None:
        ...
