"""Listing policies plugged into the traversal engine.

Each policy implements ``TraversalPolicy`` for one listing mode. The
engine has already counted regular files into the summary by the time
``visit`` is called; policies only add their mode-specific reporting and
extra accumulators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final, override

from dirstats.core.report import ReportEmitter
from dirstats.types.models import DirectoryEntry, EntryType, ListingMode, TraversalSummary
from dirstats.types.protocols import TraversalPolicy

TEXT_SUFFIX: Final[str] = "txt"


def has_txt_extension(name: str) -> bool:
    """Check whether ``name`` ends with ``.txt`` (case-insensitive extension).

    The dot must be literal; only the three trailing letters are compared
    without regard to case.

    Examples:
        >>> has_txt_extension("Report.TXT")
        True
        >>> has_txt_extension("report.text")
        False
    """
    if len(name) < 4:
        return False
    return name[-4] == "." and name[-3:].lower() == TEXT_SUFFIX


class ListingPolicy(ABC):
    """Abstract base class for the listing policies."""

    follow_symlinks: bool = True
    sort_names: bool = False
    resolve_link_targets: bool = False

    def __init__(self, emitter: ReportEmitter) -> None:
        self.emitter: ReportEmitter = emitter

    def begin(self, directory: str) -> None:  # pyright: ignore[reportUnusedParameter] # protocol signature
        return None

    @abstractmethod
    def visit(self, entry: DirectoryEntry, summary: TraversalSummary) -> None:
        """Report and aggregate one resolved entry."""
        ...

    @abstractmethod
    def finish(self, summary: TraversalSummary) -> None:
        """Emit the trailing summary for this mode."""
        ...


class FullListingPolicy(ListingPolicy):
    """Sorted listing of every entry with type, sizes and modification time.

    With ``show_header`` the single-mode banner naming the directory is
    printed once the directory has been opened.
    """

    sort_names: bool = True

    def __init__(self, emitter: ReportEmitter, *, show_header: bool = False) -> None:
        super().__init__(emitter)
        self.show_header: bool = show_header

    @override
    def begin(self, directory: str) -> None:
        if self.show_header:
            self.emitter.header(directory)

    @override
    def visit(self, entry: DirectoryEntry, summary: TraversalSummary) -> None:  # pyright: ignore[reportUnusedParameter] # protocol signature
        self.emitter.full_entry(entry)

    @override
    def finish(self, summary: TraversalSummary) -> None:
        self.emitter.full_summary(summary)


class TextFilterPolicy(ListingPolicy):
    """Reports ``.txt`` regular files and tracks the largest regular file.

    Enumeration order is left to the filesystem. Non-regular entries take
    part in neither the largest-file comparison nor the text filter.
    """

    @override
    def visit(self, entry: DirectoryEntry, summary: TraversalSummary) -> None:
        if entry.entry_type is not EntryType.REGULAR_FILE:
            return

        summary.offer_largest(entry)

        if has_txt_extension(entry.name):
            self.emitter.text_entry(entry)
            summary.add_text_file(entry)

    @override
    def finish(self, summary: TraversalSummary) -> None:
        self.emitter.text_summary(summary)


class SymlinkAwarePolicy(ListingPolicy):
    """Lists entries without following links, showing where each link points."""

    follow_symlinks: bool = False
    resolve_link_targets: bool = True

    @override
    def visit(self, entry: DirectoryEntry, summary: TraversalSummary) -> None:  # pyright: ignore[reportUnusedParameter] # protocol signature
        if entry.entry_type is EntryType.SYMLINK:
            self.emitter.symlink_entry(entry)
        else:
            self.emitter.file_entry(entry)

    @override
    def finish(self, summary: TraversalSummary) -> None:
        self.emitter.symlink_summary(summary)


_POLICIES: Final[dict[ListingMode, type[ListingPolicy]]] = {
    ListingMode.TEXT: TextFilterPolicy,
    ListingMode.SYMLINK: SymlinkAwarePolicy,
}


def create_policy(
    mode: ListingMode,
    emitter: ReportEmitter,
    *,
    show_header: bool = False,
) -> TraversalPolicy:
    """Build the policy for a listing mode.

    Args:
        mode: Selected listing mode
        emitter: Destination for per-entry and summary lines
        show_header: Print the directory banner (full listing only)

    Returns:
        Policy instance for ``mode``
    """
    if mode is ListingMode.FULL:
        return FullListingPolicy(emitter, show_header=show_header)
    return _POLICIES[mode](emitter)
