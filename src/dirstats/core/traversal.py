"""Single-directory traversal engine.

One traversal primitive drives every listing mode: it opens the directory
once, resolves metadata for each entry and hands the result to a
``TraversalPolicy``. Regular-file totals are accumulated here so that the
count and size invariants hold no matter which policy is active.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Final

from dirstats.core.metadata import (
    DEFAULT_LINK_BUFFER_SIZE,
    bounded_readlink,
    read_entry,
)
from dirstats.core.paths import join_path
from dirstats.exceptions import AllocationError, DirectoryOpenError, MetadataError
from dirstats.types.models import TraversalSummary
from dirstats.types.protocols import LinkReader, TraversalPolicy

logger = logging.getLogger(__name__)

PSEUDO_ENTRIES: Final[frozenset[str]] = frozenset({".", ".."})


def byte_order_key(name: str) -> bytes:
    """Sort key giving byte-wise ordering of names in their filesystem encoding."""
    return os.fsencode(name)


class DirectoryTraversal:
    """Traverses the entries of one directory under a listing policy.

    Provides:
    - One open/close of the directory handle per traversal, on every exit path
    - Optional byte-wise sorting of names before metadata lookups
    - stat or lstat semantics chosen by the policy
    - Per-entry error reporting that never aborts the traversal
    """

    def __init__(
        self,
        *,
        max_path_length: int | None = None,
        link_buffer_size: int = DEFAULT_LINK_BUFFER_SIZE,
        link_reader: LinkReader = bounded_readlink,
    ) -> None:
        """Initialize the traversal engine.

        Args:
            max_path_length: Optional limit on joined entry paths
            link_buffer_size: Initial buffer size for reading link targets
            link_reader: Bounded read capability for link targets
        """
        self.max_path_length: int | None = max_path_length
        self.link_buffer_size: int = link_buffer_size
        self.link_reader: LinkReader = link_reader

    def traverse(self, directory: str, policy: TraversalPolicy) -> TraversalSummary:
        """Visit every entry of ``directory`` with ``policy``.

        Args:
            directory: Directory to inspect
            policy: Per-entry reporting and aggregation policy

        Returns:
            Totals accumulated over the traversal

        Raises:
            DirectoryOpenError: If the directory cannot be opened
        """
        summary = TraversalSummary()

        try:
            handle = os.scandir(directory)
        except OSError as exc:
            raise DirectoryOpenError(directory, exc.strerror or str(exc)) from exc

        ordered: list[str] = []
        with handle:
            policy.begin(directory)
            names = self._names(handle, directory, summary)
            if policy.sort_names:
                # Names are collected and the handle released before any lookup
                ordered = sorted(names, key=byte_order_key)
            else:
                for name in names:
                    self._visit(directory, name, policy, summary)

        for name in ordered:
            self._visit(directory, name, policy, summary)

        logger.debug(
            "Traversal complete: %d regular files, %d bytes, %d failed entries",
            summary.regular_file_count,
            summary.total_bytes,
            summary.failed_entries,
        )
        return summary

    def _names(
        self,
        handle: Iterator[os.DirEntry[str]],
        directory: str,
        summary: TraversalSummary,
    ) -> Iterator[str]:
        """Yield entry names, skipping ``.`` and ``..``.

        A read error part way through the listing ends enumeration; it is
        logged and counted so the entries already seen are still reported.
        """
        try:
            for dir_entry in handle:
                if dir_entry.name not in PSEUDO_ENTRIES:
                    yield dir_entry.name
        except OSError as exc:
            summary.failed_entries += 1
            logger.warning("Error reading directory %s: %s", directory, exc.strerror or exc)

    def _visit(
        self,
        directory: str,
        name: str,
        policy: TraversalPolicy,
        summary: TraversalSummary,
    ) -> None:
        """Resolve one entry and pass it to the policy.

        Path-join and metadata failures are logged against the entry and
        counted; the entry is then skipped.
        """
        try:
            full_path = join_path(directory, name, max_length=self.max_path_length)
            entry = read_entry(
                name,
                full_path,
                follow_symlinks=policy.follow_symlinks,
                resolve_link_target=policy.resolve_link_targets,
                link_buffer_size=self.link_buffer_size,
                link_reader=self.link_reader,
            )
        except (AllocationError, MetadataError) as exc:
            summary.failed_entries += 1
            logger.warning("%s", exc.message)
            return

        if entry.is_regular_file:
            summary.add_regular_file(entry)

        policy.visit(entry, summary)


def traverse(directory: str, policy: TraversalPolicy) -> TraversalSummary:
    """Traverse ``directory`` with default engine settings.

    Args:
        directory: Directory to inspect
        policy: Per-entry reporting and aggregation policy

    Returns:
        Totals accumulated over the traversal
    """
    return DirectoryTraversal().traverse(directory, policy)
