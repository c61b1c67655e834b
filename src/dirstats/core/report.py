"""Report emitter for listing output.

All standard output of a run goes through ``ReportEmitter``: one block of
lines per entry followed by the trailing aggregate summary.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Final

import click

from dirstats.types.models import DirectoryEntry, TraversalSummary
from dirstats.utils.formatting import describe_entry_type, format_size, format_timestamp

logger = logging.getLogger(__name__)

UNKNOWN_TARGET: Final[str] = "(unknown)"


def echo_raw(text: str) -> None:
    """Write one line to standard output as filesystem bytes.

    Names that are not valid in the locale encoding arrive from the
    filesystem with surrogate escapes; encoding them back with
    ``os.fsencode`` prints the original bytes instead of failing.
    """
    click.echo(os.fsencode(text))


class ReportEmitter:
    """Writes per-entry blocks and summaries for every listing mode."""

    def __init__(self, write: Callable[[str], None] | None = None) -> None:
        """Initialize the emitter.

        Args:
            write: Line sink, one call per output line (default: ``echo_raw``)
        """
        self._write: Callable[[str], None] = write if write is not None else echo_raw

    def line(self, text: str = "") -> None:
        self._write(text)

    def modified(self, entry: DirectoryEntry) -> str:
        """Format the modification time of ``entry``, falling back to raw epoch seconds."""
        try:
            return format_timestamp(entry.modified_at)
        except ValueError as exc:
            logger.warning("Cannot format modification time of %s: %s", entry.full_path, exc)
            return str(int(entry.modified_at))

    def header(self, directory: str) -> None:
        """Emit the banner printed by the single-mode listing."""
        self.line(f"Listing files in directory: {directory}")
        self.line()

    # Full listing

    def full_entry(self, entry: DirectoryEntry) -> None:
        self.line(f"Name: {entry.name}")
        self.line(f"Type: {describe_entry_type(entry.entry_type)}")
        self.line(f"Size: {entry.size_bytes} ({format_size(entry.size_bytes)})")
        self.line(f"Last Modified: {self.modified(entry)}")
        self.line()

    def full_summary(self, summary: TraversalSummary) -> None:
        self.line(f"Total regular files: {summary.regular_file_count}")
        self.line(f"Total cumulative size: {summary.total_bytes} bytes")

    # Text filter

    def text_entry(self, entry: DirectoryEntry) -> None:
        self.line(f"TXT File: {entry.name}")
        self.line(f"Size: {entry.size_bytes} bytes")
        self.line(f"Last Modified: {self.modified(entry)}")
        self.line()

    def text_summary(self, summary: TraversalSummary) -> None:
        """Emit text-file totals and, if any regular file was seen, the largest one."""
        self.line(f"Total .txt files: {summary.text_file_count}")
        self.line(f"Total size of .txt files: {summary.text_bytes} bytes")
        if summary.largest_file is not None:
            largest = summary.largest_file
            self.line(f"Largest file: {largest.name} ({largest.size_bytes} bytes)")

    # Symlink-aware

    def symlink_entry(self, entry: DirectoryEntry) -> None:
        target = entry.link_target if entry.link_target is not None else UNKNOWN_TARGET
        self.line(f"Symlink: {entry.name} -> {target}")

    def file_entry(self, entry: DirectoryEntry) -> None:
        self.line(f"File: {entry.name} ({entry.size_bytes} bytes)")

    def symlink_summary(self, summary: TraversalSummary) -> None:
        self.line(f"Total regular files: {summary.regular_file_count}")
        self.line(f"Total size: {summary.total_bytes} bytes")
