"""Error hierarchy for directory inspection.

Invocation-level errors (``ArgumentError``, ``DirectoryOpenError``) abort the
whole run. Entry-level errors (``MetadataError``, ``AllocationError``,
``SymlinkReadError``) are reported for the offending entry and traversal
continues with the next one.
"""

from __future__ import annotations

from typing import Any


class DirStatsError(Exception):
    """Base exception for all dirstats errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible error context
        """Initialize DirStatsError.

        Args:
            message: Error message
            context: Additional context information for diagnostics
        """
        super().__init__(message)
        self.message: str = message
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible error context


class ArgumentError(DirStatsError):
    """Raised when the command line has the wrong shape or an unknown mode."""


class DirectoryOpenError(DirStatsError):
    """Raised when the directory to inspect cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize DirectoryOpenError.

        Args:
            path: Directory that failed to open
            reason: Operating system reason for the failure
        """
        super().__init__(
            f"Error opening directory {path}: {reason}",
            {"path": path, "reason": reason},
        )
        self.path: str = path
        self.reason: str = reason


class MetadataError(DirStatsError):
    """Raised when stat/lstat fails for a single entry."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize MetadataError.

        Args:
            path: Full path of the entry
            reason: Operating system reason for the failure
        """
        super().__init__(
            f"Cannot stat file {path}: {reason}",
            {"path": path, "reason": reason},
        )
        self.path: str = path
        self.reason: str = reason


class AllocationError(DirStatsError):
    """Raised when a joined path cannot be represented."""


class SymlinkReadError(DirStatsError):
    """Raised when a symbolic link target cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize SymlinkReadError.

        Args:
            path: Full path of the symbolic link
            reason: Operating system reason for the failure
        """
        super().__init__(
            f"Cannot read link {path}: {reason}",
            {"path": path, "reason": reason},
        )
        self.path: str = path
        self.reason: str = reason
