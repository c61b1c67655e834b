"""Path joining for directory entries."""

from __future__ import annotations

import os
import sys

from dirstats.exceptions import AllocationError


def join_path(directory: str, name: str, *, max_length: int | None = None) -> str:
    """Combine a directory path and an entry name into a full path.

    Exactly one separator ends up between the two parts regardless of
    whether ``directory`` already ends with one. An empty directory yields
    the bare name.

    Args:
        directory: Directory path, with or without a trailing separator
        name: Entry name inside the directory
        max_length: Optional upper bound on the joined length

    Returns:
        The joined path

    Raises:
        AllocationError: If the joined length cannot be represented or
            exceeds ``max_length``

    Examples:
        >>> join_path("/tmp/", "file.txt")
        '/tmp/file.txt'
        >>> join_path("/tmp", "file.txt")
        '/tmp/file.txt'
    """
    if not directory:
        return name

    # Guard the length computation itself before building anything
    if len(directory) > sys.maxsize - len(name) - 2:
        raise AllocationError(
            f"Path length overflow joining {name!r}",
            {"name": name},
        )

    needs_separator = not directory.endswith(os.sep)
    total_length = len(directory) + (1 if needs_separator else 0) + len(name)
    if max_length is not None and total_length > max_length:
        raise AllocationError(
            f"Path too long: {directory}{os.sep if needs_separator else ''}{name}",
            {"name": name, "length": total_length, "max_length": max_length},
        )

    if needs_separator:
        return f"{directory}{os.sep}{name}"
    return f"{directory}{name}"
