"""Metadata lookups for directory entries.

Wraps stat/lstat and readlink so that the traversal engine only ever
sees ``DirectoryEntry`` snapshots or the package's own error types.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import Final

from dirstats.exceptions import MetadataError, SymlinkReadError
from dirstats.types.models import DirectoryEntry, EntryType
from dirstats.types.protocols import LinkReader

logger = logging.getLogger(__name__)

DEFAULT_LINK_BUFFER_SIZE: Final[int] = 128


def classify_mode(mode: int) -> EntryType:
    """Map a raw ``st_mode`` value to its entry type.

    Args:
        mode: ``st_mode`` from a stat result

    Returns:
        The matching entry type, ``EntryType.UNKNOWN`` for unsupported kinds
    """
    if stat.S_ISREG(mode):
        return EntryType.REGULAR_FILE
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryType.SYMLINK
    if stat.S_ISCHR(mode):
        return EntryType.CHAR_DEVICE
    if stat.S_ISBLK(mode):
        return EntryType.BLOCK_DEVICE
    if stat.S_ISFIFO(mode):
        return EntryType.FIFO
    if stat.S_ISSOCK(mode):
        return EntryType.SOCKET
    return EntryType.UNKNOWN


def bounded_readlink(path: str, capacity: int) -> str | None:
    """Read a link target if it fits in ``capacity`` bytes.

    Args:
        path: Path of the symbolic link
        capacity: Number of bytes available for the target

    Returns:
        The decoded target, or None when the encoded target needs more
        than ``capacity`` bytes

    Raises:
        OSError: If the link cannot be read
    """
    raw = os.readlink(os.fsencode(path))
    if len(raw) > capacity:
        return None
    return os.fsdecode(raw)


def read_link_target(
    path: str,
    *,
    initial_capacity: int = DEFAULT_LINK_BUFFER_SIZE,
    reader: LinkReader = bounded_readlink,
) -> str:
    """Read a symbolic link target with a growable buffer.

    Starts at ``initial_capacity`` bytes and doubles the capacity each time
    the reader reports the target did not fit. There is no upper bound.

    Args:
        path: Path of the symbolic link
        initial_capacity: Starting buffer size in bytes
        reader: Bounded read capability

    Returns:
        The full link target

    Raises:
        SymlinkReadError: If the link cannot be read
        ValueError: If ``initial_capacity`` is not positive
    """
    if initial_capacity <= 0:
        msg = "initial_capacity must be positive"
        raise ValueError(msg)

    capacity = initial_capacity
    while True:
        try:
            target = reader(path, capacity)
        except OSError as exc:
            raise SymlinkReadError(path, exc.strerror or str(exc)) from exc
        if target is not None:
            return target
        logger.debug("Link target of %s exceeds %d bytes, retrying", path, capacity)
        capacity *= 2


def resolve_link(
    path: str,
    *,
    initial_capacity: int = DEFAULT_LINK_BUFFER_SIZE,
    reader: LinkReader = bounded_readlink,
) -> str:
    """Read a link target and check that it points at something.

    Raises:
        SymlinkReadError: If the link cannot be read or is dangling
    """
    target = read_link_target(path, initial_capacity=initial_capacity, reader=reader)
    if not os.path.exists(path):
        raise SymlinkReadError(path, f"target {target} does not exist")
    return target


def read_entry(
    name: str,
    full_path: str,
    *,
    follow_symlinks: bool,
    resolve_link_target: bool = False,
    link_buffer_size: int = DEFAULT_LINK_BUFFER_SIZE,
    link_reader: LinkReader = bounded_readlink,
) -> DirectoryEntry:
    """Resolve metadata for one entry.

    Args:
        name: Entry name as listed in the directory
        full_path: Joined path used for the lookup
        follow_symlinks: Use stat semantics when True, lstat semantics otherwise
        resolve_link_target: Read the target of symbolic links
        link_buffer_size: Initial buffer size for reading link targets
        link_reader: Bounded read capability for link targets

    Returns:
        Metadata snapshot for the entry. For symbolic links whose target
        cannot be read, ``link_target`` is None.

    Raises:
        MetadataError: If stat/lstat fails
    """
    try:
        st = os.stat(full_path, follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise MetadataError(full_path, exc.strerror or str(exc)) from exc

    entry_type = classify_mode(st.st_mode)

    link_target: str | None = None
    if resolve_link_target and entry_type is EntryType.SYMLINK:
        try:
            link_target = resolve_link(
                full_path,
                initial_capacity=link_buffer_size,
                reader=link_reader,
            )
        except SymlinkReadError as exc:
            logger.warning("%s", exc.message)

    return DirectoryEntry(
        name=name,
        full_path=full_path,
        entry_type=entry_type,
        size_bytes=st.st_size,
        modified_at=st.st_mtime,
        link_target=link_target,
    )
