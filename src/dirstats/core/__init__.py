"""Core directory inspection: path joining, metadata, traversal and reporting."""

from __future__ import annotations

from .metadata import classify_mode, read_entry, read_link_target, resolve_link
from .paths import join_path
from .policies import (
    ListingPolicy,
    FullListingPolicy,
    SymlinkAwarePolicy,
    TextFilterPolicy,
    create_policy,
    has_txt_extension,
)
from .report import ReportEmitter
from .traversal import DirectoryTraversal, traverse

__all__ = [
    "DirectoryTraversal",
    "FullListingPolicy",
    "ListingPolicy",
    "ReportEmitter",
    "SymlinkAwarePolicy",
    "TextFilterPolicy",
    "classify_mode",
    "create_policy",
    "has_txt_extension",
    "join_path",
    "read_entry",
    "read_link_target",
    "resolve_link",
    "traverse",
]
