"""Application module for dirstats."""

from __future__ import annotations

from dirstats.app.cli import cli, legacy_cli
from dirstats.app.runner import ApplicationRunner

__all__ = [
    "cli",
    "legacy_cli",
    "ApplicationRunner",
]
