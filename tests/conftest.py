"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from dirstats.utils.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with regular files, a subdirectory and symbolic links.

    Layout:
        notes.txt        11 bytes
        Report.TXT       500 bytes
        report.text      3 bytes
        image.bin        1024 bytes
        data.txt/        directory holding inner.txt (never reported)
        link_to_notes -> notes.txt
        dangling      -> missing-target
    """
    root = tmp_path / "sample"
    root.mkdir()
    _ = (root / "notes.txt").write_bytes(b"hello world")
    _ = (root / "Report.TXT").write_bytes(b"r" * 500)
    _ = (root / "report.text").write_bytes(b"abc")
    _ = (root / "image.bin").write_bytes(b"\x00" * 1024)
    (root / "data.txt").mkdir()
    _ = (root / "data.txt" / "inner.txt").write_bytes(b"x" * 77)
    os.symlink("notes.txt", root / "link_to_notes")
    os.symlink("missing-target", root / "dangling")
    return root
