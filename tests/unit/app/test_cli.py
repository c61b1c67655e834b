"""Tests for CLI interface."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from dirstats.app.cli import cli, legacy_cli, platform_path_limit
from dirstats.exceptions import DirectoryOpenError
from dirstats.types.models import ListingMode


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def clean_dir(tmp_path: Path) -> Path:
    """Directory whose entries all resolve under every mode."""
    root = tmp_path / "clean"
    root.mkdir()
    _ = (root / "b.txt").write_bytes(b"x" * 20)
    _ = (root / "a.log").write_bytes(b"y" * 2048)
    return root


@pytest.fixture
def undecodable_dir(tmp_path: Path) -> Path:
    """Directory holding a file whose name is not valid UTF-8."""
    root = tmp_path / "raw"
    root.mkdir()
    try:
        with open(os.path.join(os.fsencode(root), b"bad\xff.txt"), "wb") as handle:
            _ = handle.write(b"z" * 5)
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")
    return root


class TestCLIBasicFunctionality:
    """Test basic CLI functionality."""

    def test_cli_help_command(self, runner: CliRunner) -> None:
        """Test CLI help command displays correctly."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "DIRECTORY MODE" in result.output
        assert "--log-level" in result.output
        assert "--version" in result.output

    def test_cli_version_command(self, runner: CliRunner) -> None:
        """Test CLI version command displays correctly."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "dirstats" in result.output
        assert "version" in result.output.lower()

    @pytest.mark.parametrize("args", [[], ["only-one"], ["a", "1", "extra"]])
    def test_wrong_argument_count(self, runner: CliRunner, args: list[str]) -> None:
        """Test that the wrong number of arguments prints usage and fails."""
        result = runner.invoke(cli, args, prog_name="dirstats")

        assert result.exit_code == 1
        assert "Usage: dirstats <directory> <mode>" in result.output
        assert " 3 = Symlink-aware" in result.output

    @pytest.mark.parametrize("mode", ["0", "4", "x"])
    def test_invalid_mode(self, runner: CliRunner, clean_dir: Path, mode: str) -> None:
        """Test that an unknown mode prints usage and fails."""
        result = runner.invoke(cli, [str(clean_dir), mode], prog_name="dirstats")

        assert result.exit_code == 1
        assert "Usage: dirstats <directory> <mode>" in result.output
        assert "Name:" not in result.output

    def test_invalid_log_level(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test that click rejects an unknown log level."""
        result = runner.invoke(cli, ["--log-level", "LOUD", str(clean_dir), "1"])

        assert result.exit_code == 2
        assert "Invalid log level" in result.output

    def test_missing_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that an unopenable directory fails with a diagnostic."""
        missing = tmp_path / "nope"

        result = runner.invoke(cli, [str(missing), "1"])

        assert result.exit_code == 1
        assert f"Error opening directory {missing}:" in result.output
        assert "Total regular files" not in result.output

    def test_runner_receives_config(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test that arguments reach the application runner."""
        with patch("dirstats.app.runner.ApplicationRunner") as mock_runner:
            mock_instance = MagicMock()
            mock_runner.return_value = mock_instance

            result = runner.invoke(cli, ["-l", "debug", str(clean_dir), "3"])

            assert result.exit_code == 0
            mock_runner.assert_called_once()
            config = mock_runner.call_args.args[0]
            assert config.directory == str(clean_dir)
            assert config.mode is ListingMode.SYMLINK
            assert config.log_level == "DEBUG"
            assert mock_runner.call_args.kwargs["show_header"] is False
            mock_instance.run.assert_called_once()  # pyright: ignore[reportAny]

    def test_open_error_from_runner(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test that DirectoryOpenError maps to exit code 1."""
        with patch("dirstats.app.runner.ApplicationRunner") as mock_runner:
            mock_runner.return_value.run.side_effect = DirectoryOpenError(str(clean_dir), "Permission denied")  # pyright: ignore[reportAny]

            result = runner.invoke(cli, [str(clean_dir), "2"])

        assert result.exit_code == 1
        assert f"Error opening directory {clean_dir}: Permission denied" in result.output


class TestCLIModes:
    """Test complete runs of each listing mode."""

    def test_full_listing(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test mode 1 output."""
        result = runner.invoke(cli, [str(clean_dir), "1"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line for line in lines if line.startswith("Name: ")] == ["Name: a.log", "Name: b.txt"]
        assert "Size: 2048 (2.00 KB)" in lines
        assert "Listing files in directory" not in result.output
        assert lines[-2:] == ["Total regular files: 2", "Total cumulative size: 2068 bytes"]

    def test_text_listing(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test mode 2 output."""
        result = runner.invoke(cli, [str(clean_dir), "2"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "TXT File: b.txt",
            "Size: 20 bytes",
            result.output.splitlines()[2],
            "",
            "Total .txt files: 1",
            "Total size of .txt files: 20 bytes",
            "Largest file: a.log (2048 bytes)",
        ]
        assert result.output.splitlines()[2].startswith("Last Modified: ")

    def test_symlink_listing(self, runner: CliRunner, sample_dir: Path) -> None:
        """Test mode 3 output."""
        result = runner.invoke(cli, [str(sample_dir), "3"])

        assert result.exit_code == 0
        assert "Symlink: link_to_notes -> notes.txt" in result.output
        assert "Symlink: dangling -> (unknown)" in result.output
        assert "Total regular files: 4\nTotal size: 1538 bytes\n" in result.output

    def test_entry_failure_does_not_fail_run(self, runner: CliRunner, sample_dir: Path) -> None:
        """Test that a dangling link under mode 1 only produces a warning."""
        result = runner.invoke(cli, [str(sample_dir), "1"])

        assert result.exit_code == 0
        assert "Cannot stat file" in result.output
        assert "Total regular files: 5" in result.output

    def test_quiet_log_level(self, runner: CliRunner, sample_dir: Path) -> None:
        """Test that per-entry warnings are hidden at ERROR level."""
        result = runner.invoke(cli, ["--log-level", "ERROR", str(sample_dir), "1"])

        assert result.exit_code == 0
        assert "Cannot stat file" not in result.output


class TestCLIUnusualEntries:
    """Test entries that are valid on disk but awkward to display."""

    @pytest.mark.parametrize("mode", ["1", "2"])
    def test_out_of_range_mtime(self, runner: CliRunner, clean_dir: Path, mode: str) -> None:
        """Test that a far-future modification time never aborts the run."""
        try:
            os.utime(clean_dir / "b.txt", (0, 10**12))
        except (OSError, OverflowError):
            pytest.skip("filesystem rejects far-future timestamps")

        result = runner.invoke(cli, [str(clean_dir), mode])

        assert result.exit_code == 0
        assert result.exception is None
        if mode == "1":
            assert "Total regular files: 2\nTotal cumulative size: 2068 bytes" in result.output
        else:
            assert "Total .txt files: 1\nTotal size of .txt files: 20 bytes" in result.output

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            ("1", b"Name: bad\xff.txt\n"),
            ("2", b"TXT File: bad\xff.txt\n"),
            ("3", b"File: bad\xff.txt (5 bytes)\n"),
        ],
    )
    def test_undecodable_name(self, runner: CliRunner, undecodable_dir: Path, mode: str, expected: bytes) -> None:
        """Test that names which are not valid UTF-8 are printed as raw bytes."""
        result = runner.invoke(cli, [str(undecodable_dir), mode])

        assert result.exit_code == 0
        assert result.exception is None
        assert expected in result.stdout_bytes
        assert b"5 bytes" in result.stdout_bytes


class TestLegacyCLI:
    """Test the single-mode entry point."""

    def test_header_and_listing(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test the banner followed by the full listing."""
        result = runner.invoke(legacy_cli, [str(clean_dir)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:3] == [f"Listing files in directory: {clean_dir}", "", "Name: a.log"]
        assert lines[-2:] == ["Total regular files: 2", "Total cumulative size: 2068 bytes"]

    @pytest.mark.parametrize("args", [[], ["a", "b"]])
    def test_wrong_argument_count(self, runner: CliRunner, args: list[str]) -> None:
        """Test usage on the wrong number of arguments."""
        result = runner.invoke(legacy_cli, args, prog_name="dirstats-legacy")

        assert result.exit_code == 1
        assert "Usage: dirstats-legacy <directory_path>" in result.output

    def test_missing_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that no banner is printed when the directory cannot be opened."""
        missing = tmp_path / "nope"

        result = runner.invoke(legacy_cli, [str(missing)])

        assert result.exit_code == 1
        assert "Listing files in directory" not in result.output
        assert f"Error opening directory {missing}:" in result.output

    def test_platform_path_limit_applied(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test that the legacy listing bounds joined paths by the platform limit."""
        with patch("dirstats.app.runner.ApplicationRunner") as mock_runner:
            result = runner.invoke(legacy_cli, [str(clean_dir)])

            assert result.exit_code == 0
            config = mock_runner.call_args.args[0]
            assert config.max_path_length == os.pathconf(clean_dir, "PC_PATH_MAX") - 1

    def test_path_too_long_skipped(self, runner: CliRunner, clean_dir: Path) -> None:
        """Test that entries beyond the path limit are reported and skipped."""
        with patch("dirstats.app.cli.platform_path_limit", return_value=len(str(clean_dir)) + 5):
            result = runner.invoke(legacy_cli, [str(clean_dir)])

        assert result.exit_code == 0
        assert f"Path too long: {clean_dir}{os.sep}a.log" in result.output
        assert "Total regular files: 0\nTotal cumulative size: 0 bytes" in result.output


class TestPlatformPathLimit:
    """Test the platform_path_limit helper."""

    def test_existing_directory(self, tmp_path: Path) -> None:
        """Test that the limit excludes the terminating NUL."""
        assert platform_path_limit(str(tmp_path)) == os.pathconf(tmp_path, "PC_PATH_MAX") - 1

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test that an unknown limit leaves paths unbounded."""
        assert platform_path_limit(str(tmp_path / "missing")) is None
