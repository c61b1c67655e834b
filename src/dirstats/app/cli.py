"""Command-line interface for dirstats."""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version
from typing import Final, NoReturn

import click

from dirstats.config import VALID_LOG_LEVELS, InspectionConfig, build_config
from dirstats.exceptions import ArgumentError, DirectoryOpenError
from dirstats.types.models import ListingMode
from dirstats.utils.logging import DEFAULT_LOG_LEVEL, configure_logging

# Exit codes
EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

MODE_USAGE: Final[str] = """Usage: {prog} <directory> <mode>
Modes:
 1 = Full listing
 2 = Only .txt files
 3 = Symlink-aware"""

LEGACY_USAGE: Final[str] = "Usage: {prog} <directory_path>"

try:
    __version__ = version("dirstats")
except PackageNotFoundError:
    __version__ = "unknown"


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str,
) -> str:
    """Validate and normalize log level.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Log level value to validate

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If validation fails
    """
    normalized_value = value.upper().strip()
    if normalized_value not in VALID_LOG_LEVELS:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(VALID_LOG_LEVELS))}'
        )
    return normalized_value


def platform_path_limit(directory: str) -> int | None:
    """Longest joined path the platform accepts under ``directory``.

    ``PC_PATH_MAX`` counts the terminating NUL, so the usable length is one
    less. Returns None when the limit is unknown or unbounded.
    """
    try:
        path_max = os.pathconf(directory, "PC_PATH_MAX")
    except (OSError, ValueError):
        return None
    return path_max - 1 if path_max > 1 else None


def _prog_name(ctx: click.Context, default: str) -> str:
    return ctx.find_root().info_name or default


def _usage_error(ctx: click.Context, usage: str, exc: ArgumentError | None = None) -> NoReturn:
    """Print usage to standard error and exit with a failure code."""
    if exc is not None:
        click.echo(exc.message, err=True)
    click.echo(usage, err=True)
    ctx.exit(EXIT_FAILURE)


def _run(config: InspectionConfig, *, show_header: bool) -> int:
    """Run one inspection and map its outcome to an exit code."""
    from dirstats.app.runner import ApplicationRunner

    runner = ApplicationRunner(config, show_header=show_header)
    try:
        _ = runner.run()
    except DirectoryOpenError as exc:
        click.echo(exc.message, err=True)
        return EXIT_FAILURE
    return EXIT_SUCCESS


log_level_option = click.option(
    "--log-level",
    "-l",
    type=str,
    default=DEFAULT_LOG_LEVEL,
    callback=validate_log_level,
    help="Diagnostic verbosity on standard error (DEBUG, INFO, WARNING, ERROR)",
)


@click.command()
@click.argument("arguments", nargs=-1, metavar="DIRECTORY MODE")
@log_level_option
@click.version_option(version=__version__, prog_name="dirstats")
@click.pass_context
def cli(ctx: click.Context, arguments: tuple[str, ...], log_level: str) -> None:
    """dirstats - List one directory and total its regular files.

    MODE selects the listing:

    \b
      1  Full listing, sorted by name, with type, size and modification time
      2  Only .txt files, plus the largest regular file
      3  Symlink-aware listing showing link targets

    Examples:

    \b
        dirstats /var/log 1
        dirstats ~/notes 2
        dirstats --log-level DEBUG /usr/lib 3
    """
    usage = MODE_USAGE.format(prog=_prog_name(ctx, "dirstats"))
    configure_logging(log_level=log_level)

    if len(arguments) != 2:
        _usage_error(ctx, usage)
    directory, mode = arguments

    try:
        config = build_config(directory=directory, mode=mode, log_level=log_level)
    except ArgumentError as exc:
        _usage_error(ctx, usage, exc)

    ctx.exit(_run(config, show_header=False))


@click.command()
@click.argument("arguments", nargs=-1, metavar="DIRECTORY")
@log_level_option
@click.version_option(version=__version__, prog_name="dirstats-legacy")
@click.pass_context
def legacy_cli(ctx: click.Context, arguments: tuple[str, ...], log_level: str) -> None:
    """dirstats-legacy - Full listing of one directory.

    Equivalent to mode 1 of dirstats, preceded by a banner naming the
    directory.
    """
    usage = LEGACY_USAGE.format(prog=_prog_name(ctx, "dirstats-legacy"))
    configure_logging(log_level=log_level)

    if len(arguments) != 1:
        _usage_error(ctx, usage)
    (directory,) = arguments

    try:
        config = build_config(
            directory=directory,
            mode=ListingMode.FULL,
            log_level=log_level,
            max_path_length=platform_path_limit(directory),
        )
    except ArgumentError as exc:
        _usage_error(ctx, usage, exc)

    ctx.exit(_run(config, show_header=True))
