"""Application entry points for dirstats.

``main`` runs the mode-selecting command (``dirstats <directory> <mode>``);
``legacy_main`` runs the single-mode full listing
(``dirstats-legacy <directory>``). Both exit with status 1 on bad
arguments or an unreadable directory and 0 otherwise, including runs where
individual entries could not be inspected.
"""

from __future__ import annotations

from typing import NoReturn

from dirstats.app.cli import cli, legacy_cli

__all__ = ["legacy_main", "main"]


def main() -> NoReturn:
    """Entry point for the ``dirstats`` command."""
    cli.main(prog_name="dirstats")


def legacy_main() -> NoReturn:
    """Entry point for the ``dirstats-legacy`` command."""
    legacy_cli.main(prog_name="dirstats-legacy")


if __name__ == "__main__":
    main()
