# catr/cli/params.py
# CLI argument definitions & conversion of parsed arguments into CatSettings

from __future__ import annotations

from typing import Any, List, Optional

import typer

from .. import __version__
from ..config.settings import CatSettings
from ..core.constants import STDIN_TOKEN
from ..core.exceptions import ConfigurationError


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"catr {__version__}")
        raise typer.Exit()


def FilesArg() -> Any:
    return typer.Argument(
        None,
        metavar="FILE",
        help=f"Input file(s); '{STDIN_TOKEN}' reads standard input (default)",
        show_default=False,
    )


def NumberOpt() -> Any:
    return typer.Option(False, "--number", "-n", help="Number all output lines")


def NumberNonblankOpt() -> Any:
    return typer.Option(
        False, "--number-nonblank", "-b", help="Number non-blank output lines"
    )


def VersionOpt() -> Any:
    return typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version & exit.",
    )


# hidden troubleshooting switches; the documented surface is FILE, -n & -b
def VerboseOpt() -> Any:
    return typer.Option(False, "--verbose", hidden=True, help="Log source handling to stderr")


def LogFileOpt() -> Any:
    return typer.Option(
        None, "--log-file", hidden=True, help="Append verbose logs to file (implies --verbose)"
    )


# * Build validated settings from parsed CLI values; -n & -b are mutually exclusive
def build_settings(
    files: Optional[List[str]], number: bool, number_nonblank: bool
) -> CatSettings:
    if number and number_nonblank:
        raise typer.BadParameter("-n and -b cannot be used together")
    try:
        return CatSettings(
            files=list(files) if files else [STDIN_TOKEN],
            number_lines=number,
            number_nonblank_lines=number_nonblank,
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
