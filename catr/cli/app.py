# catr/cli/app.py
# Root Typer application: the single `catr` command

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ..core.verbose import VerboseSession, vlog_config
from .decorators import handle_catr_error
from .params import (
    FilesArg,
    NumberOpt,
    NumberNonblankOpt,
    VersionOpt,
    VerboseOpt,
    LogFileOpt,
    build_settings,
)
from .runner import run_cat


app = typer.Typer(
    help="Concatenate files to standard output, optionally numbering lines.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Read each FILE (or standard input) in order & write it to standard output
@app.command()
@handle_catr_error
def cat(
    files: Optional[List[str]] = FilesArg(),
    number: bool = NumberOpt(),
    number_nonblank: bool = NumberNonblankOpt(),
    version: bool = VersionOpt(),
    verbose: bool = VerboseOpt(),
    log_file: Optional[Path] = LogFileOpt(),
) -> None:
    settings = build_settings(files, number, number_nonblank)

    # log_file implies verbose mode
    with VerboseSession(enabled=verbose or log_file is not None, log_file=log_file):
        vlog_config("files", settings.files)
        vlog_config("number_lines", settings.number_lines)
        vlog_config("number_nonblank_lines", settings.number_nonblank_lines)

        report = run_cat(settings)

    if report.exit_code:
        raise typer.Exit(report.exit_code)
