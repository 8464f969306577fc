# catr/cli/runner.py
# Driver: open each source in order, number its lines & write them out

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import typer

from ..config.settings import CatSettings
from ..core.exceptions import SourceOpenError
from ..core.numbering import describe_mode, number_stream
from ..core.verbose import vlog_mode, vlog_source_done, vlog_source_failed
from ..cat_io.sources import open_source


LineWriter = Callable[[str], None]


# outcome of one run over all configured sources
@dataclass
class RunReport:
    processed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    lines_written: int = 0

    @property
    def ok(self) -> bool:
        return not self.failed

    # any source that failed to open makes the whole run exit 1
    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


# color=True keeps click from stripping ANSI sequences when the stream is not a tty
def _echo_line(line: str) -> None:
    typer.echo(line, color=True)


def _echo_error(message: str) -> None:
    typer.echo(message, err=True, color=True)


# * Concatenate every source in order; open failures are reported & skipped
def run_cat(
    settings: CatSettings,
    emit: Optional[LineWriter] = None,
    report_error: Optional[LineWriter] = None,
) -> RunReport:
    emit = emit or _echo_line
    report_error = report_error or _echo_error
    report = RunReport()

    for token in settings.files:
        try:
            stream = open_source(token)
        except SourceOpenError as e:
            vlog_source_failed(token, e.reason)
            report_error(str(e))
            report.failed.append(token)
            continue

        # fresh mode per source so numbering restarts at 1
        mode = settings.initial_mode()
        vlog_mode(token, describe_mode(mode))

        with stream:
            for line in number_stream(stream, mode):
                emit(line)
                report.lines_written += 1

        vlog_source_done(token, stream.lines_read, stream.lines_skipped)
        report.processed.append(token)

    return report
