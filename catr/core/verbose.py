# catr/core/verbose.py
# Verbose logging utilities - delegates to the registered output manager w/ structured
# logging for configuration, numbering mode & per-source open/finish events

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a session
def init_verbose(enabled: bool = False, log_file: Path | None = None) -> None:
    requested_level = OutputLevel.VERBOSE if enabled else OutputLevel.NORMAL

    # ! lazy import keeps the core layer free of CLI imports at module load
    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(requested_level=requested_level, log_file=log_file)
    set_output_manager(manager)


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Log the numbering mode selected for a source
def vlog_mode(token: str, description: str) -> None:
    get_output_manager().verbose(f"{token}: {description}", "MODE")


# * Log a source opened for reading
def vlog_source_open(token: str, kind: str) -> None:
    get_output_manager().verbose(f"Open: {token} ({kind})", "SOURCE")


# * Log a source that could not be opened
def vlog_source_failed(token: str, reason: str) -> None:
    get_output_manager().verbose(f"Failed: {token}", "SOURCE", reason)


# * Log a source read to completion
def vlog_source_done(token: str, lines_read: int, lines_skipped: int) -> None:
    detail = f"{lines_skipped:,} unreadable lines skipped" if lines_skipped else None
    get_output_manager().verbose(
        f"Done: {token} ({lines_read:,} lines)", "SOURCE", detail
    )


# * Context manager for verbose logging session
class VerboseSession:
    def __init__(self, enabled: bool = False, log_file: Path | None = None):
        self.enabled = enabled
        self.log_file = log_file

    def __enter__(self) -> "VerboseSession":
        init_verbose(self.enabled, self.log_file)
        get_output_manager().start_session()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        get_output_manager().end_session()
