# catr/cli/output_manager.py
# Unified output management implementation for normal & verbose modes

# * Real implementation w/ Rich console output (stderr) & file logging
# * Registered via set_output_manager() at CLI startup
# * Respects layering: this module can import from cat_io

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape

from ..core.exceptions import FileOperationError, describe_os_error
from ..core.output import OutputLevel


class OutputManager:
    # Real output manager w/ console & file logging support
    # Implements OutputInterface protocol for use w/ core registry

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: Any = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        log_file: Path | None = None,
    ) -> None:
        # Initialize output manager for a CLI session
        # A log file implies verbose output so there is something to write to it
        self._level = OutputLevel.VERBOSE if log_file is not None else requested_level
        self._session_start = time.time()
        self._setup_log_file(log_file)

    # OutputInterface implementation

    def get_level(self) -> OutputLevel:
        return self._level

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if self._level >= OutputLevel.VERBOSE:
            from ..cat_io.console import console

            prefix = f"[dim][{self._elapsed()}][/] [bold cyan]\\[{category}][/]"
            console.print(f"{prefix} {escape(msg)}", **kwargs)
            if detail:
                for line in detail.split("\n"):
                    console.print(f"  [dim]{escape(line)}[/]")
            # File logging (plain text)
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
            if detail:
                for line in detail.split("\n"):
                    self._write_to_file(f"  {line}")

    def start_session(self) -> None:
        self._session_start = time.time()
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Started: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            self._write_to_file(f"{'='*60}\n")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'='*60}\n")
        self.cleanup()

    # File logging

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.time() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()

        self._log_file_path = log_file
        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._log_file_handle = open(log_file, "a", encoding="utf-8")
            except OSError as e:
                self._log_file_path = None
                raise FileOperationError(
                    f"Cannot open log file {log_file}: {describe_os_error(e)}", log_file
                ) from e

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.write(f"{msg}\n")
            self._log_file_handle.flush()

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.close()
            self._log_file_handle = None
