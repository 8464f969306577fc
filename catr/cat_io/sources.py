# catr/cat_io/sources.py
# Source reader: resolve a source token (path or "-") into a line stream

from __future__ import annotations

import sys
from typing import IO, Any, Iterator, Union

from ..core.constants import INPUT_ENCODING, MAX_CONSECUTIVE_READ_ERRORS, STDIN_TOKEN
from ..core.exceptions import SourceOpenError
from ..core.verbose import vlog_source_open


# * Strip one trailing "\n" & a "\r" directly before it
def strip_line_ending(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


# * Lazy, finite, forward-only sequence of decoded lines from one source
class LineStream:
    # Wraps a binary (or text) handle; iterating yields lines w/ endings stripped.
    # Lines that fail to decode are skipped; a failing read drops that read & continues,
    # until MAX_CONSECUTIVE_READ_ERRORS failures in a row end the stream.
    # Close via the context manager; handles not owned (stdin) are left open.

    def __init__(
        self,
        handle: IO[Any],
        name: str,
        owns_handle: bool = True,
        encoding: str = INPUT_ENCODING,
    ) -> None:
        self.name = name
        self.encoding = encoding
        self.lines_read = 0
        self.lines_skipped = 0
        self._handle = handle
        self._owns_handle = owns_handle
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[str]:
        failures = 0
        while not self._closed:
            try:
                raw: Union[bytes, str] = self._handle.readline()
            except (OSError, UnicodeDecodeError):
                # text handles decode inside readline()
                failures += 1
                self.lines_skipped += 1
                if failures >= MAX_CONSECUTIVE_READ_ERRORS:
                    return
                continue
            failures = 0
            if not raw:
                return

            if isinstance(raw, bytes):
                try:
                    text = raw.decode(self.encoding)
                except UnicodeDecodeError:
                    self.lines_skipped += 1
                    continue
            else:
                text = raw

            self.lines_read += 1
            yield strip_line_ending(text)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_handle:
            self._handle.close()

    def __enter__(self) -> "LineStream":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, closed={self._closed!r})"


# * Open standard input as a line stream (never closed by the stream)
def _open_stdin(token: str) -> LineStream:
    stdin = sys.stdin
    if stdin is None or stdin.closed:
        raise SourceOpenError(token, OSError("standard input is not available"))
    handle = getattr(stdin, "buffer", stdin)
    vlog_source_open(token, "stdin")
    return LineStream(handle, token, owns_handle=False)


# * Resolve a source token to a line stream; raises SourceOpenError if it can't be opened
def open_source(token: str) -> LineStream:
    if not token:
        raise ValueError("source token must be a non-empty string")
    if token == STDIN_TOKEN:
        return _open_stdin(token)

    try:
        handle = open(token, "rb")
    except OSError as e:
        raise SourceOpenError(token, e) from e

    vlog_source_open(token, "file")
    return LineStream(handle, token)
