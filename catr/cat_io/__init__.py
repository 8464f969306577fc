# catr/cat_io/__init__.py
# Package initialization & exports for catr I/O operations

from .sources import (
    LineStream,
    open_source,
    strip_line_ending,
)

__all__ = [
    "LineStream",
    "open_source",
    "strip_line_ending",
]
