# catr/cli/__init__.py
# CLI entry point (console script `catr = catr.cli:app`)

from .app import app

__all__ = ["app"]
