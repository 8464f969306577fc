# catr/cat_io/console.py
# Shared Rich console for catr diagnostics & verbose logs

# * Bound to stderr: stdout carries only the concatenated data lines, written w/ typer.echo
# * Callers import it lazily (`from ..cat_io.console import console`) so tests can patch
# * `catr.cat_io.console.console` w/ a recording Console

from rich.console import Console


console = Console(stderr=True)
