# catr/cli/decorators.py
# CLI decorator for turning catr errors into Rich messages & exit codes

import functools
from typing import Callable, TypeVar, Any, cast

import typer

from ..core.exceptions import (
    CatrError,
    ConfigurationError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling catr errors in CLI commands w/ Rich output
def handle_catr_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..cat_io.console import console

        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.Abort, typer.BadParameter):
            # Typer control flow & usage errors keep their own exit codes
            raise
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except CatrError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)
        except Exception as e:
            console.print(format_error_message("Unexpected Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
