# catr/core/exceptions.py
# Custom exception hierarchy for catr (pure - no I/O operations)

from __future__ import annotations

from pathlib import Path


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for catr
class CatrError(Exception):
    pass


# * Configuration errors (invalid flag combinations, bad settings)
class ConfigurationError(CatrError):
    pass


# * Base error for file I/O operations
class FileOperationError(CatrError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Source token could not be opened for reading; str() is the user-facing diagnostic
class SourceOpenError(FileOperationError):
    def __init__(self, token: str, cause: BaseException):
        self.token = token
        self.cause = cause
        self.reason = describe_os_error(cause)
        super().__init__(f"Failed to open {token}: {self.reason}", token)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(token={self.token!r}, cause={self.cause!r})"
        )


# * Human-readable reason for an OS-level failure (strerror when available)
def describe_os_error(error: BaseException) -> str:
    strerror = getattr(error, "strerror", None)
    if strerror:
        return strerror
    return str(error) or error.__class__.__name__
