"""Error types shared by the converter and output subsystems."""

from __future__ import annotations


class ConversionError(Exception):
    """Wraps a filesystem failure with the path and step that hit it."""

    def __init__(
        self, path: str, operation: str, message: str, cause: Exception | None = None
    ) -> None:
        self.path = path
        self.operation = operation
        super().__init__(message)
        self.__cause__ = cause


class InputNotFoundError(ConversionError):
    def __init__(self, path: str, cause: Exception | None = None) -> None:
        super().__init__(path, "stat", f"file '{path}' doesn't exist!", cause)


class InputAccessError(ConversionError):
    def __init__(self, path: str, cause: Exception | None = None) -> None:
        super().__init__(path, "stat", f"cannot access file '{path}': {_reason(cause)}", cause)


class InputReadError(ConversionError):
    def __init__(self, path: str, cause: Exception | None = None) -> None:
        super().__init__(path, "read", f"failed to read file '{path}': {_reason(cause)}", cause)


class OutputOpenError(ConversionError):
    def __init__(self, path: str, cause: Exception | None = None) -> None:
        super().__init__(
            path, "open", f"failed to open output file '{path}': {_reason(cause)}", cause
        )


def _reason(cause: Exception | None) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause) if cause is not None else "unknown error"
