from pathlib import Path


class SysFactsError(Exception):
    """Base exception for every failure raised by sysfacts."""


class NotFoundError(SysFactsError):
    """
    Raised when an expected file, directory or environment source is absent.
    """

    def __init__(self, path: str | Path, message: str | None = None):
        self.path = str(path)
        super().__init__(message or f'"{self.path}" does not exist')


class ReadError(SysFactsError):
    """
    Raised when a path exists but cannot be read (permissions, a directory, I/O errors).
    """

    def __init__(self, path: str | Path, error: OSError):
        self.path = str(path)
        self.error = error
        super().__init__(f'failed to read "{self.path}": {error.strerror or error}')


class MalformedDataError(SysFactsError, ValueError):
    """
    Raised when a value is present but cannot be coerced to its expected type.
    """

    def __init__(self, field: str, value: str, source: str):
        self.field = field
        self.value = value
        self.source = source
        super().__init__(f'invalid value "{value}" for "{field}" in {source}')


class UnsupportedError(SysFactsError):
    """Raised when an operation is unavailable on this platform or architecture."""
