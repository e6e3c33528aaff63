from __future__ import annotations

"""
Domain Error Taxonomy.

Filesystem syscall failures are not wrapped: they surface as the native
OSError raised by the 'os' module. Only conditions detected by dirkit
itself get a dedicated exception type.
"""


class DirkitError(Exception):
    """Base class for all errors raised by dirkit."""


class PathNotFoundError(DirkitError, FileNotFoundError):
    """
    Raised when an operation requires an existing path and none is found.

    Inherits from FileNotFoundError so callers handling the native
    filesystem error also catch it.

    Attributes:
        path: The path that was expected to exist.
    """

    def __init__(self, path: str, operation: str = "") -> None:
        self.path = path
        self.operation = operation
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}path does not exist: '{path}'")
