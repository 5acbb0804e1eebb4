"""Exceptions raised by FindFilesLib.

Both the sync and aio implementations raise the same exception types so
callers can switch implementations without touching their error handling.
Failures raised by user supplied predicates are never wrapped: they reach
the caller exactly as they were raised.
"""

from typing import Sequence


class FindFilesError(Exception):
    """Base class for all errors raised by FindFilesLib."""
    pass


class InvalidBoundError(FindFilesError, ValueError):
    """Raised when a depth or height bound is negative.

    Detected when the traversal is created, before any filesystem access.
    """

    def __init__(self, name: str, value: int):
        self.name = name
        self.value = value
        super().__init__(f"The {name} must be non-negative, got {value}")


class DirectoryError(FindFilesError):
    """Raised when a path that must be listed is not a readable directory."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class DirectoryNotFoundError(DirectoryError):
    """Raised when a directory to list does not exist."""

    def __init__(self, path: str):
        super().__init__(path, "The directory does not exist")


class NotADirectoryPathError(DirectoryError):
    """Raised when a path to list exists but is not a directory."""

    def __init__(self, path: str):
        super().__init__(path, "The path is not a directory")


class ConflictError(FindFilesError):
    """Raised when more than one element matches where exactly one is allowed.

    Attributes:
        paths: The conflicting elements, in the order they were found
    """

    def __init__(self, *paths: str):
        self.paths: Sequence[str] = paths
        listing = "\n".join(str(path) for path in paths)
        super().__init__(f"Conflicting paths match the same tests:\n{listing}")
