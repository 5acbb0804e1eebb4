"""Ancestor chains computed from path strings alone.

These generators perform no I/O: they only take successive directory names
of an already resolved path, so the sync and aio implementations share them
and filter the results with their own ``is_directory`` check.
"""

import os
from typing import Iterator


def upward_paths(start_path: str) -> Iterator[str]:
    """Yield the ancestors of a path, nearest first, root included.

    The start path itself is never yielded. Starting at the filesystem root
    yields nothing since the root has no parent.

    Args:
        start_path: Absolute path to climb from

    Yields:
        Each ancestor exactly once, ending with the filesystem root
    """
    current = start_path
    while True:
        parent = os.path.dirname(current)
        if parent == current:
            return
        yield parent
        current = parent


def upward_constrained_paths(start_path: str, max_height: int) -> Iterator[str]:
    """Yield at most ``max_height`` ancestors of a path, nearest first."""
    height = 0
    for path in upward_paths(start_path):
        if height >= max_height:
            return
        yield path
        height += 1


def upward_limited_paths(start_path: str, limit_path: str) -> Iterator[str]:
    """Yield ancestors of a path up to and including ``limit_path``.

    If ``limit_path`` is not an ancestor (for instance it lives on another
    drive) the chain continues up to the filesystem root.
    """
    limit = os.path.normcase(limit_path)
    for path in upward_paths(start_path):
        yield path
        if os.path.normcase(path) == limit:
            return
