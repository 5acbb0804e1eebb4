"""Non-blocking file status predicates.

The ``os.stat`` calls run in a worker thread through ``asyncio.to_thread``
so the event loop keeps running while the filesystem answers. Semantics
match the sync implementation: symbolic links are followed and a missing
path is neither a file nor a directory.
"""

import asyncio
import os
import stat as stat_module  # To avoid name collision with os.stat results
from typing import Optional


def _safe_stat_sync(path) -> Optional[os.stat_result]:
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None


async def safe_stat(path) -> Optional[os.stat_result]:
    """Stat a path, returning None when it does not exist."""
    return await asyncio.to_thread(_safe_stat_sync, path)


async def is_file(path) -> bool:
    """Check if a path exists and is a regular file."""
    result = await safe_stat(path)
    return result is not None and stat_module.S_ISREG(result.st_mode)


async def is_directory(path) -> bool:
    """Check if a path exists and is a directory."""
    result = await safe_stat(path)
    return result is not None and stat_module.S_ISDIR(result.st_mode)


async def path_exists(path) -> bool:
    """Check if a path exists (broken symbolic links do not)."""
    return await safe_stat(path) is not None
