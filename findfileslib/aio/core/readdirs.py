"""Non-blocking directory listing.

Each directory is scanned in a worker thread with ``os.scandir``; the
handle is closed before the first child is yielded. Children are sorted by
name, exactly like the sync implementation.
"""

import asyncio
import logging
import os
from typing import Any, AsyncIterator, List

from ..._common.errors import DirectoryNotFoundError, NotADirectoryPathError
from .iterable import multi_map

logger = logging.getLogger(__name__)


def _scan_directory_sync(directory: str) -> List[str]:
    """Synchronous function to be run in a thread with proper resource management."""
    with os.scandir(directory) as iterator:
        return [entry.name for entry in iterator]


async def list_directory(directory: str) -> List[str]:
    """List the entry names of a directory, sorted.

    Raises:
        DirectoryNotFoundError: If the directory does not exist
        NotADirectoryPathError: If the path is not a directory
    """
    try:
        names = await asyncio.to_thread(_scan_directory_sync, directory)
    except FileNotFoundError as error:
        raise DirectoryNotFoundError(directory) from error
    except NotADirectoryError as error:
        raise NotADirectoryPathError(directory) from error
    logger.debug("Listed %d entries in %s", len(names), directory)
    return sorted(names)


async def readdir(directory) -> AsyncIterator[str]:
    """Lazily yield the absolute paths of a directory's children.

    Args:
        directory: Directory to list, resolved against the working directory

    Yields:
        Absolute child paths, sorted by name
    """
    resolved = os.path.abspath(os.fsdecode(directory))
    for name in await list_directory(resolved):
        yield os.path.join(resolved, name)


def readdirs(directories: Any) -> AsyncIterator[str]:
    """Lazily yield the children of several directories, directory by directory.

    Args:
        directories: Sync or async iterable of directories
    """
    return multi_map(directories, readdir)
