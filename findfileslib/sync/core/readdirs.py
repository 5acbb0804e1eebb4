"""Blocking directory listing.

Directories are listed with ``os.scandir`` in one go; the handle is closed
before the first child is yielded, so an abandoned iteration never keeps a
directory open. Children are sorted by name so repeated runs over an
unchanged tree produce identical results.
"""

import logging
import os
from typing import Iterable, Iterator, List

from ..._common.errors import DirectoryNotFoundError, NotADirectoryPathError
from .iterable import multi_map

logger = logging.getLogger(__name__)


def list_directory(directory: str) -> List[str]:
    """List the entry names of a directory, sorted.

    Args:
        directory: Directory to list

    Returns:
        Sorted entry names

    Raises:
        DirectoryNotFoundError: If the directory does not exist
        NotADirectoryPathError: If the path is not a directory
    """
    try:
        with os.scandir(directory) as iterator:
            names = [entry.name for entry in iterator]
    except FileNotFoundError as error:
        raise DirectoryNotFoundError(directory) from error
    except NotADirectoryError as error:
        raise NotADirectoryPathError(directory) from error
    logger.debug("Listed %d entries in %s", len(names), directory)
    return sorted(names)


def readdir(directory) -> Iterator[str]:
    """Lazily yield the absolute paths of a directory's children.

    The directory is resolved against the current working directory when
    iteration starts, and only then is it listed.

    Args:
        directory: Directory to list

    Yields:
        Absolute child paths, sorted by name
    """
    resolved = os.path.abspath(os.fsdecode(directory))
    for name in list_directory(resolved):
        yield os.path.join(resolved, name)


def readdirs(directories: Iterable) -> Iterator[str]:
    """Lazily yield the children of several directories, directory by directory."""
    return multi_map(directories, readdir)
