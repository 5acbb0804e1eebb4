"""Upward traversal along the ancestors of a path."""

from typing import Iterator, Optional, Union

from ..._common.config import HeightConfig
from ..._common.scope import resolve_start
from ..core.filter import filter_elements
from ..core.readdirs import readdirs
from ..core.stat import is_directory


def upward_directories(start_path=None, bound: Optional[Union[int, str]] = None) -> Iterator[str]:
    """Lazily yield the ancestor directories of a path, nearest first.

    The start path does not need to exist; only ancestors that are
    directories are yielded.

    Args:
        start_path: Path to climb from (current directory if None)
        bound: None to climb to the filesystem root, an int to climb at most
            that many levels, or a path to stop at (inclusive)

    Returns:
        Iterator over absolute directory paths

    Raises:
        InvalidBoundError: Immediately, if the height is negative
    """
    config = HeightConfig.from_bound(bound)
    return filter_elements(config.ancestors(resolve_start(start_path)), is_directory)


def upward_files(start_path=None, bound: Optional[Union[int, str]] = None) -> Iterator[str]:
    """Lazily yield the entries of every ancestor directory, nearest first.

    Same arguments and errors as :func:`upward_directories`.
    """
    return readdirs(upward_directories(start_path, bound))
