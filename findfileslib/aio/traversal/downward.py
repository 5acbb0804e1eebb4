"""Async breadth-first downward traversal of a directory tree.

Same traversal order and guarantees as the sync implementation; every
directory listing and status query is awaited, and only one directory is
read at a time so the output order stays deterministic.
"""

import asyncio
import logging
import os
from collections import deque
from typing import AsyncIterator, Deque, Optional, Set, Tuple

from ..._common.config import DepthConfig
from ..._common.scope import resolve_start
from ..core.filter import filter_elements
from ..core.readdirs import readdir
from ..core.stat import is_directory

logger = logging.getLogger(__name__)


class AsyncBreadthFirstTraverser:
    """Async breadth-first traversal over the filesystem.

    Visits all entries at depth N before any entry at depth N+1. Each
    directory is listed at most once per traversal, keyed by its real path,
    so symbolic link cycles terminate.
    """

    def __init__(self, depth_config: Optional[DepthConfig] = None):
        """Initialize traverser with optional depth configuration.

        Args:
            depth_config: Bounds of the traversal (unbounded if omitted)
        """
        self.depth_config = (depth_config or DepthConfig()).validate()

    async def traverse(self, start_directory: str) -> AsyncIterator[str]:
        """Traverse the tree below a start directory with streaming.

        Args:
            start_directory: Absolute path of the directory to expand first

        Yields:
            Absolute paths in breadth-first order

        Raises:
            DirectoryNotFoundError: If the start directory does not exist
            NotADirectoryPathError: If the start path is not a directory
        """
        # Queue stores (directory, depth) tuples
        frontier: Deque[Tuple[str, int]] = deque([(start_directory, 0)])
        expanded: Set[str] = set()

        while frontier:
            directory, depth = frontier.popleft()

            real_path = await asyncio.to_thread(os.path.realpath, directory)
            if real_path in expanded:
                logger.debug("Skipping %s, already expanded as %s", directory, real_path)
                continue
            expanded.add(real_path)

            logger.debug("Expanding %s at depth %d", directory, depth)
            explore = self.depth_config.should_explore(depth)
            async for child in readdir(directory):
                yield child
                if explore and await is_directory(child):
                    frontier.append((child, depth + 1))


def downward_files(start_directory=None, max_depth: Optional[int] = None) -> AsyncIterator[str]:
    """Lazily yield every path below a directory, breadth-first.

    The bound is checked when this function is called, not when the
    iteration starts; the start directory is read on the first ``anext``.

    Args:
        start_directory: Directory to start from (current directory if None)
        max_depth: Deepest level to yield; 0 yields only the direct children.
            None traverses the whole subtree.

    Returns:
        Async iterator over absolute paths

    Raises:
        InvalidBoundError: Immediately, if ``max_depth`` is negative
    """
    traverser = AsyncBreadthFirstTraverser(DepthConfig(max_depth))
    return traverser.traverse(resolve_start(start_directory))


def downward_directories(start_directory=None, max_depth: Optional[int] = None) -> AsyncIterator[str]:
    """Lazily yield every directory below a directory, breadth-first.

    Same arguments and errors as :func:`downward_files`.
    """
    return filter_elements(downward_files(start_directory, max_depth), is_directory)
