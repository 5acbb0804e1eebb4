"""Breadth-first downward traversal of a directory tree.

Yields every path below a start directory, level by level: first the
children of the start directory (depth 0), then their children (depth 1),
and so on. The start directory itself is never yielded.
"""

import logging
import os
from collections import deque
from typing import Deque, Iterator, Optional, Set, Tuple

from ..._common.config import DepthConfig
from ..._common.scope import resolve_start
from ..core.filter import filter_elements
from ..core.readdirs import readdir
from ..core.stat import is_directory

logger = logging.getLogger(__name__)


class BreadthFirstTraverser:
    """Breadth-first traversal over the filesystem.

    The frontier is a queue of ``(directory, depth)`` pairs. Each directory
    is listed at most once per traversal, keyed by its real path, so
    symbolic link cycles terminate. A link pointing back into the tree is
    still yielded; it is just not expanded a second time.
    """

    def __init__(self, depth_config: Optional[DepthConfig] = None):
        """Initialize traverser with optional depth configuration.

        Args:
            depth_config: Bounds of the traversal (unbounded if omitted)
        """
        self.depth_config = (depth_config or DepthConfig()).validate()

    def traverse(self, start_directory: str) -> Iterator[str]:
        """Traverse the tree below a start directory.

        Args:
            start_directory: Absolute path of the directory to expand first

        Yields:
            Absolute paths in breadth-first order

        Raises:
            DirectoryNotFoundError: If the start directory does not exist
            NotADirectoryPathError: If the start path is not a directory
        """
        frontier: Deque[Tuple[str, int]] = deque([(start_directory, 0)])
        expanded: Set[str] = set()

        while frontier:
            directory, depth = frontier.popleft()

            real_path = os.path.realpath(directory)
            if real_path in expanded:
                logger.debug("Skipping %s, already expanded as %s", directory, real_path)
                continue
            expanded.add(real_path)

            logger.debug("Expanding %s at depth %d", directory, depth)
            explore = self.depth_config.should_explore(depth)
            for child in readdir(directory):
                yield child
                if explore and is_directory(child):
                    frontier.append((child, depth + 1))


def downward_files(start_directory=None, max_depth: Optional[int] = None) -> Iterator[str]:
    """Lazily yield every path below a directory, breadth-first.

    Args:
        start_directory: Directory to start from (current directory if None)
        max_depth: Deepest level to yield; 0 yields only the direct children.
            None traverses the whole subtree.

    Returns:
        Iterator over absolute paths

    Raises:
        InvalidBoundError: Immediately, if ``max_depth`` is negative
    """
    traverser = BreadthFirstTraverser(DepthConfig(max_depth))
    return traverser.traverse(resolve_start(start_directory))


def downward_directories(start_directory=None, max_depth: Optional[int] = None) -> Iterator[str]:
    """Lazily yield every directory below a directory, breadth-first.

    Same arguments and errors as :func:`downward_files`.
    """
    return filter_elements(downward_files(start_directory, max_depth), is_directory)
