"""Traversal bounds for FindFilesLib.

Each traversal call builds its own configuration object; nothing here is
shared between calls or read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .errors import InvalidBoundError
from .upward import upward_constrained_paths, upward_limited_paths, upward_paths


PathType = Union[str, "os.PathLike[str]"]


@dataclass
class DepthConfig:
    """Configuration for downward (breadth-first) traversal depth.

    Depth 0 holds the children of the start directory. ``max_depth=None``
    means the whole subtree is traversed.
    """

    max_depth: Optional[int] = None

    def validate(self) -> "DepthConfig":
        """Check the bound before any I/O happens.

        Raises:
            InvalidBoundError: If ``max_depth`` is negative
        """
        if self.max_depth is not None and self.max_depth < 0:
            raise InvalidBoundError("maximum depth", self.max_depth)
        return self

    def should_explore(self, depth: int) -> bool:
        """Check if subdirectories found at this depth should be expanded.

        Args:
            depth: Depth of the directory whose children were just listed

        Returns:
            True if the children may be listed in turn
        """
        if self.max_depth is None:
            return True
        return depth < self.max_depth


@dataclass
class HeightConfig:
    """Configuration for upward traversal.

    At most one of ``max_height`` and ``limit_path`` is set. Without either,
    the ancestors are followed up to the filesystem root.
    """

    max_height: Optional[int] = None
    limit_path: Optional[str] = None

    @classmethod
    def from_bound(cls, bound: Optional[Union[int, PathType]]) -> "HeightConfig":
        """Build a configuration from a height, a limit path or nothing.

        Args:
            bound: ``None``, a maximum height, or a path to stop at

        Returns:
            A validated HeightConfig
        """
        if bound is None:
            config = cls()
        elif isinstance(bound, int):
            config = cls(max_height=bound)
        else:
            config = cls(limit_path=os.path.abspath(os.fsdecode(bound)))
        return config.validate()

    def validate(self) -> "HeightConfig":
        """Check the bound before any I/O happens.

        Raises:
            InvalidBoundError: If ``max_height`` is negative
        """
        if self.max_height is not None and self.max_height < 0:
            raise InvalidBoundError("maximum height", self.max_height)
        return self

    def ancestors(self, start_path: str) -> Iterator[str]:
        """Select the ancestor chain matching this configuration."""
        if self.max_height is not None:
            return upward_constrained_paths(start_path, self.max_height)
        if self.limit_path is not None:
            return upward_limited_paths(start_path, self.limit_path)
        return upward_paths(start_path)
