"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Predicate combinators and path predicates (pure string computation)
- Upward ancestor chains (path arithmetic, no I/O)
- Traversal bounds configuration
- Scope normalization and exceptions

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .combinators import conjunction, disjunction
from .config import DepthConfig, HeightConfig
from .errors import (
    FindFilesError,
    InvalidBoundError,
    DirectoryError,
    DirectoryNotFoundError,
    NotADirectoryPathError,
    ConflictError,
)
from .path import (
    SegmentTester,
    segment_filter,
    segments,
    of_basename,
    of_name,
    of_dirname,
    of_extname,
    has_path_segments,
    does_not_have_any_path_segment,
)
from .upward import upward_paths, upward_constrained_paths, upward_limited_paths

__all__ = [
    'conjunction',
    'disjunction',
    'DepthConfig',
    'HeightConfig',
    'FindFilesError',
    'InvalidBoundError',
    'DirectoryError',
    'DirectoryNotFoundError',
    'NotADirectoryPathError',
    'ConflictError',
    'SegmentTester',
    'segment_filter',
    'segments',
    'of_basename',
    'of_name',
    'of_dirname',
    'of_extname',
    'has_path_segments',
    'does_not_have_any_path_segment',
    'upward_paths',
    'upward_constrained_paths',
    'upward_limited_paths',
]
