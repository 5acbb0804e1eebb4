"""Synchronous implementation of FindFilesLib.

This package contains the blocking implementation: every filesystem call
blocks the calling thread, and traversals are plain lazy iterators.
"""

# Core components
from .core import (
    conjunction,
    disjunction,
    filter_elements,
    map_elements,
    multi_map,
    first_element,
    all_elements,
    only_element,
    is_file,
    is_directory,
    path_exists,
    readdir,
    readdirs,
)

# Traversals
from .traversal import (
    BreadthFirstTraverser,
    downward_files,
    downward_directories,
    upward_directories,
    upward_files,
)

# Path predicates (re-exported from _common)
from .._common.path import (
    segments,
    of_basename,
    of_name,
    of_dirname,
    of_extname,
    has_path_segments,
    does_not_have_any_path_segment,
)

# Errors (re-exported from _common)
from .._common.errors import (
    FindFilesError,
    InvalidBoundError,
    DirectoryError,
    DirectoryNotFoundError,
    NotADirectoryPathError,
    ConflictError,
)

# High-level API
from .api import (
    find_file,
    find_all_files,
    strict_find_file,
    find_only_file,
    has_file,
)

__all__ = [
    # Core
    'conjunction',
    'disjunction',
    'filter_elements',
    'map_elements',
    'multi_map',
    'first_element',
    'all_elements',
    'only_element',
    'is_file',
    'is_directory',
    'path_exists',
    'readdir',
    'readdirs',
    # Traversals
    'BreadthFirstTraverser',
    'downward_files',
    'downward_directories',
    'upward_directories',
    'upward_files',
    # Path predicates
    'segments',
    'of_basename',
    'of_name',
    'of_dirname',
    'of_extname',
    'has_path_segments',
    'does_not_have_any_path_segment',
    # Errors
    'FindFilesError',
    'InvalidBoundError',
    'DirectoryError',
    'DirectoryNotFoundError',
    'NotADirectoryPathError',
    'ConflictError',
    # API
    'find_file',
    'find_all_files',
    'strict_find_file',
    'find_only_file',
    'has_file',
]
