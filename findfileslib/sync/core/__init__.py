"""Core building blocks for synchronous path searches.

Predicate combinators, lazy sequence transformers and the blocking
filesystem queries every traversal and finder is built from.
"""

from .filter import conjunction, disjunction, filter_elements
from .iterable import (
    map_elements,
    multi_map,
    first_element,
    all_elements,
    only_element,
)
from .stat import is_file, is_directory, path_exists
from .readdirs import list_directory, readdir, readdirs

__all__ = [
    # Combinators
    'conjunction',
    'disjunction',
    # Transformers
    'filter_elements',
    'map_elements',
    'multi_map',
    'first_element',
    'all_elements',
    'only_element',
    # Filesystem
    'is_file',
    'is_directory',
    'path_exists',
    'list_directory',
    'readdir',
    'readdirs',
]
