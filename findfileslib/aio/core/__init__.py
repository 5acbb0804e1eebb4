"""Core building blocks for async path searches.

This module defines the async predicate combinators, lazy sequence
transformers and non-blocking filesystem queries. All components use
async/await patterns for non-blocking I/O.
"""

from .iterable import (
    resolve,
    as_async_iterator,
    map_elements,
    multi_map,
    first_element,
    all_elements,
    only_element,
)
from .filter import conjunction, disjunction, filter_elements
from .stat import is_file, is_directory, path_exists
from .readdirs import list_directory, readdir, readdirs

__all__ = [
    # Helpers
    'resolve',
    'as_async_iterator',
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
