"""High-level synchronous API for FindFilesLib.

This module provides the finders: simple functions that search the
entries of one or more directories with a set of predicates, under a
cardinality policy (first match, all matches, exactly one match).

Every finder takes an optional leading scope followed by predicates:

    find_file(scope=None, *predicates)

The scope is a directory, an iterable of directories, or None for the
current working directory. Directories are searched in the given order and
their entries in name order. Predicates are combined with a conjunction;
with no predicate at all, nothing ever matches.
"""

from typing import Callable, List, Optional

from .._common.scope import normalize_scope
from .core.filter import conjunction, filter_elements
from .core.iterable import all_elements, first_element, only_element
from .core.readdirs import readdirs
from .core.stat import is_directory


def _matches(scope, predicates):
    """Lazily yield the entries of the scope satisfying all predicates."""
    directories, predicates = normalize_scope(scope, predicates)
    if not predicates:
        return None
    return filter_elements(readdirs(directories), conjunction(predicates))


def find_file(scope=None, *predicates: Callable[[str], bool]) -> Optional[str]:
    """Find the first entry satisfying all the predicates.

    Directories are listed lazily and the search stops at the first match,
    so later directories are never read.

    Args:
        scope: Directory or directories to search (current directory if None)
        *predicates: Tests every match must pass

    Returns:
        Absolute path of the first match, or None

    Example:
        >>> find_file("/etc", of_basename("hosts"))
        '/etc/hosts'
    """
    matches = _matches(scope, predicates)
    if matches is None:
        return None
    return first_element(matches)


def find_all_files(scope=None, *predicates: Callable[[str], bool]) -> List[str]:
    """Find every entry satisfying all the predicates.

    Args:
        scope: Directory or directories to search (current directory if None)
        *predicates: Tests every match must pass

    Returns:
        Absolute paths of the matches, in scope order then name order
    """
    matches = _matches(scope, predicates)
    if matches is None:
        return []
    return all_elements(matches)


def strict_find_file(scope=None, *predicates: Callable[[str], bool]) -> Optional[str]:
    """Find the only entry satisfying all the predicates.

    After a first match the search carries on until the scope is exhausted
    or a second match is found, since uniqueness cannot be confirmed
    earlier.

    Args:
        scope: Directory or directories to search (current directory if None)
        *predicates: Tests the match must pass

    Returns:
        Absolute path of the match, or None when nothing matches

    Raises:
        ConflictError: If two or more entries match
    """
    matches = _matches(scope, predicates)
    if matches is None:
        return None
    return only_element(matches)


find_only_file = strict_find_file


def has_file(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    """Build a predicate checking a directory for a matching direct child.

    The returned predicate is false for paths that do not exist or are not
    directories; it never raises for them. Without predicates it is always
    false.

    Example:
        >>> is_package = has_file(of_basename("__init__.py"))
        >>> find_all_files("src", is_package)
    """
    def _has_file(path) -> bool:
        if not predicates or not is_directory(path):
            return False
        return find_file(path, *predicates) is not None

    return _has_file
