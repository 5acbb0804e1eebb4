"""High-level async API for FindFilesLib.

Async counterparts of :mod:`findfileslib.sync.api`. The scope may also be
an async iterable of directories (for instance ``upward_directories()``),
and predicates may be coroutine functions.
"""

from typing import Any, Awaitable, Callable, List, Optional

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


async def find_file(scope=None, *predicates: Callable[[str], Any]) -> Optional[str]:
    """Find the first entry satisfying all the predicates.

    The search stops at the first match: later entries are never tested and
    later directories are never read.

    Args:
        scope: Directory, iterable or async iterable of directories
            (current directory if None)
        *predicates: Sync or async tests every match must pass

    Returns:
        Absolute path of the first match, or None
    """
    matches = _matches(scope, predicates)
    if matches is None:
        return None
    return await first_element(matches)


async def find_all_files(scope=None, *predicates: Callable[[str], Any]) -> List[str]:
    """Find every entry satisfying all the predicates.

    Returns:
        Absolute paths of the matches, in scope order then name order
    """
    matches = _matches(scope, predicates)
    if matches is None:
        return []
    return await all_elements(matches)


async def strict_find_file(scope=None, *predicates: Callable[[str], Any]) -> Optional[str]:
    """Find the only entry satisfying all the predicates.

    After a first match the search carries on until the scope is exhausted
    or a second match is found.

    Returns:
        Absolute path of the match, or None when nothing matches

    Raises:
        ConflictError: If two or more entries match
    """
    matches = _matches(scope, predicates)
    if matches is None:
        return None
    return await only_element(matches)


find_only_file = strict_find_file


def has_file(*predicates: Callable[[str], Any]) -> Callable[[str], Awaitable[bool]]:
    """Build an async predicate checking a directory for a matching child.

    The returned coroutine function is false for paths that do not exist or
    are not directories. Without predicates it is always false.
    """
    async def _has_file(path) -> bool:
        if not predicates or not await is_directory(path):
            return False
        return await find_file(path, *predicates) is not None

    return _has_file
