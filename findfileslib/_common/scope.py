"""Normalization of the optional leading scope argument of the finders.

Every finder accepts ``(scope=None, *predicates)``. The scope is either
missing, a single path, an iterable of paths or (aio only) an async iterable
of paths. A callable given in place of the scope is the first predicate.
"""

import os
from typing import Any, Iterable, List, Tuple


def is_async_iterable(obj: Any) -> bool:
    """Check if an object supports ``async for``."""
    return hasattr(obj, "__aiter__")


def is_path(obj: Any) -> bool:
    """Check if an object is a single path rather than a collection of paths."""
    return isinstance(obj, (str, bytes, os.PathLike))


def normalize_scope(scope: Any, predicates: Iterable[Any]) -> Tuple[Any, List[Any]]:
    """Split a finder's arguments into directories and predicates.

    Args:
        scope: ``None``, a path, an iterable (or async iterable) of paths,
            or a predicate
        predicates: Remaining positional predicates

    Returns:
        Tuple of (directories, predicates). ``directories`` is a list for
        missing or single-path scopes, otherwise the given iterable untouched
        so that lazily produced scopes stay lazy.
    """
    predicates = list(predicates)
    if scope is None:
        return [os.getcwd()], predicates
    if is_path(scope):
        return [os.fsdecode(scope)], predicates
    if callable(scope) and not is_async_iterable(scope) and not hasattr(scope, "__iter__"):
        return [os.getcwd()], [scope] + predicates
    return scope, predicates


def resolve_start(path: Any) -> str:
    """Resolve an optional start path against the current working directory."""
    if path is None:
        return os.getcwd()
    return os.path.abspath(os.fsdecode(path))
