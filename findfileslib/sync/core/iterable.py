"""Lazy mapping and terminal operations over synchronous iterables."""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

from ..._common.errors import ConflictError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def _is_multi_value(value: Any) -> bool:
    """Check if a mapped value should be expanded into several elements."""
    return not isinstance(value, (str, bytes)) and hasattr(value, "__iter__")


def _close(iterator: Iterator[Any]) -> None:
    close = getattr(iterator, "close", None)
    if close is not None:
        close()


def map_elements(iterable: Iterable[T], function: Callable[[T], U]) -> Iterator[U]:
    """Lazily apply a function to every element of an iterable."""
    for element in iterable:
        yield function(element)


def multi_map(iterable: Iterable[T], function: Callable[[T], Any]) -> Iterator[Any]:
    """Lazily map every element to zero, one or many elements.

    The function may return ``None`` to drop the element, an iterable whose
    elements replace it (strings count as single values), or any other
    single value. All the outputs of one element are yielded before the
    next element is pulled from the source.

    Args:
        iterable: Source elements
        function: Mapping applied to each element

    Yields:
        Mapped elements in source order
    """
    for element in iterable:
        mapped = function(element)
        if mapped is None:
            continue
        if _is_multi_value(mapped):
            yield from mapped
        else:
            yield mapped


def first_element(iterable: Iterable[T]) -> Optional[T]:
    """Return the first element of an iterable, or None if it is empty.

    Nothing past the first element is pulled and the iterator is closed, so
    a traversal stops issuing I/O as soon as it has produced a match.
    """
    iterator = iter(iterable)
    try:
        for element in iterator:
            return element
        return None
    finally:
        _close(iterator)


def all_elements(iterable: Iterable[T]) -> List[T]:
    """Consume an iterable into a list."""
    return list(iterable)


def only_element(iterable: Iterable[T]) -> Optional[T]:
    """Return the only element of an iterable, or None if it is empty.

    Uniqueness can only be confirmed once the source is exhausted, so the
    whole iterable is consumed unless a second element shows up first.

    Raises:
        ConflictError: As soon as a second element is pulled
    """
    iterator = iter(iterable)
    retained: Optional[T] = None
    found = False
    try:
        for element in iterator:
            if found:
                logger.debug("Conflict between %s and %s", retained, element)
                raise ConflictError(retained, element)
            retained = element
            found = True
        return retained
    finally:
        _close(iterator)
