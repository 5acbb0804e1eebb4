"""Async lazy mapping and terminal operations.

Sources may be sync iterables or async iterables, and mapping functions
may be plain functions or coroutine functions: each element is awaited
only when it is needed.
"""

import inspect
import logging
from contextlib import aclosing
from typing import Any, AsyncIterator, Callable, List, Optional, TypeVar

from ..._common.errors import ConflictError
from ..._common.scope import is_async_iterable

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


async def resolve(value: Any) -> Any:
    """Await a value if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


async def as_async_iterator(iterable: Any) -> AsyncIterator[Any]:
    """Iterate a sync or async iterable with ``async for``."""
    if is_async_iterable(iterable):
        async with _closing(iterable) as source:
            async for element in source:
                yield element
    else:
        for element in iterable:
            yield element


def _closing(iterable: Any):
    """Close async generators on exit; leave other async iterables alone."""
    if hasattr(iterable, "aclose"):
        return aclosing(iterable)
    return _NoClose(iterable)


class _NoClose:
    def __init__(self, iterable):
        self.iterable = iterable

    async def __aenter__(self):
        return self.iterable

    async def __aexit__(self, *exc_info):
        return None


def _is_multi_value(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return is_async_iterable(value) or hasattr(value, "__iter__")


async def map_elements(iterable: Any, function: Callable[[Any], Any]) -> AsyncIterator[Any]:
    """Lazily apply a (possibly async) function to every element."""
    async for element in as_async_iterator(iterable):
        yield await resolve(function(element))


async def multi_map(iterable: Any, function: Callable[[Any], Any]) -> AsyncIterator[Any]:
    """Lazily map every element to zero, one or many elements.

    The function (or the awaitable it returns) may produce ``None`` to drop
    the element, a sync or async iterable whose elements replace it
    (strings count as single values), or any other single value. All the
    outputs of one element are yielded before the next element is pulled.

    Args:
        iterable: Source elements, sync or async
        function: Mapping applied to each element

    Yields:
        Mapped elements in source order
    """
    async for element in as_async_iterator(iterable):
        mapped = await resolve(function(element))
        if mapped is None:
            continue
        if _is_multi_value(mapped):
            async for value in as_async_iterator(mapped):
                yield value
        else:
            yield mapped


async def first_element(iterable: Any) -> Optional[Any]:
    """Return the first element, or None if there is none.

    Nothing past the first element is pulled and async generators are
    closed right away, so a traversal stops issuing I/O at once.
    """
    async with aclosing(as_async_iterator(iterable)) as iterator:
        async for element in iterator:
            return element
    return None


async def all_elements(iterable: Any) -> List[Any]:
    """Consume a sync or async iterable into a list."""
    return [element async for element in as_async_iterator(iterable)]


async def only_element(iterable: Any) -> Optional[Any]:
    """Return the only element, or None if there is none.

    Uniqueness can only be confirmed once the source is exhausted, so the
    whole iterable is consumed unless a second element shows up first.

    Raises:
        ConflictError: As soon as a second element is pulled
    """
    retained = None
    found = False
    async with aclosing(as_async_iterator(iterable)) as iterator:
        async for element in iterator:
            if found:
                logger.debug("Conflict between %s and %s", retained, element)
                raise ConflictError(retained, element)
            retained = element
            found = True
    return retained
