"""Async predicate combinators and lazy filtering.

Predicates may be plain functions returning a boolean or functions returning
an awaitable boolean; both kinds can be mixed freely. Each predicate is
awaited before the next one is called.
"""

from typing import Any, AsyncIterator, Awaitable, Callable, Sequence, Union

from .iterable import as_async_iterator, resolve

Predicate = Callable[[Any], Union[bool, Awaitable[bool]]]


def conjunction(predicates: Sequence[Predicate]) -> Callable[[Any], Awaitable[bool]]:
    """Combine predicates with logical AND.

    Evaluation is left to right and stops at the first false predicate.
    An empty sequence yields a predicate that is always true.

    Args:
        predicates: Sync or async predicates to combine

    Returns:
        A coroutine function true only when all predicates are true
    """
    predicates = tuple(predicates)

    async def _conjunction(element) -> bool:
        for predicate in predicates:
            if not await resolve(predicate(element)):
                return False
        return True

    return _conjunction


def disjunction(predicates: Sequence[Predicate]) -> Callable[[Any], Awaitable[bool]]:
    """Combine predicates with logical OR.

    Evaluation is left to right and stops at the first true predicate.
    An empty sequence yields a predicate that is always false.

    Args:
        predicates: Sync or async predicates to combine

    Returns:
        A coroutine function true when any predicate is true
    """
    predicates = tuple(predicates)

    async def _disjunction(element) -> bool:
        for predicate in predicates:
            if await resolve(predicate(element)):
                return True
        return False

    return _disjunction


async def filter_elements(iterable: Any, predicate: Predicate) -> AsyncIterator[Any]:
    """Lazily keep the elements satisfying a sync or async predicate.

    Elements are tested one at a time, in order: the predicate for the next
    element is not called before the current one is decided. An exception
    raised by the predicate ends the iteration at that element.

    Args:
        iterable: Source elements, sync or async
        predicate: Test applied to each element

    Yields:
        Elements for which the predicate is true, in source order
    """
    async for element in as_async_iterator(iterable):
        if await resolve(predicate(element)):
            yield element
