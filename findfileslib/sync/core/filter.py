"""Synchronous predicate combinators and lazy filtering."""

from typing import Callable, Iterable, Iterator, TypeVar

from ..._common.combinators import conjunction, disjunction

T = TypeVar("T")

__all__ = ["conjunction", "disjunction", "filter_elements"]


def filter_elements(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Lazily keep the elements of an iterable that satisfy a predicate.

    Elements are tested one at a time, in order. An exception raised by the
    predicate ends the iteration at the element that caused it.

    Args:
        iterable: Source elements
        predicate: Test applied to each element

    Yields:
        Elements for which the predicate is true, in source order
    """
    for element in iterable:
        if predicate(element):
            yield element
