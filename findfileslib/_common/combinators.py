"""Synchronous predicate combinators.

These are pure computation, so they live here and are re-exported by
``findfileslib.sync``. The path predicates in ``_common.path`` are built
on top of them.
"""

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


def conjunction(predicates: Sequence[Predicate]) -> Predicate:
    """Combine predicates with logical AND.

    Predicates are evaluated left to right and evaluation stops at the first
    one returning false. An empty sequence yields a predicate that is always
    true. Exceptions raised by a predicate propagate immediately.

    Args:
        predicates: Predicates to combine

    Returns:
        A predicate true only when all the given predicates are true
    """
    predicates = tuple(predicates)

    def _conjunction(element) -> bool:
        for predicate in predicates:
            if not predicate(element):
                return False
        return True

    return _conjunction


def disjunction(predicates: Sequence[Predicate]) -> Predicate:
    """Combine predicates with logical OR.

    Predicates are evaluated left to right and evaluation stops at the first
    one returning true. An empty sequence yields a predicate that is always
    false. Exceptions raised by a predicate propagate immediately.

    Args:
        predicates: Predicates to combine

    Returns:
        A predicate true when any of the given predicates is true
    """
    predicates = tuple(predicates)

    def _disjunction(element) -> bool:
        for predicate in predicates:
            if predicate(element):
                return True
        return False

    return _disjunction
