"""Predicates built from the textual parts of a path.

A segment tester checks one substring of a path. It is either:

- a string, compared for equality with the substring;
- a compiled regular expression, searched in the substring;
- a callable taking the substring and returning a boolean.

Every predicate constructor combines its testers with a disjunction, so a
path matches when any tester accepts the extracted substring. Constructors
called without testers build predicates that never match.

These predicates only manipulate strings, so they are plain synchronous
callables usable from both the sync and aio implementations.
"""

import os
import re
from typing import Callable, Iterator, List, Union

from .combinators import disjunction

SegmentTester = Union[str, "re.Pattern[str]", Callable[[str], bool]]

PathPredicate = Callable[[str], bool]

_SEPARATORS = os.sep + (os.altsep or "")


def _tester_predicate(tester: SegmentTester) -> Callable[[str], bool]:
    """Convert a segment tester into a predicate over strings."""
    if isinstance(tester, str):
        return lambda segment: segment == tester
    if isinstance(tester, re.Pattern):
        return lambda segment: tester.search(segment) is not None
    if callable(tester):
        return tester
    raise TypeError(
        f"A segment tester must be a string, a regular expression or a "
        f"callable, got {type(tester).__name__}"
    )


def segment_filter(testers) -> Callable[[str], bool]:
    """Build the disjunction of a sequence of segment testers.

    Args:
        testers: Segment testers to combine

    Returns:
        A predicate true when any tester accepts the given string
    """
    return disjunction([_tester_predicate(tester) for tester in testers])


def _strip_trailing_separators(path: str) -> str:
    stripped = path.rstrip(_SEPARATORS)
    return stripped if stripped or not path else path[0]


def _basename(path: str) -> str:
    return os.path.basename(_strip_trailing_separators(path))


def _dirname(path: str) -> str:
    return os.path.dirname(_strip_trailing_separators(path))


def _extname(path: str) -> str:
    return os.path.splitext(_basename(path))[1]


def _name(path: str) -> str:
    return os.path.splitext(_basename(path))[0]


def _of_segment(testers, segmenter: Callable[[str], str]) -> PathPredicate:
    test = segment_filter(testers)

    def _predicate(path) -> bool:
        return test(segmenter(os.fspath(path)))

    return _predicate


def of_basename(*testers: SegmentTester) -> PathPredicate:
    """Match paths whose base name passes any of the given testers.

    Example:
        >>> of_basename("setup.py", re.compile(r"^README"))("/repo/README.md")
        True
    """
    return _of_segment(testers, _basename)


def of_name(*testers: SegmentTester) -> PathPredicate:
    """Match paths whose base name without extension passes any tester."""
    return _of_segment(testers, _name)


def of_dirname(*testers: SegmentTester) -> PathPredicate:
    """Match paths whose directory name passes any tester."""
    return _of_segment(testers, _dirname)


def of_extname(*testers: SegmentTester) -> PathPredicate:
    """Match paths whose extension (leading dot included) passes any tester.

    Dot files such as ``.gitignore`` have an empty extension, following
    :func:`os.path.splitext`.
    """
    return _of_segment(testers, _extname)


def _is_special(segment: str) -> bool:
    """Check if a segment consists of dots only (``.``, ``..``, ...)."""
    return segment.strip(".") == ""


def segments(path) -> Iterator[str]:
    """Yield the segments of a normalized path.

    The root (drive and leading separators) is never a segment. In relative
    paths, leading segments made of dots only are skipped. Trailing empty or
    whitespace-only segments are always dropped.

    Example:
        >>> list(segments("./../a/b/c/"))
        ['a', 'b', 'c']
    """
    path = os.fsdecode(path)
    if not path:
        return
    _, rest = os.path.splitdrive(os.path.normpath(path))
    parts: List[str] = rest.lstrip(_SEPARATORS).split(os.sep)

    start = 0
    if not os.path.isabs(path):
        while start < len(parts) and _is_special(parts[start]):
            start += 1
    end = len(parts)
    while end > start and parts[end - 1].strip() == "":
        end -= 1

    yield from parts[start:end]


def has_path_segments(*testers: SegmentTester) -> PathPredicate:
    """Match paths whose every segment passes any of the given testers.

    Without testers the predicate is false for every path, including paths
    without segments.
    """
    test = segment_filter(testers)
    has_testers = len(testers) > 0

    def _predicate(path) -> bool:
        if not has_testers:
            return False
        for segment in segments(path):
            if not test(segment):
                return False
        return True

    return _predicate


def does_not_have_any_path_segment(*testers: SegmentTester) -> PathPredicate:
    """Match paths where no segment passes any of the given testers.

    Without testers the predicate is false for every path.
    """
    test = segment_filter(testers)
    has_testers = len(testers) > 0

    def _predicate(path) -> bool:
        if not has_testers:
            return False
        for segment in segments(path):
            if test(segment):
                return False
        return True

    return _predicate
