# ancestry/tree/sorting.py
"""
Comparator construction for bucket and child-list ordering.

A comparator is ``(a, b) -> int`` over items, negative when ``a`` sorts
first, as used with ``functools.cmp_to_key``. ``build_comparator`` turns the
user's sort options into one comparator:

    [matching-first] -> sort_by (function | properties | path) -> [reverse]
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any, Callable, List, Optional, Sequence, Union

from ancestry.core.item import get_property
from ancestry.logging.logger import get_logger
from ancestry.logging.tags import SORT
from ancestry.tree.matcher import PathMatcher

logger = get_logger(__name__)

Comparator = Callable[[Any, Any], int]
PathOf = Callable[[Any], str]
SortBy = Union[None, str, Sequence[str], Comparator]


def _is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def compare_values(a: Any, b: Any) -> int:
    """
    Compare two property values.

    Numbers (Decimal included) compare numerically. Anything else compares
    as lowercase strings, with falsy values (None, "", 0 against a non-number) first.

    Examples:
        >>> compare_values(2, 10)
        -1
        >>> compare_values("B", "a")
        1
        >>> compare_values(None, "x")
        -1
    """
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)

    if not a and not b:
        return 0
    if not a:
        return -1
    if not b:
        return 1

    a_str = str(a).lower()
    b_str = str(b).lower()
    return (a_str > b_str) - (a_str < b_str)


def property_comparator(name: str) -> Comparator:
    """Comparator over one named item property."""

    def compare(a: Any, b: Any) -> int:
        return compare_values(get_property(a, name), get_property(b, name))

    return compare


def path_comparator(path_of: PathOf) -> Comparator:
    """Comparator over item paths (the default ordering)."""

    def compare(a: Any, b: Any) -> int:
        return compare_values(path_of(a), path_of(b))

    return compare


def combine_comparators(comparators: Sequence[Comparator]) -> Comparator:
    """
    Chain comparators; the first nonzero result wins.

    A single comparator is returned unchanged.
    """
    if len(comparators) == 1:
        return comparators[0]

    chain = list(comparators)

    def compare(a: Any, b: Any) -> int:
        for comparator in chain:
            result = comparator(a, b)
            if result:
                return result
        return 0

    return compare


def reverse_comparator(comparator: Comparator) -> Comparator:
    """Negate a comparator. Zero stays a plain 0."""

    def compare(a: Any, b: Any) -> int:
        result = comparator(a, b)
        if result:
            return -result
        return 0

    return compare


def matching_first_comparator(matcher: PathMatcher, path_of: PathOf) -> Comparator:
    """Items whose path matches sort before items whose path does not."""

    def compare(a: Any, b: Any) -> int:
        a_match = matcher.matches(path_of(a))
        b_match = matcher.matches(path_of(b))

        if a_match == b_match:
            return 0
        if a_match:
            return -1
        return 1

    return compare


def build_comparator(
    sort_by: SortBy = None,
    reverse: bool = False,
    files_first: Optional[Any] = None,
    *,
    path_of: PathOf,
) -> Comparator:
    """
    Build the single comparator used for every bucket and child list.

    Args:
        sort_by: Comparator function, property name, list of property
                 names, or None to sort by path
        reverse: Invert the final ordering
        files_first: Matcher input(s) for items to rank first; None or []
                     disables it
        path_of: Returns the path key of an item

    Returns:
        Combined comparator

    Raises:
        ConfigurationError: If a files_first entry has an unsupported shape
    """
    comparators: List[Comparator]

    if callable(sort_by):
        comparators = [sort_by]
    elif sort_by:
        names = [sort_by] if isinstance(sort_by, str) else list(sort_by)
        comparators = [property_comparator(name) for name in names]
    else:
        comparators = [path_comparator(path_of)]

    matcher = PathMatcher.from_spec(files_first)
    if matcher:
        comparators.insert(0, matching_first_comparator(matcher, path_of))

    comparator = combine_comparators(comparators)

    if reverse:
        comparator = reverse_comparator(comparator)

    logger.debug(
        f"{SORT} Built comparator: {len(comparators)} criteria, "
        f"files_first={len(matcher)}, reverse={reverse}"
    )
    return comparator


__all__ = [
    "Comparator",
    "compare_values",
    "property_comparator",
    "path_comparator",
    "combine_comparators",
    "reverse_comparator",
    "matching_first_comparator",
    "build_comparator",
]
