"""Closures as filter, sort and map predicates.

Usage:
    evens = list(filter(is_multiple_of(2), LUCKY_NUMBERS))
    ordered = sort_pinned_first(LUCKY_NUMBERS, pinned=7)
    labels = list(map(lucky_label, LUCKY_NUMBERS))
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any

LUCKY_NUMBERS: tuple[int, ...] = (7, 4, 38, 21, 16, 15, 1233, 31, 49)


def is_multiple_of(divisor: int) -> Callable[[int], bool]:
    """Build a filter predicate matching multiples of divisor.

    Raises:
        ValueError: If divisor is 0.
    """
    if divisor == 0:
        raise ValueError("divisor must be non-zero")

    def predicate(number: int) -> bool:
        return number % divisor == 0

    return predicate


def pinned_first(pinned: int) -> Callable[[int, int], bool]:
    """Build an "a sorts before b" predicate that puts `pinned` ahead of everything.

    Remaining values compare in ascending order.
    """

    def before(a: int, b: int) -> bool:
        if a == pinned:
            return b != pinned
        if b == pinned:
            return False
        return a < b

    return before


def ordered_by[T](before: Callable[[T, T], bool]) -> Callable[[T], Any]:
    """Adapt a strict "a before b" predicate into a key function for sorted().

    Args:
        before: Strict weak ordering; before(a, b) is True when a must precede b.

    Returns:
        Key function usable as sorted(..., key=ordered_by(before)).
    """

    def compare(a: T, b: T) -> int:
        if before(a, b):
            return -1
        if before(b, a):
            return 1
        return 0

    return functools.cmp_to_key(compare)


def sort_pinned_first(values: Iterable[int], pinned: int) -> list[int]:
    """Sort ascending with every occurrence of `pinned` moved to the front."""
    return sorted(values, key=ordered_by(pinned_first(pinned)))


def lucky_label(number: int) -> str:
    """Map a number to its "<n> is a lucky number" label."""
    return f"{number} is a lucky number"
