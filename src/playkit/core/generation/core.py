"""Sized generation: build a list of N values from a zero-argument producer.

Usage:
    from playkit.core.generation import generate, counter

    generate(5, counter())          # [0, 1, 2, 3, 4]
    generate(3, lambda: "x")        # ["x", "x", "x"]
"""

from __future__ import annotations

import operator
from collections.abc import Callable


class InvalidCountError(ValueError):
    """Raised when a negative count is requested from generate()."""

    pass


def _check_count(count: int) -> int:
    """Validate count before any producer call.

    Integer-like values (anything implementing __index__) are accepted.

    Args:
        count: Requested number of elements.

    Returns:
        Count as a plain int.

    Raises:
        TypeError: If count is not integer-like (bool is rejected too).
        InvalidCountError: If count is negative.
    """
    if isinstance(count, bool):
        raise TypeError("count must be an int, got bool")
    try:
        size = operator.index(count)
    except TypeError:
        raise TypeError(f"count must be an int, got {type(count).__name__}") from None
    if size < 0:
        raise InvalidCountError(f"count must be non-negative, got {size}")
    return size


def generate[T](count: int, produce: Callable[[], T]) -> list[T]:
    """Produce a list of exactly `count` values by calling `produce` once per slot.

    Calls happen in index order, so the i-th call's result lands at index i.
    Produced values are neither deduplicated nor validated, and exceptions
    raised by `produce` propagate unchanged.

    Args:
        count: Number of elements to produce (non-negative).
        produce: Zero-argument callable returning one value per call.

    Returns:
        Fresh list owned by the caller. Empty when count is 0, in which case
        `produce` is never called.

    Raises:
        TypeError: If count is not an int.
        InvalidCountError: If count is negative.
    """
    size = _check_count(count)
    return [produce() for _ in range(size)]
