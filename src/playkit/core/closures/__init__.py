"""Closure helpers for filter, sort and map."""

from playkit.core.closures.operations import (
    LUCKY_NUMBERS,
    is_multiple_of,
    lucky_label,
    ordered_by,
    pinned_first,
    sort_pinned_first,
)

__all__ = [
    "LUCKY_NUMBERS",
    "is_multiple_of",
    "pinned_first",
    "ordered_by",
    "sort_pinned_first",
    "lucky_label",
]
