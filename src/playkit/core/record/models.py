"""Record models: the mutating marker and its error type."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

_MUTATING_FLAG = "__mutating__"


class MutationError(AttributeError):
    """Raised when a frozen record is modified or a mutating method is requested."""

    pass


def mutating[F: Callable[..., Any]](method: F) -> F:
    """Mark a method as modifying its instance's fields.

    Frozen views refuse to hand out methods carrying this mark.

    Usage:
        @dataclass
        class Counter:
            value: int = 0

            @mutating
            def bump(self) -> None:
                self.value += 1
    """
    setattr(method, _MUTATING_FLAG, True)
    return method


def is_mutating(fn: Any) -> bool:
    """Check whether a function or bound method was marked with @mutating."""
    return bool(getattr(fn, _MUTATING_FLAG, False))
