"""Ready-made producers for generate().

Each factory returns a zero-argument callable. Stateful producers (counter,
roller) keep their state in the returned callable, so two producers never
share a sequence.
"""

from __future__ import annotations

import itertools
import random
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playkit.config import PlaygroundSettings


def counter(start: int = 0, step: int = 1) -> Callable[[], int]:
    """Producer returning start, start + step, start + 2*step, ..."""
    return itertools.count(start, step).__next__


def constant[T](value: T) -> Callable[[], T]:
    """Producer that always returns the same value."""

    def produce() -> T:
        return value

    return produce


def roller(low: int, high: int, rng: random.Random | None = None) -> Callable[[], int]:
    """Producer of uniform random integers in [low, high], both inclusive.

    Args:
        low: Smallest possible roll.
        high: Largest possible roll.
        rng: Random source. A fresh unseeded Random is used when None.

    Returns:
        Zero-argument callable returning one roll per call.

    Raises:
        ValueError: If low > high.
    """
    if low > high:
        raise ValueError(f"Empty roll range: low={low} is greater than high={high}")
    source = rng if rng is not None else random.Random()

    def roll() -> int:
        return source.randint(low, high)

    return roll


def roller_from_settings(settings: PlaygroundSettings) -> Callable[[], int]:
    """Build a roller from configured bounds and optional seed."""
    return roller(settings.roll_min, settings.roll_max, random.Random(settings.seed))
