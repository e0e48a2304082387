"""Sized generation: generate() and its stock producers."""

from playkit.core.generation.core import InvalidCountError, generate
from playkit.core.generation.producers import (
    constant,
    counter,
    roller,
    roller_from_settings,
)

__all__ = [
    # Core
    "generate",
    "InvalidCountError",
    # Producers
    "counter",
    "constant",
    "roller",
    "roller_from_settings",
]
