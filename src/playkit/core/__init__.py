"""Core functionalities: stateless primitives and protocols.

Architecture Note:
    core/ holds general-purpose building blocks (generation, closures, record
    mechanics, observed properties). Worked example types built on them live
    in playkit.models.
"""

from playkit.core.closures import (
    LUCKY_NUMBERS,
    is_multiple_of,
    lucky_label,
    ordered_by,
    pinned_first,
    sort_pinned_first,
)
from playkit.core.generation import (
    InvalidCountError,
    constant,
    counter,
    generate,
    roller,
    roller_from_settings,
)
from playkit.core.properties import (
    Observed,
    PropertyChange,
    add_listener,
    remove_listener,
)
from playkit.core.record import (
    Frozen,
    MutationError,
    freeze,
    is_mutating,
    mutating,
    thaw,
)
from playkit.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Generation
    "generate",
    "InvalidCountError",
    "counter",
    "constant",
    "roller",
    "roller_from_settings",
    # Closures
    "LUCKY_NUMBERS",
    "is_multiple_of",
    "pinned_first",
    "ordered_by",
    "sort_pinned_first",
    "lucky_label",
    # Record
    "Frozen",
    "MutationError",
    "freeze",
    "thaw",
    "mutating",
    "is_mutating",
    # Properties
    "Observed",
    "PropertyChange",
    "add_listener",
    "remove_listener",
]
