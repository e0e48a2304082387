"""playkit: value-type mechanics, closure helpers and sized generation.

Usage:
    from dataclasses import dataclass
    from playkit import Observed, freeze, generate, mutating, roller

    rolls = generate(5, roller(1, 20))

    @dataclass
    class Counter:
        value: int = 0

        @mutating
        def bump(self) -> None:
            self.value += 1

    frozen = freeze(Counter())
    frozen.value        # 0
    frozen.bump()       # MutationError
"""

__version__ = "0.1.0"

# Core primitives
from playkit.core import (
    LUCKY_NUMBERS,
    Copy,
    Frozen,
    InvalidCountError,
    MutationError,
    Observed,
    PropertyChange,
    add_listener,
    constant,
    counter,
    freeze,
    generate,
    is_multiple_of,
    is_mutating,
    lucky_label,
    mutating,
    ordered_by,
    pinned_first,
    remove_listener,
    roller,
    roller_from_settings,
    sort_pinned_first,
    thaw,
)

# Example records
from playkit.models import (
    Album,
    Employee,
    Profile,
    Toddler,
    User,
    VacationLedger,
)

__all__ = [
    # Version
    "__version__",
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
    # Models
    "Album",
    "Employee",
    "VacationLedger",
    "User",
    "Profile",
    "Toddler",
]
