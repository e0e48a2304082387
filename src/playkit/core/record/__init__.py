"""Record mechanics: frozen vs. mutable declarations and mutating methods."""

from playkit.core.record.models import MutationError, is_mutating, mutating
from playkit.core.record.wrapper import Frozen, freeze, thaw

__all__ = [
    # Models
    "MutationError",
    "mutating",
    "is_mutating",
    # Wrapper
    "Frozen",
    "freeze",
    "thaw",
]
