"""Property observation: Observed fields, change records and listeners.

Computed properties need no helper here; a plain `property` with a getter and
setter over stored fields covers them (see playkit.models.employee).
"""

from playkit.core.properties.models import PropertyChange
from playkit.core.properties.observed import (
    Observed,
    add_listener,
    remove_listener,
)

__all__ = [
    "Observed",
    "PropertyChange",
    "add_listener",
    "remove_listener",
]
