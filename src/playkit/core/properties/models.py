"""Data models for property observation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class PropertyChange:
    """One observed assignment, delivered to per-instance listeners.

    Attributes:
        name: Name of the observed field.
        old: Value before the assignment.
        new: Value after the assignment.

    Example:
        change = PropertyChange(name="sassiness_level", old=0, new=3)
    """

    name: str
    old: Any
    new: Any

    @property
    def changed(self) -> bool:
        """True when the assignment actually replaced the value."""
        return bool(self.old != self.new)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {"name": self.name, "old": self.old, "new": self.new}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PropertyChange:
        """Create from dictionary."""
        return cls(name=data["name"], old=data["old"], new=data["new"])
