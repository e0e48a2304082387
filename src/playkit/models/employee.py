"""Employee records: mutating methods and a computed property.

Usage:
    archer = Employee(name="Sterling Archer", vacation_remaining=14)
    archer.take_vacation(5)             # True, 9 days left
    freeze(archer).take_vacation(1)     # MutationError

    ledger = VacationLedger(name="Sterling Archer", vacation_taken=4)
    ledger.vacation_remaining = 5       # vacation_allocated becomes 9
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from playkit.core.record import mutating

if TYPE_CHECKING:
    from playkit.config import PlaygroundSettings

DEFAULT_VACATION_DAYS = 14


@dataclass
class Employee:
    """Employee tracking only the days left, so the original grant is lost."""

    name: str
    vacation_remaining: int

    @mutating
    def take_vacation(self, days: int) -> bool:
        """Deduct days if strictly more than that many remain.

        Args:
            days: Days requested.

        Returns:
            True if the days were deducted, False otherwise (state unchanged).
        """
        if self.vacation_remaining > days:
            self.vacation_remaining -= days
            return True
        warnings.warn(
            f"{self.name or 'Employee'} requested {days} days but only "
            f"{self.vacation_remaining} remain.",
            stacklevel=2,
        )
        return False


@dataclass
class VacationLedger:
    """Employee keeping allocated and taken days, with remaining days derived.

    Assigning vacation_remaining redistributes into vacation_allocated, leaving
    vacation_taken untouched.
    """

    name: str
    vacation_allocated: int = DEFAULT_VACATION_DAYS
    vacation_taken: int = 0

    @classmethod
    def from_settings(cls, name: str, settings: PlaygroundSettings) -> VacationLedger:
        """Create a ledger with the configured default allocation."""
        return cls(name=name, vacation_allocated=settings.vacation_days)

    @property
    def vacation_remaining(self) -> int:
        return self.vacation_allocated - self.vacation_taken

    @vacation_remaining.setter
    def vacation_remaining(self, new_value: int) -> None:
        self.vacation_allocated = self.vacation_taken + new_value

    @mutating
    def take(self, days: int) -> None:
        self.vacation_taken += days
