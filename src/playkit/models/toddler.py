from __future__ import annotations

from dataclasses import dataclass, field

from playkit.core.properties import Observed


@dataclass
class Toddler:
    """Child whose sassiness changes are remarked on after they happen."""

    age: int
    name: str = "Zadie"
    sassiness_level: Observed[int] = Observed(0)
    remarks: list[str] = field(default_factory=list)

    @sassiness_level.did_set
    def _remark_on_sassiness(self, old_value: int) -> None:
        if 1 <= self.age <= 10:
            self.remarks.append(f"At age {self.age}, {self.name} is sassy always")
