"""Learner profiles: private state behind public methods, and struct vs. tuple."""

from __future__ import annotations

from dataclasses import dataclass, field

from playkit.core.record import mutating


@dataclass
class User:
    """Learner whose learned sections can only change through learn().

    The set itself is private; callers read it through `learned`, which hands
    out an immutable snapshot.
    """

    name: str
    _learned_sections: set[str] = field(default_factory=set, init=False, repr=False)

    @mutating
    def learn(self, section: str) -> bool:
        """Record a learned section.

        Returns:
            True if the section was new, False if already learned.
        """
        if section in self._learned_sections:
            return False
        self._learned_sections.add(section)
        return True

    def has_learned(self, section: str) -> bool:
        return section in self._learned_sections

    @property
    def learned(self) -> frozenset[str]:
        return frozenset(self._learned_sections)

    @property
    def learned_count(self) -> int:
        return len(self._learned_sections)


@dataclass
class Profile:
    """Named fields for data passed between several functions.

    Prefer this over a bare tuple unless returning a one-off pair of values.
    """

    name: str
    age: int
    city: str

    def as_tuple(self) -> tuple[str, int, str]:
        return (self.name, self.age, self.city)
