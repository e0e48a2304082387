from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Album:
    """A record made of plain stored fields and one non-mutating method."""

    title: str
    artist: str
    year: int

    def summary(self) -> str:
        return f"{self.title} ({self.year}) by {self.artist}"
