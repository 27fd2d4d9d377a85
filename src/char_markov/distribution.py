"""
Per-context next-character distributions.

A distribution keeps its entries in first-observed order. That order is part
of the model: cumulative probabilities are accumulated along it, so it decides
which character wins when a random draw lands on a boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


# Returned when sampling from an empty distribution.
NO_DATA_CHAR = " "


@dataclass
class CharCount:
    """
    One observed next character and its statistics.

    Attributes:
        character: The observed character
        count: Number of times it followed the owning context
        probability: count / total, set by finalization
        cumulative_probability: Running sum of probabilities up to this entry
    """
    character: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class CharDistribution:
    """Ordered collection of CharCount entries for a single context."""

    def __init__(self) -> None:
        self._entries: list[CharCount] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharCount]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> CharCount:
        return self._entries[index]

    def __str__(self) -> str:
        return "(" + " ".join(str(entry) for entry in self._entries) + ")"

    def index_of(self, character: str) -> int:
        for i, entry in enumerate(self._entries):
            if entry.character == character:
                return i
        return -1

    def get(self, character: str) -> CharCount | None:
        i = self.index_of(character)
        return self._entries[i] if i >= 0 else None

    def update(self, character: str) -> None:
        """Count one more occurrence of `character`, appending it if unseen."""

        entry = self.get(character)
        if entry is None:
            self._entries.append(CharCount(character))
        else:
            entry.count += 1

    def total(self) -> int:
        return sum(entry.count for entry in self._entries)

    def finalize(self) -> None:
        """Recompute probability and cumulative probability from the counts.

        Safe to call repeatedly; the result depends on the counts only.
        """

        if not self._entries:
            return

        total = self.total()
        if total == 0:
            return

        running = 0.0
        for entry in self._entries:
            entry.probability = entry.count / total
            running += entry.probability
            entry.cumulative_probability = running

        # Absorb floating-point drift so a draw in [0, 1) always lands.
        self._entries[-1].cumulative_probability = 1.0

    def character_at(self, r: float) -> str:
        """Return the first character whose cumulative probability exceeds `r`.

        An empty distribution yields NO_DATA_CHAR.
        """

        if not self._entries:
            return NO_DATA_CHAR
        for entry in self._entries:
            if entry.cumulative_probability > r:
                return entry.character
        return self._entries[-1].character
