from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tick_wild.animal import Animal


@dataclass
class Census:
    counts: Counter[str] = field(default_factory=Counter)

    @classmethod
    def of(cls, animals: Iterable[Animal]) -> Census:
        return cls(Counter(a.species_tag for a in animals if a.is_alive()))

    def count(self, tag: str) -> int:
        return self.counts.get(tag, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def species(self) -> list[str]:
        return sorted(tag for tag, n in self.counts.items() if n > 0)

    def is_viable(self) -> bool:
        """A run stays interesting while more than one species is alive."""
        return len(self.species()) > 1

    def __str__(self) -> str:
        return ", ".join(f"{tag}: {self.counts[tag]}" for tag in self.species())
