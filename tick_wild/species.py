"""Species definitions, the predation matrix, and SpeciesRegistry."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SpeciesDef:
    """Immutable per-species constants.

    Attributes:
        name: Species tag, also used to match prey on the field.
        max_age: Age beyond which an individual dies of old age.
        breeding_age: Minimum age for breeding.
        breeding_probability: Chance per tick of breeding once of age.
        max_litter_size: Largest possible litter (inclusive).
        prey: Species tags this species eats, mapped to the food level
            gained from each. Empty for species that never hunt or starve.
        creation_probability: Chance per cell of seeding one individual
            when a field is populated.
        color: RGB used by views.
    """

    name: str
    max_age: int
    breeding_age: int
    breeding_probability: float
    max_litter_size: int
    prey: dict[str, int] = field(default_factory=dict)
    creation_probability: float = 0.0
    color: tuple[int, int, int] = (128, 128, 128)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("SpeciesDef name must be non-empty")
        if self.max_age < 1:
            raise ValueError(f"max_age must be >= 1, got {self.max_age}")
        if self.breeding_age < 0:
            raise ValueError(f"breeding_age must be >= 0, got {self.breeding_age}")
        if not 0.0 <= self.breeding_probability <= 1.0:
            raise ValueError(
                f"breeding_probability must be in [0, 1], got {self.breeding_probability}"
            )
        if self.max_litter_size < 1:
            raise ValueError(f"max_litter_size must be >= 1, got {self.max_litter_size}")
        if not 0.0 <= self.creation_probability <= 1.0:
            raise ValueError(
                f"creation_probability must be in [0, 1], got {self.creation_probability}"
            )
        for tag, energy in self.prey.items():
            if energy < 1:
                raise ValueError(f"Food value for {tag!r} must be >= 1, got {energy}")

    @property
    def hunts(self) -> bool:
        return bool(self.prey)

    @property
    def full_food(self) -> int:
        """Food level of a newborn: the richest prey's value, 0 for grazers."""
        return max(self.prey.values(), default=0)

    def eats(self, tag: str) -> bool:
        return tag in self.prey

    def energy_from(self, tag: str) -> int:
        return self.prey[tag]


RABBIT = SpeciesDef(
    name="rabbit",
    max_age=40,
    breeding_age=5,
    breeding_probability=0.12,
    max_litter_size=4,
    creation_probability=0.08,
    color=(255, 165, 0),
)

FOX = SpeciesDef(
    name="fox",
    max_age=150,
    breeding_age=15,
    breeding_probability=0.08,
    max_litter_size=2,
    prey={"rabbit": 9},
    creation_probability=0.02,
    color=(0, 0, 255),
)

# Bears only eat foxes and are seeded rarely.
BEAR = SpeciesDef(
    name="bear",
    max_age=200,
    breeding_age=17,
    breeding_probability=0.06,
    max_litter_size=3,
    prey={"fox": 7},
    creation_probability=0.002,
    color=(255, 0, 255),
)


class SpeciesRegistry:
    """Stores species definitions in definition order, with snapshot/restore."""

    def __init__(self) -> None:
        self._definitions: dict[str, SpeciesDef] = {}

    def define(self, species: SpeciesDef) -> None:
        """Register a species. Overwrites if the name exists."""
        self._definitions[species.name] = species

    def get(self, name: str) -> SpeciesDef:
        """Look up a definition. Raises KeyError if not defined."""
        if name not in self._definitions:
            raise KeyError(name)
        return self._definitions[name]

    def has(self, name: str) -> bool:
        return name in self._definitions

    def names(self) -> list[str]:
        return list(self._definitions.keys())

    def remove(self, name: str) -> None:
        """Remove a definition. Raises KeyError if not defined."""
        if name not in self._definitions:
            raise KeyError(name)
        del self._definitions[name]

    def predation_matrix(self) -> dict[str, dict[str, int]]:
        """Map each species to the prey it eats and the food value gained."""
        return {name: dict(defn.prey) for name, defn in self._definitions.items()}

    def predators_of(self, name: str) -> list[str]:
        return [d.name for d in self._definitions.values() if d.eats(name)]

    def snapshot(self) -> dict[str, Any]:
        definitions: list[dict[str, Any]] = []
        for defn in self._definitions.values():
            definitions.append({
                "name": defn.name,
                "max_age": defn.max_age,
                "breeding_age": defn.breeding_age,
                "breeding_probability": defn.breeding_probability,
                "max_litter_size": defn.max_litter_size,
                "prey": copy.deepcopy(defn.prey),
                "creation_probability": defn.creation_probability,
                "color": list(defn.color),
            })
        return {"definitions": definitions}

    def restore(self, data: dict[str, Any]) -> None:
        self._definitions.clear()
        for d in data.get("definitions", []):
            self.define(SpeciesDef(
                name=d["name"],
                max_age=d["max_age"],
                breeding_age=d["breeding_age"],
                breeding_probability=d["breeding_probability"],
                max_litter_size=d["max_litter_size"],
                prey=dict(d["prey"]),
                creation_probability=d["creation_probability"],
                color=tuple(d["color"]),
            ))

    def __len__(self) -> int:
        return len(self._definitions)


def default_registry() -> SpeciesRegistry:
    """Rabbit, fox and bear, in that order."""
    registry = SpeciesRegistry()
    for species in (RABBIT, FOX, BEAR):
        registry.define(species)
    return registry
