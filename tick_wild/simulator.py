"""Simulator - seeded stepping loop, population bookkeeping, and hooks."""
from __future__ import annotations

import os
import random
from typing import Any, Callable

from tick_wild.animal import Animal
from tick_wild.census import Census
from tick_wild.chronicle import BIRTH, DEATH, Chronicle
from tick_wild.field import Field
from tick_wild.species import SpeciesRegistry, default_registry
from tick_wild.types import Location, SnapshotError

DEFAULT_DEPTH = 80
DEFAULT_WIDTH = 120

_SNAPSHOT_VERSION = 1

AnimalHook = Callable[["Simulator", Animal], None]
RunHook = Callable[["Simulator"], None]


class Simulator:
    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        width: int = DEFAULT_WIDTH,
        seed: int | None = None,
        registry: SpeciesRegistry | None = None,
        shuffle_adjacent: bool = False,
        chronicle: Chronicle | None = None,
    ) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._registry = registry if registry is not None else default_registry()
        self._field = Field(depth, width, self._rng if shuffle_adjacent else None)
        self._chronicle = chronicle if chronicle is not None else Chronicle()
        self._animals: list[Animal] = []
        self._step_number = 0
        self._birth_hooks: list[AnimalHook] = []
        self._death_hooks: list[AnimalHook] = []
        self._start_hooks: list[RunHook] = []
        self._stop_hooks: list[RunHook] = []

    @property
    def field(self) -> Field:
        return self._field

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def registry(self) -> SpeciesRegistry:
        return self._registry

    @property
    def chronicle(self) -> Chronicle:
        return self._chronicle

    @property
    def step_number(self) -> int:
        return self._step_number

    @property
    def animals(self) -> tuple[Animal, ...]:
        return tuple(self._animals)

    def on_birth(self, hook: AnimalHook) -> None:
        self._birth_hooks.append(hook)

    def on_death(self, hook: AnimalHook) -> None:
        self._death_hooks.append(hook)

    def on_start(self, hook: RunHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: RunHook) -> None:
        self._stop_hooks.append(hook)

    # -- Population --

    def spawn(self, name: str, location: Location, random_age: bool = False) -> Animal:
        animal = Animal(
            self._registry.get(name), self._field, location, self._rng,
            random_age=random_age,
        )
        self._animals.append(animal)
        return animal

    def populate(self) -> None:
        """Clear the field and seed it cell by cell, rarest species first."""
        self._field.clear_all()
        self._animals.clear()
        candidates = [self._registry.get(n) for n in reversed(self._registry.names())]
        for row in range(self._field.depth):
            for col in range(self._field.width):
                for species in candidates:
                    if self._rng.random() <= species.creation_probability:
                        self._animals.append(Animal(
                            species, self._field, Location(row, col), self._rng,
                            random_age=True,
                        ))
                        break

    def reset(self) -> None:
        self._step_number = 0
        self._rng.seed(self._seed)
        self._chronicle.clear()
        self.populate()

    def census(self) -> Census:
        return Census.of(self._animals)

    def is_viable(self) -> bool:
        return self.census().is_viable()

    # -- Stepping --

    def step(self) -> None:
        self._step_number += 1
        newborns: list[Animal] = []
        # Animals eaten earlier in the pass are skipped, never acted on.
        for animal in self._animals:
            if animal.is_alive():
                animal.act(newborns)

        survivors: list[Animal] = []
        for animal in self._animals:
            if animal.is_alive():
                survivors.append(animal)
                continue
            self._chronicle.record(
                self._step_number, DEATH, animal.species_tag,
                animal.last_location, animal.death_cause.value,
            )
            for hook in self._death_hooks:
                hook(self, animal)

        for child in newborns:
            self._field.place(child, child.location)
            survivors.append(child)
            self._chronicle.record(
                self._step_number, BIRTH, child.species_tag, child.location,
            )
            for hook in self._birth_hooks:
                hook(self, child)
        self._animals = survivors

    def run(self, n: int, stop_when_collapsed: bool = False) -> None:
        for hook in self._start_hooks:
            hook(self)
        for _ in range(n):
            if stop_when_collapsed and not self.is_viable():
                break
            self.step()
        for hook in self._stop_hooks:
            hook(self)

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "step_number": self._step_number,
            "depth": self._field.depth,
            "width": self._field.width,
            "seed": self._seed,
            "rng_state": _serialize_rng_state(self._rng.getstate()),
            "registry": self._registry.snapshot(),
            "animals": [a.snapshot() for a in self._animals],
            "chronicle": self._chronicle.snapshot(),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        size = (data.get("depth"), data.get("width"))
        if size != (self._field.depth, self._field.width):
            raise SnapshotError(
                f"Field size mismatch: snapshot has {size[0]}x{size[1]}, "
                f"simulator has {self._field.depth}x{self._field.width}"
            )

        self._registry.restore(data["registry"])
        self._step_number = data["step_number"]
        self._seed = data["seed"]
        self._rng.setstate(_deserialize_rng_state(data["rng_state"]))
        self._field.clear_all()
        self._animals = []
        for entry in data["animals"]:
            if not self._registry.has(entry["species"]):
                raise SnapshotError(f"Unknown species in snapshot: {entry['species']!r}")
            self._animals.append(Animal.restore(
                entry, self._registry.get(entry["species"]), self._field, self._rng,
            ))
        self._chronicle.restore(data["chronicle"])


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    """Convert Random.getstate() tuple to a JSON-compatible list."""
    version, internalstate, gauss_next = state
    return [version, list(internalstate), gauss_next]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    version, internalstate, gauss_next = data
    return (version, tuple(internalstate), gauss_next)
