"""Animal - one living individual and its per-tick life cycle."""
from __future__ import annotations

import random
from typing import Any

from tick_wild.field import Field
from tick_wild.species import SpeciesDef
from tick_wild.types import DeadAnimalError, DeathCause, Location


class Animal:
    """An individual of any species.

    Behaviour comes entirely from the :class:`SpeciesDef`; rabbits, foxes
    and bears differ only in their constants and prey. All randomness is
    drawn from the *rng* shared by the whole simulation.

    With ``place=False`` the animal is created off-field (newborns); the
    caller is responsible for putting it on the field later.
    """

    def __init__(
        self,
        species: SpeciesDef,
        field: Field,
        location: Location,
        rng: random.Random,
        *,
        random_age: bool = False,
        place: bool = True,
    ) -> None:
        self._species = species
        self._field = field
        self._rng = rng
        self._alive = True
        self._death_cause: DeathCause | None = None
        self._location: Location | None = location
        self._last_location = location
        if random_age:
            self._age = rng.randrange(species.max_age)
            self._food_level = rng.randint(1, species.full_food) if species.hunts else 0
        else:
            self._age = 0
            self._food_level = species.full_food
        if place:
            field.place(self, location)

    def __repr__(self) -> str:
        state = "alive" if self._alive else f"dead:{self._death_cause.value}"
        return f"<{self._species.name} age={self._age} at {self._location} {state}>"

    @property
    def species(self) -> SpeciesDef:
        return self._species

    @property
    def species_tag(self) -> str:
        return self._species.name

    @property
    def field(self) -> Field:
        return self._field

    @property
    def location(self) -> Location | None:
        return self._location

    @property
    def last_location(self) -> Location:
        """Current cell while alive, the cell it died in afterwards."""
        return self._last_location

    @property
    def age(self) -> int:
        return self._age

    @property
    def food_level(self) -> int:
        return self._food_level

    @property
    def death_cause(self) -> DeathCause | None:
        return self._death_cause

    def is_alive(self) -> bool:
        return self._alive

    def set_dead(self, cause: DeathCause) -> None:
        """Mark dead and vacate the current cell. Later causes are ignored."""
        if not self._alive:
            return
        self._alive = False
        self._death_cause = cause
        if self._location is not None:
            if self._field.get_object_at(self._location) is self:
                self._field.clear(self._location)
            self._location = None

    def kill(self) -> None:
        self.set_dead(DeathCause.EATEN)

    def set_location(self, location: Location) -> None:
        if not self._alive:
            raise DeadAnimalError(
                self.species_tag, f"Cannot move dead {self.species_tag}"
            )
        if self._location is not None and self._field.get_object_at(self._location) is self:
            self._field.clear(self._location)
        self._location = location
        self._last_location = location
        self._field.place(self, location)

    # -- Life cycle --

    def act(self, newborns: list[Animal]) -> None:
        """Advance one tick: age, hunger, breeding, then feeding or moving.

        Newborns are appended to *newborns* with their cells reserved;
        they are not on the field until the driver places them.
        """
        if not self._alive:
            raise DeadAnimalError(
                self.species_tag,
                f"act() called on dead {self.species_tag} ({self._death_cause.value})",
            )
        self._increment_age()
        if not self._alive:
            return
        if self._species.hunts:
            self._increment_hunger()
            if not self._alive:
                return

        self._give_birth(newborns)
        # Move towards a source of food if found.
        new_location = self._find_food()
        if new_location is None:
            new_location = self._field.free_adjacent_location(self._location)
        if new_location is not None:
            self.set_location(new_location)
        else:
            self.set_dead(DeathCause.OVERCROWDING)

    def _increment_age(self) -> None:
        self._age += 1
        if self._age > self._species.max_age:
            self.set_dead(DeathCause.OLD_AGE)

    def _increment_hunger(self) -> None:
        self._food_level -= 1
        if self._food_level <= 0:
            self.set_dead(DeathCause.STARVATION)

    def _find_food(self) -> Location | None:
        """Eat the first live prey adjacent to us; return where it was."""
        if not self._species.hunts:
            return None
        for where in self._field.adjacent_locations(self._location):
            occupant = self._field.get_object_at(where)
            if occupant is None or not self._species.eats(occupant.species_tag):
                continue
            if occupant.is_alive():
                occupant.kill()
                self._food_level = self._species.energy_from(occupant.species_tag)
                return where
        return None

    def can_breed(self) -> bool:
        return self._age >= self._species.breeding_age

    def breed(self) -> int:
        """Return the litter size for this tick, 0 if not breeding."""
        if self.can_breed() and self._rng.random() < self._species.breeding_probability:
            return self._rng.randint(1, self._species.max_litter_size)
        return 0

    def _give_birth(self, newborns: list[Animal]) -> None:
        free = self._field.free_adjacent_locations(self._location)
        births = self.breed()
        for loc in free[:births]:
            self._field.reserve(loc)
            newborns.append(
                Animal(self._species, self._field, loc, self._rng, place=False)
            )

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        if self._location is None:
            raise DeadAnimalError(self.species_tag, f"Cannot snapshot dead {self.species_tag}")
        return {
            "species": self.species_tag,
            "row": self._location.row,
            "col": self._location.col,
            "age": self._age,
            "food_level": self._food_level,
        }

    @classmethod
    def restore(
        cls,
        data: dict[str, Any],
        species: SpeciesDef,
        field: Field,
        rng: random.Random,
    ) -> Animal:
        animal = cls(species, field, Location(data["row"], data["col"]), rng)
        animal._age = data["age"]
        animal._food_level = data["food_level"]
        return animal
