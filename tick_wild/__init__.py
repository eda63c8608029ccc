"""tick-wild - Grid-based predator/prey simulation."""

from tick_wild.animal import Animal
from tick_wild.census import Census
from tick_wild.chronicle import BIRTH, DEATH, Chronicle, LifeEvent
from tick_wild.field import Field
from tick_wild.simulator import DEFAULT_DEPTH, DEFAULT_WIDTH, Simulator
from tick_wild.species import BEAR, FOX, RABBIT, SpeciesDef, SpeciesRegistry, default_registry
from tick_wild.types import (
    DeadAnimalError,
    DeathCause,
    FieldError,
    Location,
    Occupant,
    SnapshotError,
)

__all__ = [
    "Simulator",
    "Field",
    "Animal",
    "Location",
    "Occupant",
    "DeathCause",
    "SpeciesDef",
    "SpeciesRegistry",
    "default_registry",
    "RABBIT",
    "FOX",
    "BEAR",
    "Census",
    "Chronicle",
    "LifeEvent",
    "BIRTH",
    "DEATH",
    "DEFAULT_DEPTH",
    "DEFAULT_WIDTH",
    "DeadAnimalError",
    "FieldError",
    "SnapshotError",
]
