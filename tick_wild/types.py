"""Shared types, protocols and errors for tick-wild."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Location:
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


class DeathCause(str, Enum):
    OLD_AGE = "old_age"
    STARVATION = "starvation"
    OVERCROWDING = "overcrowding"
    EATEN = "eaten"


class Occupant(Protocol):
    """What the field holds and what predation needs to know about it."""

    @property
    def species_tag(self) -> str: ...
    def is_alive(self) -> bool: ...
    def kill(self) -> None: ...


class DeadAnimalError(RuntimeError):
    """Raised when a dead animal is asked to act or move."""

    def __init__(self, species: str, message: str) -> None:
        self.species = species
        super().__init__(message)


class FieldError(Exception):
    """Raised when a cell is claimed while another occupant holds it."""


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, field size, unknown species)."""
