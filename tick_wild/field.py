"""Field - bounded rectangular grid holding at most one occupant per cell."""
from __future__ import annotations

import random
from typing import Iterator

from tick_wild.types import FieldError, Location, Occupant

_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Field:
    """Occupancy arena for a ``depth`` x ``width`` grid.

    Cells live in a flat slot list indexed by ``row * width + col``.
    A reserved cell has no occupant yet but is not offered as free; the
    simulator uses this for newborns that are placed after the tick.
    When *rng* is given, adjacency lists are shuffled with it.
    """

    def __init__(self, depth: int, width: int, rng: random.Random | None = None) -> None:
        if depth <= 0 or width <= 0:
            raise ValueError(f"Field dimensions must be positive, got {depth}x{width}")
        self._depth = depth
        self._width = width
        self._rng = rng
        self._slots: list[Occupant | None] = [None] * (depth * width)
        self._reserved: set[int] = set()

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    def _check_bounds(self, location: Location) -> None:
        if not (0 <= location.row < self._depth and 0 <= location.col < self._width):
            raise ValueError(
                f"({location.row}, {location.col}) out of bounds "
                f"for {self._depth}x{self._width} field"
            )

    def index_of(self, location: Location) -> int:
        self._check_bounds(location)
        return location.row * self._width + location.col

    def location_at(self, index: int) -> Location:
        if not 0 <= index < len(self._slots):
            raise ValueError(f"Index {index} out of range for {len(self._slots)} cells")
        return Location(*divmod(index, self._width))

    def place(self, occupant: Occupant, location: Location) -> None:
        idx = self.index_of(location)
        current = self._slots[idx]
        if current is not None and current is not occupant:
            raise FieldError(f"Cell {location} is already occupied by {current.species_tag}")
        self._slots[idx] = occupant
        self._reserved.discard(idx)

    def clear(self, location: Location) -> None:
        self._slots[self.index_of(location)] = None

    def clear_all(self) -> None:
        self._slots = [None] * len(self._slots)
        self._reserved.clear()

    def reserve(self, location: Location) -> None:
        idx = self.index_of(location)
        if self._slots[idx] is not None:
            raise FieldError(f"Cannot reserve occupied cell {location}")
        self._reserved.add(idx)

    def is_reserved(self, location: Location) -> bool:
        return self.index_of(location) in self._reserved

    def get_object_at(self, location: Location) -> Occupant | None:
        return self._slots[self.index_of(location)]

    def adjacent_locations(self, location: Location) -> list[Location]:
        self._check_bounds(location)
        result: list[Location] = []
        for dr, dc in _OFFSETS:
            r, c = location.row + dr, location.col + dc
            if 0 <= r < self._depth and 0 <= c < self._width:
                result.append(Location(r, c))
        if self._rng is not None:
            self._rng.shuffle(result)
        return result

    def free_adjacent_locations(self, location: Location) -> list[Location]:
        free: list[Location] = []
        for loc in self.adjacent_locations(location):
            idx = loc.row * self._width + loc.col
            if self._slots[idx] is None and idx not in self._reserved:
                free.append(loc)
        return free

    def free_adjacent_location(self, location: Location) -> Location | None:
        free = self.free_adjacent_locations(location)
        return free[0] if free else None

    def occupants(self) -> Iterator[tuple[Location, Occupant]]:
        for idx, occupant in enumerate(self._slots):
            if occupant is not None:
                yield Location(*divmod(idx, self._width)), occupant

    def __len__(self) -> int:
        return sum(1 for occupant in self._slots if occupant is not None)
