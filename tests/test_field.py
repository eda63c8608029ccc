"""
Test suite for Field occupancy and adjacency.

Tests cover:
- Constructor and properties
- Bounds checking
- Placement, clearing, and conflicts
- Reservations for newborn cells
- Adjacency order and shuffling
- Free-cell queries
"""

import random
from dataclasses import dataclass

import pytest

from tick_wild import Field, FieldError, Location


@dataclass(eq=False)
class Stub:
    species_tag: str = "stub"
    alive: bool = True

    def is_alive(self) -> bool:
        return self.alive

    def kill(self) -> None:
        self.alive = False


class TestFieldConstruction:
    def test_constructor_sets_dimensions(self):
        field = Field(depth=4, width=7)
        assert field.depth == 4
        assert field.width == 7

    def test_new_field_is_empty(self):
        field = Field(3, 3)
        assert len(field) == 0
        assert list(field.occupants()) == []

    @pytest.mark.parametrize("depth,width", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, depth, width):
        with pytest.raises(ValueError):
            Field(depth, width)


class TestFieldBounds:
    def test_out_of_bounds_get_raises(self):
        field = Field(3, 3)
        with pytest.raises(ValueError, match="out of bounds"):
            field.get_object_at(Location(3, 0))

    def test_negative_location_raises(self):
        field = Field(3, 3)
        with pytest.raises(ValueError):
            field.place(Stub(), Location(-1, 1))

    def test_index_conversion(self):
        field = Field(4, 5)
        assert field.index_of(Location(0, 0)) == 0
        assert field.index_of(Location(2, 3)) == 13
        assert field.location_at(13) == Location(2, 3)

    def test_location_at_out_of_range(self):
        field = Field(2, 2)
        with pytest.raises(ValueError):
            field.location_at(4)


class TestFieldPlacement:
    def test_place_and_get(self):
        field = Field(3, 3)
        stub = Stub()
        field.place(stub, Location(1, 2))
        assert field.get_object_at(Location(1, 2)) is stub
        assert len(field) == 1

    def test_place_same_occupant_twice_is_allowed(self):
        field = Field(3, 3)
        stub = Stub()
        field.place(stub, Location(0, 0))
        field.place(stub, Location(0, 0))
        assert field.get_object_at(Location(0, 0)) is stub

    def test_place_on_occupied_cell_raises(self):
        field = Field(3, 3)
        field.place(Stub("a"), Location(1, 1))
        with pytest.raises(FieldError):
            field.place(Stub("b"), Location(1, 1))

    def test_clear(self):
        field = Field(3, 3)
        field.place(Stub(), Location(2, 2))
        field.clear(Location(2, 2))
        assert field.get_object_at(Location(2, 2)) is None
        assert len(field) == 0

    def test_clear_all(self):
        field = Field(3, 3)
        field.place(Stub(), Location(0, 0))
        field.reserve(Location(1, 1))
        field.clear_all()
        assert len(field) == 0
        assert not field.is_reserved(Location(1, 1))

    def test_occupants_in_row_major_order(self):
        field = Field(3, 3)
        a, b, c = Stub("a"), Stub("b"), Stub("c")
        field.place(c, Location(2, 0))
        field.place(a, Location(0, 1))
        field.place(b, Location(1, 2))
        assert list(field.occupants()) == [
            (Location(0, 1), a),
            (Location(1, 2), b),
            (Location(2, 0), c),
        ]


class TestFieldReservation:
    def test_reserved_cell_is_not_free(self):
        field = Field(3, 3)
        field.reserve(Location(0, 0))
        assert field.is_reserved(Location(0, 0))
        assert Location(0, 0) not in field.free_adjacent_locations(Location(1, 1))

    def test_reserved_cell_has_no_occupant(self):
        field = Field(3, 3)
        field.reserve(Location(0, 0))
        assert field.get_object_at(Location(0, 0)) is None

    def test_place_drops_reservation(self):
        field = Field(3, 3)
        field.reserve(Location(0, 0))
        field.place(Stub(), Location(0, 0))
        assert not field.is_reserved(Location(0, 0))

    def test_reserve_occupied_cell_raises(self):
        field = Field(3, 3)
        field.place(Stub(), Location(0, 0))
        with pytest.raises(FieldError):
            field.reserve(Location(0, 0))


class TestFieldAdjacency:
    def test_interior_has_eight_neighbors_in_row_major_order(self):
        field = Field(3, 3)
        assert field.adjacent_locations(Location(1, 1)) == [
            Location(0, 0), Location(0, 1), Location(0, 2),
            Location(1, 0),                 Location(1, 2),
            Location(2, 0), Location(2, 1), Location(2, 2),
        ]

    def test_corner_has_three_neighbors(self):
        field = Field(5, 5)
        assert field.adjacent_locations(Location(0, 0)) == [
            Location(0, 1), Location(1, 0), Location(1, 1),
        ]

    def test_edge_has_five_neighbors(self):
        field = Field(5, 5)
        assert len(field.adjacent_locations(Location(0, 2))) == 5

    def test_never_includes_self(self):
        field = Field(4, 4)
        for row in range(4):
            for col in range(4):
                loc = Location(row, col)
                assert loc not in field.adjacent_locations(loc)

    def test_single_cell_field_has_no_neighbors(self):
        field = Field(1, 1)
        assert field.adjacent_locations(Location(0, 0)) == []
        assert field.free_adjacent_location(Location(0, 0)) is None

    def test_shuffled_adjacency_is_seed_deterministic(self):
        a = Field(5, 5, random.Random(7))
        b = Field(5, 5, random.Random(7))
        centre = Location(2, 2)
        first = a.adjacent_locations(centre)
        assert first == b.adjacent_locations(centre)
        assert sorted(first, key=lambda l: (l.row, l.col)) == Field(5, 5).adjacent_locations(centre)


class TestFieldFreeCells:
    def test_free_adjacent_excludes_occupied(self):
        field = Field(3, 3)
        field.place(Stub(), Location(0, 0))
        field.place(Stub(), Location(2, 2))
        free = field.free_adjacent_locations(Location(1, 1))
        assert len(free) == 6
        assert Location(0, 0) not in free
        assert Location(2, 2) not in free

    def test_free_adjacent_location_is_first_free(self):
        field = Field(3, 3)
        field.place(Stub(), Location(0, 0))
        assert field.free_adjacent_location(Location(1, 1)) == Location(0, 1)

    def test_free_adjacent_location_none_when_surrounded(self):
        field = Field(3, 3)
        for loc in field.adjacent_locations(Location(1, 1)):
            field.place(Stub(), loc)
        assert field.free_adjacent_locations(Location(1, 1)) == []
        assert field.free_adjacent_location(Location(1, 1)) is None
