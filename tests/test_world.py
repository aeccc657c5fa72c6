"""Tests for the world map model and its text format."""

import pytest

from invasion.core.errors import MapParseError
from invasion.core.world import Direction, Neighbors, WorldMap, destroyed_cities


class TestNeighbors:
    def test_items_in_canonical_order(self):
        n = Neighbors(west="W", north="N", east="E")
        assert n.items() == [
            (Direction.NORTH, "N"), (Direction.EAST, "E"), (Direction.WEST, "W"),
        ]

    def test_len_counts_present_roads(self):
        assert len(Neighbors()) == 0
        assert len(Neighbors(north="A", south="B")) == 2

    def test_with_road_returns_new_record(self):
        n = Neighbors(north="A")
        n2 = n.with_road(Direction.SOUTH, "B")
        assert n.south is None
        assert n2 == Neighbors(north="A", south="B")

    def test_without_clears_every_matching_direction(self):
        n = Neighbors(north="A", south="A", east="B")
        assert n.without("A") == Neighbors(east="B")


class TestQueries:
    def test_neighbors_of_known_city(self, simple_map):
        assert simple_map.neighbors("Pinson") == Neighbors(north="Talihina", east="Fabens")

    def test_neighbors_of_unknown_city_is_empty(self, simple_map):
        assert simple_map.neighbors("Atlantis") == Neighbors()

    def test_isolated(self, simple_map):
        assert simple_map.is_isolated("Clifton")
        assert not simple_map.is_isolated("Pinson")

    def test_len_contains_iter(self, simple_map):
        assert len(simple_map) == 4
        assert "Fabens" in simple_map
        assert "Atlantis" not in simple_map
        assert list(simple_map) == ["Talihina", "Pinson", "Fabens", "Clifton"]


class TestRemoveCity:
    def test_removes_entry_and_incoming_roads(self, star_map):
        star_map.remove_city("Centercity")
        assert "Centercity" not in star_map
        assert len(star_map) == 4
        for city in star_map:
            assert star_map.is_isolated(city)

    def test_keeps_unrelated_roads(self, simple_map):
        simple_map.remove_city("Fabens")
        assert simple_map.neighbors("Pinson") == Neighbors(north="Talihina")
        assert simple_map.neighbors("Talihina") == Neighbors(south="Pinson")

    def test_removal_is_idempotent(self, simple_map):
        simple_map.remove_city("Pinson")
        once = simple_map.copy()
        simple_map.remove_city("Pinson")
        assert simple_map == once

    def test_clears_dangling_references(self):
        world = WorldMap({"A": Neighbors(east="Ghost")})
        world.remove_city("Ghost")
        assert world.neighbors("A") == Neighbors()


class TestCopy:
    def test_copy_is_independent(self, star_map):
        copy = star_map.copy()
        copy.remove_city("Centercity")
        assert "Centercity" in star_map
        assert star_map.neighbors("Northcity") == Neighbors(south="Centercity")

    def test_copy_is_equal(self, simple_map):
        assert simple_map.copy() == simple_map


class TestTextFormat:
    def test_to_text(self, simple_map):
        assert simple_map.to_text() == (
            "Talihina south=Pinson\n"
            "Pinson north=Talihina east=Fabens\n"
            "Fabens west=Pinson\n"
            "Clifton\n"
        )

    def test_roundtrip(self, simple_map, star_map):
        assert WorldMap.from_text(simple_map.to_text()) == simple_map
        assert WorldMap.from_text(star_map.to_text()) == star_map

    def test_empty(self):
        assert WorldMap().to_text() == ""
        assert len(WorldMap.from_text("")) == 0

    def test_direction_order_not_enforced_on_read(self):
        world = WorldMap.from_text("Pinson west=A north=B\n")
        assert world.neighbors("Pinson") == Neighbors(north="B", west="A")

    def test_unknown_direction_ignored(self):
        world = WorldMap.from_text("Pinson up=A north=B\n")
        assert world.neighbors("Pinson") == Neighbors(north="B")

    def test_blank_lines_skipped(self):
        world = WorldMap.from_text("A east=B\n\nB west=A\n")
        assert world.cities == ["A", "B"]

    def test_line_without_city(self):
        with pytest.raises(MapParseError, match="line without city"):
            WorldMap.from_text("north=Pinson\n")

    def test_invalid_road(self):
        with pytest.raises(MapParseError, match="invalid road: north"):
            WorldMap.from_text("Pinson north\n")

    def test_road_with_two_equals_signs(self):
        with pytest.raises(MapParseError, match="invalid road"):
            WorldMap.from_text("Pinson north=A=B\n")

    def test_case_sensitive_names(self):
        world = WorldMap.from_text("pinson\nPinson\n")
        assert len(world) == 2


class TestDestroyedCities:
    def test_lists_missing_cities_in_initial_order(self, star_map):
        result = star_map.copy()
        result.remove_city("Westcity")
        result.remove_city("Centercity")
        assert destroyed_cities(star_map, result) == ["Centercity", "Westcity"]

    def test_nothing_destroyed(self, simple_map):
        assert destroyed_cities(simple_map, simple_map.copy()) == []
