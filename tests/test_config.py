"""Tests for SimulationConfig and MapConfig."""

import pytest

from invasion.core.config import MapConfig, SimulationConfig
from invasion.core.errors import ConfigurationError


class TestDefaults:
    def test_simulation_defaults(self):
        c = SimulationConfig()
        assert c.iteration_limit == 10000
        assert c.alien_count == 50
        assert c.random_seed is None

    def test_map_defaults(self):
        c = MapConfig()
        assert (c.height, c.width, c.cities_count) == (5, 5, 20)


class TestValidation:
    def test_defaults_are_valid(self):
        SimulationConfig().validate()
        MapConfig().validate()

    def test_negative_iteration_limit(self):
        with pytest.raises(ConfigurationError, match="iteration limit"):
            SimulationConfig(iteration_limit=-1).validate()

    def test_negative_alien_count(self):
        with pytest.raises(ConfigurationError, match="aliens count"):
            SimulationConfig(alien_count=-5).validate()

    def test_zero_is_allowed(self):
        SimulationConfig(iteration_limit=0, alien_count=0).validate()

    def test_too_many_cities(self):
        with pytest.raises(ConfigurationError, match=r"too many cities \(10\).*\(3x3\)"):
            MapConfig(height=3, width=3, cities_count=10).validate()

    def test_full_grid_is_fine(self):
        MapConfig(height=3, width=3, cities_count=9).validate()

    def test_non_positive_dimensions(self):
        with pytest.raises(ConfigurationError, match="invalid map dimensions"):
            MapConfig(height=0).validate()
        with pytest.raises(ConfigurationError, match="invalid map dimensions"):
            MapConfig(width=-2).validate()


class TestSerialization:
    def test_to_dict_roundtrip(self):
        c = SimulationConfig(iteration_limit=7, alien_count=3, random_seed=1)
        assert SimulationConfig.from_dict(c.to_dict()) == c

    def test_from_dict_ignores_unknown_keys(self):
        c = MapConfig.from_dict({"height": 8, "colour": "blue"})
        assert c.height == 8

    def test_to_json_roundtrip(self):
        c = MapConfig(height=4, width=6, cities_count=10, random_seed=3)
        assert MapConfig.from_json(c.to_json()) == c

    def test_diff(self):
        a = SimulationConfig(alien_count=10)
        b = SimulationConfig(alien_count=20, random_seed=5)
        assert a.diff(b) == {"alien_count": (10, 20), "random_seed": (None, 5)}
