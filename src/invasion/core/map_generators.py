"""
Map generators for the invasion sandbox.

The grid generator drops named cities on random cells of a
``height x width`` grid and infers roads: two cities in the same row or
column are connected when no other city lies between them.

Row 0 is the northern edge and column 0 the western edge.

All generators use seeded numpy RNG for deterministic reproduction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from invasion.core.config import MapConfig
from invasion.core.errors import ConfigurationError
from invasion.core.names import CITY_NAMES
from invasion.core.world import Direction, Neighbors, WorldMap

Coordinates = tuple[int, int]

# (row step, column step) for each direction.
_DIRECTION_STEPS: dict[Direction, Coordinates] = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


@dataclass
class GridMap:
    """A generated world map together with the grid it was laid out on.

    Attributes:
        grid: ``grid[row][col]`` is a city name or None for an empty cell.
        coordinates: City name to its (row, col) cell.
        world: The inferred road network.
    """

    grid: list[list[str | None]]
    coordinates: dict[str, Coordinates]
    world: WorldMap

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def to_text(self) -> str:
        return self.world.to_text()


def city_names(count: int) -> list[str]:
    """Return the first ``count`` names of the city pool."""
    if count > len(CITY_NAMES):
        raise ConfigurationError(
            f"maximum number of cities exceeded ({len(CITY_NAMES)})"
        )
    return CITY_NAMES[:count]


def generate_grid_map(
    height: int = 5, width: int = 5, cities_count: int = 20,
    seed: int | None = None,
) -> GridMap:
    """Generate a grid map.

    Args:
        height: Number of grid rows.
        width: Number of grid columns.
        cities_count: Number of cities to place.
        seed: Random seed for deterministic generation.

    Returns:
        A GridMap with every city connected to its nearest neighbor in
        each direction.

    Raises:
        ConfigurationError: If the cities do not fit on the grid or the
            name pool is too small.
    """
    config = MapConfig(
        height=height, width=width, cities_count=cities_count, random_seed=seed,
    )
    config.validate()
    rng = np.random.default_rng(config.random_seed)

    grid = _place_cities(height, width, city_names(cities_count), rng)
    coordinates = {
        city: (r, c)
        for r, row in enumerate(grid)
        for c, city in enumerate(row)
        if city is not None
    }
    world = WorldMap()
    for city, (r, c) in coordinates.items():
        world.add_city(city, _find_neighbors(r, c, grid))

    return GridMap(grid=grid, coordinates=coordinates, world=world)


def _place_cities(
    height: int, width: int, cities: list[str], rng: np.random.Generator,
) -> list[list[str | None]]:
    """Put each city on a random empty cell.

    Retries on occupied cells, which gets slow only when the grid is
    almost full.
    """
    grid: list[list[str | None]] = [[None] * width for _ in range(height)]
    for city in cities:
        while True:
            r = int(rng.integers(height))
            c = int(rng.integers(width))
            if grid[r][c] is None:
                grid[r][c] = city
                break
    return grid


def _find_neighbors(r: int, c: int, grid: list[list[str | None]]) -> Neighbors:
    """Nearest occupied cell in each direction, scanning to the edge."""
    height, width = len(grid), len(grid[0])
    neighbors = Neighbors()
    for direction, (dr, dc) in _DIRECTION_STEPS.items():
        nr, nc = r + dr, c + dc
        while 0 <= nr < height and 0 <= nc < width:
            if grid[nr][nc] is not None:
                neighbors = neighbors.with_road(direction, grid[nr][nc])
                break
            nr, nc = nr + dr, nc + dc
    return neighbors


# Registry of available map generators.
MAP_GENERATORS: dict[str, Callable[..., GridMap]] = {
    "grid": generate_grid_map,
}


def generate_map(
    name: str, height: int, width: int, cities_count: int,
    seed: int | None = None,
) -> GridMap:
    """Factory function to generate a map by name.

    Raises:
        KeyError: If the generator name is not found.
    """
    if name not in MAP_GENERATORS:
        raise KeyError(
            f"Unknown map generator '{name}'. "
            f"Available: {list(MAP_GENERATORS.keys())}"
        )
    return MAP_GENERATORS[name](
        height=height, width=width, cities_count=cities_count, seed=seed,
    )


def generate_map_from_config(config: MapConfig, name: str = "grid") -> GridMap:
    """Generate a map from a MapConfig, seeded by ``config.random_seed``."""
    config.validate()
    return generate_map(
        name, config.height, config.width, config.cities_count,
        seed=config.random_seed,
    )
