"""Initial alien placement."""

from __future__ import annotations

import numpy as np

from invasion.core.errors import ConfigurationError
from invasion.core.names import ALIEN_NAMES, ALIEN_POOL_LIMIT, POSITIONAL_ALIEN_NAME
from invasion.core.world import WorldMap

AlienPositions = dict[str, str]


def alien_names(count: int) -> list[str]:
    """Return ``count`` alien names.

    Up to 75 aliens take curated names in pool order. Larger invasions are
    named positionally (``Alien 1``, ``Alien 2``, ...) so the pool never
    runs dry.
    """
    if count < 0:
        raise ConfigurationError(f"aliens count cannot be negative ({count})")

    if count <= ALIEN_POOL_LIMIT:
        if count > len(ALIEN_NAMES):
            raise ConfigurationError(
                f"maximum number of named aliens exceeded ({len(ALIEN_NAMES)})"
            )
        return ALIEN_NAMES[:count]

    return [POSITIONAL_ALIEN_NAME.format(i + 1) for i in range(count)]


def place_aliens(
    count: int, world: WorldMap, rng: np.random.Generator,
) -> AlienPositions:
    """Drop ``count`` aliens on uniformly random cities, with replacement."""
    if len(world) == 0:
        raise ConfigurationError("map cannot be empty")

    cities = world.cities
    positions: AlienPositions = {}
    for alien in alien_names(count):
        positions[alien] = cities[int(rng.integers(len(cities)))]
    return positions
