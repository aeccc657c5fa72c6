"""Random-walk movement of aliens along roads."""

from __future__ import annotations

import numpy as np

from invasion.core.placement import AlienPositions
from invasion.core.world import WorldMap


def next_city(city: str, world: WorldMap, rng: np.random.Generator) -> str:
    """Pick one road out of ``city`` uniformly; trapped aliens stay put."""
    options = world.neighbors(city).cities()
    if not options:
        return city
    return options[int(rng.integers(len(options)))]


def move_aliens(
    positions: AlienPositions, world: WorldMap, rng: np.random.Generator,
) -> AlienPositions:
    """Move every alien once and return the new positions.

    All aliens move from the same snapshot; ``positions`` is not modified.
    """
    return {
        alien: next_city(city, world, rng)
        for alien, city in positions.items()
    }
