"""
Collision rule: a city holding two or more aliens is destroyed, together
with every alien in it and every road leading to it.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from invasion.core.placement import AlienPositions
from invasion.core.world import WorldMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DestructionEvent:
    """A city destroyed in a fight, and the aliens that died there."""

    city: str
    aliens: tuple[str, ...]

    def describe(self) -> str:
        if len(self.aliens) == 1:
            fighters = self.aliens[0]
        else:
            fighters = f"{', '.join(self.aliens[:-1])} and {self.aliens[-1]}"
        return f"{self.city} has been destroyed by {fighters}!"


def find_collisions(positions: AlienPositions) -> dict[str, list[str]]:
    """Map each city holding two or more aliens to those aliens."""
    counts = Counter(positions.values())
    collisions: dict[str, list[str]] = {
        city: [] for city, count in counts.items() if count >= 2
    }
    for alien, city in positions.items():
        if city in collisions:
            collisions[city].append(alien)
    return collisions


def apply_destruction(
    positions: AlienPositions, world: WorldMap,
) -> list[DestructionEvent]:
    """Destroy every colliding city in place and report what happened.

    Collisions are computed once, before any removal, so destruction never
    cascades within a single evaluation.
    """
    events: list[DestructionEvent] = []
    for city, aliens in find_collisions(positions).items():
        for alien in aliens:
            del positions[alien]
        world.remove_city(city)

        event = DestructionEvent(city=city, aliens=tuple(aliens))
        logger.info(event.describe())
        events.append(event)
    return events
