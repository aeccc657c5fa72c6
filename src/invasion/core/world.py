"""
World map model for the invasion sandbox.

A world map is an undirected-in-practice, direction-labeled graph of named
cities. Each city has at most one neighbor per compass direction. Roads are
stored per city and are not required to be reciprocal; references to cities
missing from the map are tolerated and simply behave as one-way roads.

Text format, one line per city::

    Pinson north=Talihina east=Fabens
    Clifton

Direction fields are written in canonical order (north, south, east, west)
and accepted in any order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator

from invasion.core.errors import MapParseError


class Direction(str, Enum):
    """Compass directions a road can point to, in canonical order."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass(frozen=True)
class Neighbors:
    """Roads leaving a city. ``None`` means no road in that direction."""

    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None

    def get(self, direction: Direction) -> str | None:
        return getattr(self, direction.value)

    def with_road(self, direction: Direction, city: str | None) -> Neighbors:
        """Return a copy with the road in ``direction`` replaced."""
        return replace(self, **{direction.value: city})

    def without(self, city: str) -> Neighbors:
        """Return a copy with every road leading to ``city`` cleared."""
        result = self
        for direction in Direction:
            if self.get(direction) == city:
                result = result.with_road(direction, None)
        return result

    def items(self) -> list[tuple[Direction, str]]:
        """Present roads as (direction, city) pairs, in canonical order."""
        return [
            (direction, self.get(direction))
            for direction in Direction
            if self.get(direction) is not None
        ]

    def cities(self) -> list[str]:
        """Neighbor city names, in canonical direction order."""
        return [city for _, city in self.items()]

    def __len__(self) -> int:
        return len(self.items())


class WorldMap:
    """Mapping from city name to its :class:`Neighbors`.

    Attributes:
        roads: The underlying ordered ``city -> Neighbors`` dict.
    """

    def __init__(self, roads: dict[str, Neighbors] | None = None) -> None:
        self.roads: dict[str, Neighbors] = dict(roads or {})

    # ---- Structural queries ----

    def __len__(self) -> int:
        return len(self.roads)

    def __contains__(self, city: object) -> bool:
        return city in self.roads

    def __iter__(self) -> Iterator[str]:
        return iter(self.roads)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldMap):
            return NotImplemented
        return self.roads == other.roads

    def __repr__(self) -> str:
        return f"WorldMap({self.roads!r})"

    @property
    def cities(self) -> list[str]:
        """City names in insertion order."""
        return list(self.roads)

    def items(self) -> Iterable[tuple[str, Neighbors]]:
        return self.roads.items()

    def neighbors(self, city: str) -> Neighbors:
        """Return the roads leaving ``city``; unknown cities have none."""
        return self.roads.get(city, Neighbors())

    def is_isolated(self, city: str) -> bool:
        return len(self.neighbors(city)) == 0

    # ---- Mutation ----

    def add_city(self, city: str, neighbors: Neighbors | None = None) -> None:
        """Add or replace a city entry."""
        self.roads[city] = neighbors or Neighbors()

    def remove_city(self, city: str) -> None:
        """Delete ``city`` and every road leading to it.

        Scans every remaining city in every direction; there is no reverse
        index. Removing a city that is not on the map only clears dangling
        roads to it.
        """
        self.roads.pop(city, None)
        for name, neighbors in self.roads.items():
            self.roads[name] = neighbors.without(city)

    def copy(self) -> WorldMap:
        """Independent copy; Neighbors records are immutable and shared."""
        return WorldMap(self.roads)

    # ---- Serialization ----

    def to_text(self) -> str:
        """Serialize to the line-based map format."""
        lines: list[str] = []
        for city, neighbors in self.roads.items():
            parts = [city]
            parts.extend(f"{d.value}={c}" for d, c in neighbors.items())
            lines.append(" ".join(parts) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def from_text(cls, text: str) -> WorldMap:
        """Parse the line-based map format.

        Raises:
            MapParseError: On a line starting with a road instead of a city,
                or on a road field that is not ``direction=city``.
        """
        world = cls()
        for line in text.splitlines():
            if not line.strip():
                continue
            parts = line.split(" ")
            if "=" in parts[0]:
                raise MapParseError("error parsing map file: line without city")

            neighbors = Neighbors()
            for part in parts[1:]:
                direction_city = part.split("=")
                if len(direction_city) != 2:
                    raise MapParseError(
                        f"error parsing map file: invalid road: {part}"
                    )
                keyword, city = direction_city
                try:
                    direction = Direction(keyword)
                except ValueError:
                    continue  # unknown directions are ignored
                neighbors = neighbors.with_road(direction, city)

            world.roads[parts[0]] = neighbors
        return world


def destroyed_cities(initial: WorldMap, result: WorldMap) -> list[str]:
    """Cities of ``initial`` missing from ``result``, in ``initial`` order."""
    return [city for city in initial if city not in result]
