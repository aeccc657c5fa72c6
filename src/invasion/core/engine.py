"""
Main simulation engine.

Owns the invasion state (world map, alien positions, iteration counter)
and drives the step loop until a stop condition holds:

1. First step only: fight over the initial placement
2. Move every alien along a random road
3. Destroy cities holding two or more aliens
4. Record a snapshot
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from invasion.core.config import SimulationConfig
from invasion.core.errors import ConfigurationError
from invasion.core.movement import move_aliens
from invasion.core.placement import AlienPositions, place_aliens
from invasion.core.rules import DestructionEvent, apply_destruction
from invasion.core.world import WorldMap

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Step snapshot and run summary
# ---------------------------------------------------------------------------
@dataclass
class StepSnapshot:
    """State after one step."""
    iteration: int
    cities_remaining: int
    aliens_remaining: int
    destroyed: list[DestructionEvent] = field(default_factory=list)


@dataclass
class SimulationSummary:
    """End-of-run report.

    ``destroyed_cities`` only lists cities that were on the starting map;
    a road may name a city the map never defines, and aliens meeting there
    still fight but do not count as destroying a city.
    """
    iterations: int
    cities_remaining: int
    aliens_remaining: int
    destroyed_cities: list[str]
    stop_reason: str


# ---------------------------------------------------------------------------
# Simulation Engine
# ---------------------------------------------------------------------------
class SimulationEngine:
    """
    Alien invasion simulation.

    The caller's map is copied on construction and never modified; the
    engine's own copy shrinks as cities are destroyed and is returned by
    :meth:`run`.
    """

    def __init__(
        self,
        world: WorldMap,
        config: SimulationConfig,
        rng: np.random.Generator | None = None,
        positions: AlienPositions | None = None,
    ):
        config.validate()
        if len(world) == 0:
            raise ConfigurationError("map cannot be empty")

        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)

        # State
        self.iteration = 0
        self.world = world.copy()
        self.initial_cities = frozenset(self.world.cities)
        if positions is None:
            self.positions = place_aliens(config.alien_count, self.world, self.rng)
        else:
            self.positions = dict(positions)
        self.history: list[StepSnapshot] = []

    @classmethod
    def from_positions(
        cls,
        world: WorldMap,
        positions: AlienPositions,
        config: SimulationConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> SimulationEngine:
        """Start from a known placement instead of a random one."""
        config = config or SimulationConfig(alien_count=len(positions))
        return cls(world, config, rng=rng, positions=positions)

    @property
    def iteration_limit(self) -> int:
        return self.config.iteration_limit

    # ------------------------------------------------------------------
    # Step loop
    # ------------------------------------------------------------------
    def run(self) -> WorldMap:
        """Step until a stop condition holds and return the surviving map."""
        logger.info("Alien invasion started!")

        while not self.should_stop():
            self.step()

        logger.info("Alien invasion finished!")
        return self.world

    def should_stop(self) -> bool:
        return self.stop_reason() is not None

    def stop_reason(self) -> str | None:
        """Why the simulation is over, or None while it can continue."""
        if self.iteration >= self.config.iteration_limit:
            return "iteration limit reached"
        if len(self.world) == 0:
            return "all cities destroyed"
        if not self.positions:
            return "all aliens destroyed"
        return None

    def step(self) -> StepSnapshot:
        """Move all aliens and resolve fights."""
        destroyed: list[DestructionEvent] = []

        # aliens dropped on the same city fight before they ever move
        if self.iteration == 0:
            destroyed.extend(apply_destruction(self.positions, self.world))

        self.positions = move_aliens(self.positions, self.world, self.rng)
        destroyed.extend(apply_destruction(self.positions, self.world))
        self.iteration += 1

        snapshot = StepSnapshot(
            iteration=self.iteration,
            cities_remaining=len(self.world),
            aliens_remaining=len(self.positions),
            destroyed=destroyed,
        )
        self.history.append(snapshot)
        logger.debug(
            "Iteration %d: %d cities, %d aliens left",
            snapshot.iteration, snapshot.cities_remaining, snapshot.aliens_remaining,
        )
        return snapshot

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    @property
    def events(self) -> list[DestructionEvent]:
        """Every destruction so far, in order."""
        return [event for snap in self.history for event in snap.destroyed]

    def summary(self) -> SimulationSummary:
        return SimulationSummary(
            iterations=self.iteration,
            cities_remaining=len(self.world),
            aliens_remaining=len(self.positions),
            destroyed_cities=[
                event.city for event in self.events
                if event.city in self.initial_cities
            ],
            stop_reason=self.stop_reason() or "running",
        )
