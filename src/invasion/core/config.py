"""
Configuration for the invasion sandbox.

Simulation and map generation parameters live here. Defaults match the
command-line defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any

from invasion.core.errors import ConfigurationError


class _ConfigMixin:
    """Shared serialization helpers for the config dataclasses."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, d: dict[str, Any]):
        """Deserialize from a dict, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in names})

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, s: str):
        return cls.from_dict(json.loads(s))

    def diff(self, other) -> dict[str, tuple[Any, Any]]:
        """Return parameters that differ between two configs."""
        diffs: dict[str, tuple[Any, Any]] = {}
        for k, v1 in self.to_dict().items():
            v2 = getattr(other, k)
            if v1 != v2:
                diffs[k] = (v1, v2)
        return diffs


@dataclass
class SimulationConfig(_ConfigMixin):
    """
    Parameters of a single invasion run.

    ``random_seed=None`` draws fresh entropy from the OS, so repeated runs
    differ; pass a seed for reproducible runs.
    """

    iteration_limit: int = 10000
    alien_count: int = 50
    random_seed: int | None = None

    def validate(self) -> None:
        """Raise ConfigurationError for impossible parameters."""
        if self.iteration_limit < 0:
            raise ConfigurationError(
                f"iteration limit cannot be negative ({self.iteration_limit})"
            )
        if self.alien_count < 0:
            raise ConfigurationError(
                f"aliens count cannot be negative ({self.alien_count})"
            )


@dataclass
class MapConfig(_ConfigMixin):
    """Parameters of the grid map generator."""

    height: int = 5
    width: int = 5
    cities_count: int = 20
    random_seed: int | None = None

    def validate(self) -> None:
        """Raise ConfigurationError for impossible parameters."""
        if self.height <= 0 or self.width <= 0:
            raise ConfigurationError(
                f"error creating grid: invalid map dimensions "
                f"({self.height}x{self.width})"
            )
        if self.cities_count < 0:
            raise ConfigurationError(
                f"cities count cannot be negative ({self.cities_count})"
            )
        if self.height * self.width < self.cities_count:
            raise ConfigurationError(
                f"error creating grid: too many cities ({self.cities_count}) "
                f"for provided map dimensions ({self.height}x{self.width})"
            )
