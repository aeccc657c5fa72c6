"""
World map files.

Maps are stored in the line-based text format of
:class:`invasion.core.world.WorldMap`. Structure is not validated on load:
dangling roads and one-way roads are accepted as written.
"""

from __future__ import annotations

import logging
from pathlib import Path

from invasion.core.errors import MapParseError
from invasion.core.world import WorldMap

logger = logging.getLogger(__name__)


def load_map(path: str | Path) -> WorldMap:
    """Read and parse a world map file.

    Raises:
        OSError: If the file cannot be read.
        MapParseError: If a line is malformed; the message names the file.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        world = WorldMap.from_text(text)
    except MapParseError as exc:
        raise MapParseError(f"{path}: {exc}") from exc
    logger.debug("Loaded %d cities from %s", len(world), path)
    return world


def save_map(path: str | Path, world: WorldMap) -> None:
    """Write a world map to ``path``, replacing any existing file."""
    write_text(path, world.to_text())
    logger.debug("Saved %d cities to %s", len(world), path)


def write_text(path: str | Path, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")
