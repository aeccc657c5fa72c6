"""
Shared test fixtures.

``simple_map`` is a three-city line (Talihina - Pinson - Fabens) plus the
isolated city Clifton. ``star_map`` is a center city with four leaves that
only connect back to the center.
"""

import numpy as np
import pytest

from invasion.core.world import Neighbors, WorldMap


@pytest.fixture
def simple_map() -> WorldMap:
    return WorldMap({
        "Talihina": Neighbors(south="Pinson"),
        "Pinson": Neighbors(north="Talihina", east="Fabens"),
        "Fabens": Neighbors(west="Pinson"),
        "Clifton": Neighbors(),
    })


@pytest.fixture
def star_map() -> WorldMap:
    return WorldMap({
        "Centercity": Neighbors(
            north="Northcity", south="Southcity",
            east="Eastcity", west="Westcity",
        ),
        "Northcity": Neighbors(south="Centercity"),
        "Southcity": Neighbors(north="Centercity"),
        "Eastcity": Neighbors(west="Centercity"),
        "Westcity": Neighbors(east="Centercity"),
    })


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
