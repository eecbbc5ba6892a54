from __future__ import annotations

import numpy as np
import pytest

from lonely_tribes.environment.generators import generate_level
from lonely_tribes.environment.generators.pipeline.layers.walls import carve_walls
from lonely_tribes.environment.sprites import LevelMap
from lonely_tribes.util.coordinates import Rect

# A lone room well inside a 30x30 grid.
SINGLE_ROOM = Rect.from_bounds(5, 6, 15, 14)


@pytest.fixture(scope="session")
def level_42() -> LevelMap:
    """The level for seed 42 on a 40x40 grid."""
    return generate_level(42, width=40, height=40)


@pytest.fixture
def single_room_walls() -> np.ndarray:
    """Wall grid holding the outline of SINGLE_ROOM only."""
    return carve_walls(30, 30, [SINGLE_ROOM])
