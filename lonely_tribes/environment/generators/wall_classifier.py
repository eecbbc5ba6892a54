"""Neighbor-pattern wall classification.

Room carving only records which edge of a room a tile belongs to (see
`WallType`). This module picks the concrete wall sprite for each of those
tiles by looking at its 8 neighbors:

    NW  N  NE        (-1,+1) (0,+1) (+1,+1)
    W   .  E    ==   (-1, 0)   .    (+1, 0)
    SW  S  SE        (-1,-1) (0,-1) (+1,-1)

The ordered neighbor tuple (NW, N, NE, W, E, SW, S, SE) is the key into a
closed classification table. There is no partial or wildcard matching: any
pattern that is not listed is a gap in the wall and becomes a DOOR.

Usage:
    from lonely_tribes.environment.generators.wall_classifier import (
        classify_walls,
    )

    placements = classify_walls(wall_grid)
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

import numpy as np

from lonely_tribes.environment.sprites import (
    LevelMap,
    SpriteKind,
    SpritePlacement,
    SpriteRequest,
    WallType,
)
from lonely_tribes.types import TileCoord, TileOffset

logger = logging.getLogger(__name__)

# Neighbor tuple for one tile, ordered NW, N, NE, W, E, SW, S, SE.
type NeighborBitmask = tuple[
    WallType | None,
    WallType | None,
    WallType | None,
    WallType | None,
    WallType | None,
    WallType | None,
    WallType | None,
    WallType | None,
]

NEIGHBOR_OFFSETS: tuple[TileOffset, ...] = (
    (-1, 1),  # NW
    (0, 1),  # N
    (1, 1),  # NE
    (-1, 0),  # W
    (1, 0),  # E
    (-1, -1),  # SW
    (0, -1),  # S
    (1, -1),  # SE
)

# Grid values -> WallType, index 0 is NO_WALL.
_GRID_VALUE_TO_WALL: tuple[WallType | None, ...] = (
    None,
    WallType.BACK,
    WallType.FRONT,
    WallType.LEFT,
    WallType.RIGHT,
)


def _build_classification_table() -> Mapping[NeighborBitmask, SpriteKind]:
    """Build the read-only pattern table.

    Rows cover straight edges plus the tiles next to outer and inner corners,
    for each of the four wall orientations.
    """
    n = None
    b = WallType.BACK
    f = WallType.FRONT
    l = WallType.LEFT  # noqa: E741
    r = WallType.RIGHT

    rows: list[tuple[NeighborBitmask, SpriteKind]] = [
        # Back walls
        ((n, n, n, b, b, n, n, n), SpriteKind.BACK_WALL),
        ((n, n, r, b, r, n, n, n), SpriteKind.BACK_WALL),
        ((l, n, n, l, b, n, n, n), SpriteKind.BACK_WALL),
        ((n, l, n, n, b, n, n, n), SpriteKind.BACK_WALL_RIGHT_CORNER),
        ((n, r, n, b, n, n, n, n), SpriteKind.BACK_WALL_LEFT_CORNER),
        # Front walls
        ((n, n, n, n, f, n, l, n), SpriteKind.FRONT_WALL_LEFT_CORNER),
        ((n, n, n, f, n, n, r, n), SpriteKind.FRONT_WALL_RIGHT_CORNER),
        ((n, n, n, f, f, n, n, n), SpriteKind.FRONT_WALL),
        ((n, n, n, l, f, l, n, n), SpriteKind.FRONT_WALL),
        ((n, n, n, f, r, n, n, r), SpriteKind.FRONT_WALL),
        # Left walls
        ((n, l, n, n, n, n, l, n), SpriteKind.LEFT_WALL),
        ((n, l, n, n, n, n, l, b), SpriteKind.LEFT_WALL),
        ((n, l, n, n, n, n, l, f), SpriteKind.LEFT_WALL),
        ((n, l, b, n, n, n, l, n), SpriteKind.LEFT_WALL),
        ((n, l, f, n, n, n, l, n), SpriteKind.LEFT_WALL),
        # Right walls
        ((n, r, n, n, n, n, r, n), SpriteKind.RIGHT_WALL),
        ((n, r, n, n, n, b, r, n), SpriteKind.RIGHT_WALL),
        ((n, r, n, n, n, f, r, n), SpriteKind.RIGHT_WALL),
        ((b, r, n, n, n, n, r, n), SpriteKind.RIGHT_WALL),
        ((f, r, n, n, n, n, r, n), SpriteKind.RIGHT_WALL),
    ]

    table = dict(rows)
    assert len(table) == len(rows), "Duplicate wall pattern in table"
    return MappingProxyType(table)


WALL_CLASSIFICATION_TABLE = _build_classification_table()


def neighbor_bitmask(grid: np.ndarray, x: TileCoord, y: TileCoord) -> NeighborBitmask:
    """Return the ordered neighbor pattern around (x, y).

    Neighbors outside the grid count as "no wall".

    Args:
        grid: Wall grid of shape (width, height) holding WallType values.
        x: Tile column.
        y: Tile row.
    """
    width, height = grid.shape
    values: list[WallType | None] = []
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            values.append(_GRID_VALUE_TO_WALL[grid[nx, ny]])
        else:
            values.append(None)
    return tuple(values)  # type: ignore[return-value]


def classify_bitmask(bitmask: NeighborBitmask) -> SpriteKind:
    """Look up the wall sprite for a neighbor pattern, DOOR if unlisted."""
    return WALL_CLASSIFICATION_TABLE.get(bitmask, SpriteKind.DOOR)


def classify_walls(grid: np.ndarray) -> LevelMap:
    """Turn every wall tile of a carved grid into a wall or door sprite.

    Tiles are visited column by column. The grid is only read.

    Args:
        grid: Wall grid of shape (width, height) holding WallType values.

    Returns:
        One placement per wall tile.
    """
    placements: LevelMap = []
    xs, ys = np.nonzero(grid)
    for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
        kind = classify_bitmask(neighbor_bitmask(grid, x, y))
        placements.append(SpritePlacement(x, y, SpriteRequest(kind)))

    if logger.isEnabledFor(logging.DEBUG):
        counts = Counter(p.sprite.kind.name for p in placements)
        logger.debug(f"Classified {len(placements)} wall tiles: {dict(counts)}")
    return placements
