"""Rectangles and bounds checks in tile coordinates."""

from __future__ import annotations

from lonely_tribes.types import TileCoord, WorldTilePos


class Rect:
    """Rectangle/bounding box in tile coordinates.

    Both corners are part of the rectangle: a room Rect(2, 3, 4, 5) has its
    walls on columns 2 and 6 and rows 3 and 8.
    """

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @classmethod
    def from_bounds(
        cls, x1: TileCoord, y1: TileCoord, x2: TileCoord, y2: TileCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, y1, x2, y2)."""
        width = x2 - x1
        height = y2 - y1
        return cls(x1, y1, width, height)

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_valid_world_tile_pos(
    pos: WorldTilePos, map_width: TileCoord, map_height: TileCoord
) -> bool:
    """Check if world tile position is within map bounds."""
    x, y = pos
    return 0 <= x < map_width and 0 <= y < map_height
