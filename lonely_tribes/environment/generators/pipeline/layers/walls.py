"""Wall generation layers.

These layers build the level's wall geometry:
- RoomLayoutLayer: Carves the outlines of randomly placed rooms into the
  wall grid, recording which edge of a room every wall tile belongs to
- WallClassificationLayer: Turns the carved outlines into wall sprites by
  neighbor-pattern lookup, leaving doors wherever the pattern breaks

Rooms are not checked for overlap. A later room overwrites the edge marks of
any earlier room it crosses, which is what opens doors between rooms.
"""

from __future__ import annotations

import logging

import numpy as np

from lonely_tribes import config
from lonely_tribes.environment.generators.base import InvalidGridConfiguration
from lonely_tribes.environment.generators.pipeline.context import GenerationContext
from lonely_tribes.environment.generators.pipeline.layer import GenerationLayer
from lonely_tribes.environment.generators.wall_classifier import classify_walls
from lonely_tribes.environment.sprites import NO_WALL, WallType
from lonely_tribes.util.coordinates import Rect
from lonely_tribes.util.rng import RNG

logger = logging.getLogger(__name__)


def mark_room_walls(walls: np.ndarray, room: Rect) -> None:
    """Write the outline of a room into a wall grid.

    The top and bottom rows are written first, then the side columns, so the
    four corner tiles end up LEFT or RIGHT.

    Args:
        walls: Wall grid of shape (width, height), modified in place.
        room: Room bounds; both corners lie on the outline.
    """
    walls[room.x1 : room.x2 + 1, room.y1] = WallType.BACK
    walls[room.x1 : room.x2 + 1, room.y2] = WallType.FRONT
    walls[room.x1, room.y1 : room.y2 + 1] = WallType.LEFT
    walls[room.x2, room.y1 : room.y2 + 1] = WallType.RIGHT


def carve_walls(width: int, height: int, rooms: list[Rect]) -> np.ndarray:
    """Create a wall grid holding the outlines of the given rooms, in order.

    Args:
        width: Grid width in tiles.
        height: Grid height in tiles.
        rooms: Rooms to carve. Later rooms overwrite earlier ones.

    Returns:
        A (width, height) uint8 array of WallType values.
    """
    walls = np.full((width, height), NO_WALL, dtype=np.uint8, order="F")
    for room in rooms:
        mark_room_walls(walls, room)
    return walls


class RoomLayoutLayer(GenerationLayer):
    """Carves a handful of rectangular room outlines into the wall grid.

    Room positions are drawn so that every room, including its far walls,
    fits inside the grid. The grid must therefore be strictly larger than
    the maximum room size in both directions.
    """

    def __init__(
        self,
        room_count_min: int = config.ROOM_COUNT_MIN,
        room_count_max: int = config.ROOM_COUNT_MAX,
        room_min_size: int = config.ROOM_MIN_SIZE,
        room_max_width: int = config.ROOM_MAX_WIDTH,
        room_max_height: int = config.ROOM_MAX_HEIGHT,
    ) -> None:
        """Initialize the room layout layer.

        Args:
            room_count_min: Minimum number of rooms (inclusive).
            room_count_max: Maximum number of rooms (inclusive).
            room_min_size: Minimum room width and height (inclusive).
            room_max_width: Maximum room width (exclusive).
            room_max_height: Maximum room height (exclusive).
        """
        if not 1 <= room_count_min <= room_count_max:
            raise InvalidGridConfiguration(
                f"Invalid room count range [{room_count_min}, {room_count_max}]"
            )
        if room_min_size >= min(room_max_width, room_max_height):
            raise InvalidGridConfiguration(
                f"Minimum room size {room_min_size} must be below the maximum "
                f"room size {room_max_width}x{room_max_height}"
            )
        self.room_count_min = room_count_min
        self.room_count_max = room_count_max
        self.room_min_size = room_min_size
        self.room_max_width = room_max_width
        self.room_max_height = room_max_height

    def check_grid(self, width: int, height: int) -> None:
        """Raise InvalidGridConfiguration if rooms cannot fit the grid."""
        if width <= self.room_max_width or height <= self.room_max_height:
            raise InvalidGridConfiguration(
                f"Grid {width}x{height} must be larger than the maximum room "
                f"size {self.room_max_width}x{self.room_max_height}"
            )

    def roll_rooms(self, rng: RNG, width: int, height: int) -> list[Rect]:
        """Draw the room rectangles for a grid.

        Args:
            rng: Random stream to draw from.
            width: Grid width in tiles.
            height: Grid height in tiles.

        Raises:
            InvalidGridConfiguration: If the grid is too small for the rooms.
        """
        self.check_grid(width, height)

        room_count = rng.randint(self.room_count_min, self.room_count_max)
        rooms: list[Rect] = []
        for _ in range(room_count):
            x = rng.randrange(0, width - self.room_max_width)
            y = rng.randrange(0, height - self.room_max_height)
            w = rng.randrange(self.room_min_size, self.room_max_width)
            h = rng.randrange(self.room_min_size, self.room_max_height)
            room = Rect(x, y, w, h)
            logger.debug(f"Making room {room}")
            rooms.append(room)
        return rooms

    def carve(self, rng: RNG, width: int, height: int) -> np.ndarray:
        """Draw rooms and return the wall grid holding their outlines."""
        rooms = self.roll_rooms(rng, width, height)
        logger.debug(f"Carved {len(rooms)} rooms")
        return carve_walls(width, height, rooms)

    def apply(self, ctx: GenerationContext) -> None:
        """Fill ctx.walls with freshly carved room outlines.

        Args:
            ctx: The generation context to modify.
        """
        ctx.walls[:] = self.carve(ctx.rng.get("map.rooms"), ctx.width, ctx.height)


class WallClassificationLayer(GenerationLayer):
    """Emits a wall or door sprite for every carved wall tile.

    Must run after RoomLayoutLayer: classification needs the complete grid.
    """

    def apply(self, ctx: GenerationContext) -> None:
        """Classify the wall grid and append the resulting placements.

        Args:
            ctx: The generation context to modify.
        """
        ctx.add_placements(classify_walls(ctx.walls))
