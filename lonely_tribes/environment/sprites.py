"""
Sprite requests produced by level generation.

This module defines:
- `WallType`: which edge of a carved room a wall tile belongs to. Wall grids
  store these as small integers in a NumPy array, with `NO_WALL` (0) for
  tiles that are not on a room edge.
- `SpriteKind` / `SpriteRequest`: what occupies a tile (a wall variant, a
  door, foliage or a player of some tribe). Consumers outside the generator
  turn these into renderable and collidable entities.
- `SpritePlacement` and `LevelMap`: the generator's output, an unordered list
  of (x, y, sprite) entries. Several entries may target the same tile.
- Helpers to derive the blocked and door tile sets from a `LevelMap`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, IntEnum, auto

from lonely_tribes.types import PlayerGroupId, TileCoord, WorldTilePos

# Value stored in a wall grid for tiles that are not part of any room edge.
NO_WALL = 0


class WallType(IntEnum):
    """Which edge of a carved room a tile represents."""

    BACK = 1
    FRONT = auto()
    LEFT = auto()
    RIGHT = auto()


class SpriteKind(Enum):
    """Closed set of things that can occupy a level tile."""

    BLANK = auto()
    DOOR = auto()
    BACK_WALL = auto()
    FRONT_WALL = auto()
    LEFT_WALL = auto()
    RIGHT_WALL = auto()
    BACK_WALL_LEFT_CORNER = auto()
    BACK_WALL_RIGHT_CORNER = auto()
    FRONT_WALL_LEFT_CORNER = auto()
    FRONT_WALL_RIGHT_CORNER = auto()
    SHRUBBERY = auto()
    DARK_SHRUBBERY = auto()
    TREE = auto()
    WARPED_TREE = auto()
    PLAYER = auto()


WALL_KINDS = frozenset(
    {
        SpriteKind.BACK_WALL,
        SpriteKind.FRONT_WALL,
        SpriteKind.LEFT_WALL,
        SpriteKind.RIGHT_WALL,
        SpriteKind.BACK_WALL_LEFT_CORNER,
        SpriteKind.BACK_WALL_RIGHT_CORNER,
        SpriteKind.FRONT_WALL_LEFT_CORNER,
        SpriteKind.FRONT_WALL_RIGHT_CORNER,
    }
)

FOLIAGE_KINDS = frozenset(
    {
        SpriteKind.SHRUBBERY,
        SpriteKind.DARK_SHRUBBERY,
        SpriteKind.TREE,
        SpriteKind.WARPED_TREE,
    }
)

TREE_KINDS = frozenset({SpriteKind.TREE, SpriteKind.WARPED_TREE})

# Kinds that can be walked through. Everything else blocks the tile.
PASSABLE_KINDS = frozenset({SpriteKind.BLANK, SpriteKind.DOOR})


@dataclass(frozen=True, slots=True)
class SpriteRequest:
    """What should be drawn on a tile.

    Attributes:
        kind: The sprite variant.
        group: Tribe identifier, set only for PLAYER sprites.
    """

    kind: SpriteKind
    group: PlayerGroupId | None = None

    def __post_init__(self) -> None:
        if self.kind is SpriteKind.PLAYER:
            if self.group is None or self.group < 0:
                raise ValueError(f"Player sprites need a group id, got {self.group}")
        elif self.group is not None:
            raise ValueError(f"{self.kind.name} sprites cannot carry a group id")

    @classmethod
    def player(cls, group: PlayerGroupId) -> SpriteRequest:
        return cls(SpriteKind.PLAYER, group)

    @property
    def is_wall(self) -> bool:
        return self.kind in WALL_KINDS

    @property
    def is_foliage(self) -> bool:
        return self.kind in FOLIAGE_KINDS

    @property
    def is_blocking(self) -> bool:
        """True if nothing else may be spawned on this tile."""
        return self.kind not in PASSABLE_KINDS

    def __repr__(self) -> str:
        if self.kind is SpriteKind.PLAYER:
            return f"Player({self.group})"
        return self.kind.name


@dataclass(frozen=True, slots=True)
class SpritePlacement:
    """A single (x, y, sprite) entry of a generated level."""

    x: TileCoord
    y: TileCoord
    sprite: SpriteRequest

    @property
    def pos(self) -> WorldTilePos:
        return (self.x, self.y)


# Generator output. Order is not significant; tiles without an entry are floor.
type LevelMap = list[SpritePlacement]


def blocked_tiles(placements: Iterable[SpritePlacement]) -> frozenset[WorldTilePos]:
    """Return the positions occupied by a blocking sprite."""
    return frozenset(p.pos for p in placements if p.sprite.is_blocking)


def door_tiles(placements: Iterable[SpritePlacement]) -> frozenset[WorldTilePos]:
    """Return the positions of wall openings."""
    return frozenset(p.pos for p in placements if p.sprite.kind is SpriteKind.DOOR)
