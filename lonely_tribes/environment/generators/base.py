"""Base classes for level generation."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lonely_tribes.environment.sprites import LevelMap
    from lonely_tribes.types import PlayerGroupId, RandomSeed, TileCoord


class LevelGenerationError(Exception):
    """Base class for failures that abort a generation run.

    The generator never retries on its own; callers decide whether to try
    another seed or give up on loading the level.
    """


class InvalidGridConfiguration(LevelGenerationError, ValueError):
    """Raised when the grid cannot hold the configured rooms."""


class NoFreeCellForSpawn(LevelGenerationError):
    """Raised when a player could not be placed on a free tile.

    Attributes:
        group: Tribe of the player that could not be placed.
        attempts: Number of rejected samples before giving up.
        free_tiles: Number of free tiles in the level, when the run gave up
            because every one of them was already taken.
    """

    def __init__(
        self,
        group: PlayerGroupId,
        attempts: int,
        free_tiles: int | None = None,
    ) -> None:
        if free_tiles is not None:
            message = (
                f"No free tile left for a player of group {group}: "
                f"all {free_tiles} free tiles are taken"
            )
        else:
            message = (
                f"No free tile found for a player of group {group} "
                f"after {attempts} attempts"
            )
        super().__init__(message)
        self.group = group
        self.attempts = attempts
        self.free_tiles = free_tiles


class BaseMapGenerator(abc.ABC):
    """Abstract base class for level generation algorithms."""

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        if map_width <= 0 or map_height <= 0:
            raise InvalidGridConfiguration(
                f"Grid size must be positive, got {map_width}x{map_height}"
            )
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self, seed: RandomSeed) -> LevelMap:
        """Generate the sprite layout of a level."""
        raise NotImplementedError
