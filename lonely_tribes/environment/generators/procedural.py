"""Procedural puzzle-level generation.

ProceduralGenerator is the entry point used by the game: one seed in, one
complete level out. Stages run strictly in order (walls, foliage, players)
and each one sees everything the previous stages placed.
"""

from __future__ import annotations

from lonely_tribes import config
from lonely_tribes.environment.sprites import LevelMap
from lonely_tribes.types import RandomSeed, TileCoord

from .base import BaseMapGenerator
from .pipeline import create_level_pipeline


class ProceduralGenerator(BaseMapGenerator):
    """Generates complete levels from a seed.

    The output is a pure function of (seed, width, height): generating the
    same seed twice gives the same placements.
    """

    def __init__(
        self,
        map_width: TileCoord = config.GRID_WIDTH,
        map_height: TileCoord = config.GRID_HEIGHT,
    ) -> None:
        """Initialize the generator.

        Raises:
            InvalidGridConfiguration: If rooms cannot fit the grid.
        """
        super().__init__(map_width, map_height)
        self._pipeline = create_level_pipeline(map_width, map_height)

    def generate(self, seed: RandomSeed) -> LevelMap:
        """Generate a level.

        Raises:
            LevelGenerationError: If any stage fails. No partial level is
                returned.
        """
        return self._pipeline.generate(seed)


def generate_level(
    seed: RandomSeed,
    width: TileCoord = config.GRID_WIDTH,
    height: TileCoord = config.GRID_HEIGHT,
) -> LevelMap:
    """Generate a level with the default configuration."""
    return ProceduralGenerator(width, height).generate(seed)
