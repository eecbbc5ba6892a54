"""Generation context for the pipeline level generator.

The GenerationContext is a mutable container that holds all state during
level generation. Each layer in the pipeline receives the same context and
modifies it in place: the room layer writes the wall grid, later layers only
append sprite placements.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from lonely_tribes.environment.sprites import (
    NO_WALL,
    LevelMap,
    SpritePlacement,
    blocked_tiles,
    door_tiles,
)
from lonely_tribes.types import RandomSeed, WorldTilePos
from lonely_tribes.util.rng import RNGProvider


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        width: Level width in tiles.
        height: Level height in tiles.
        seed: Seed of this generation run.
        walls: 2D numpy array of WallType values (NO_WALL for no wall).
            Shape: (width, height).
        placements: Accumulated sprite placements. Layers only append.
        rng: Per-run provider of named random streams.
    """

    width: int
    height: int
    seed: RandomSeed
    walls: np.ndarray
    rng: RNGProvider
    placements: LevelMap = field(default_factory=list)

    @classmethod
    def create_empty(cls, width: int, height: int, seed: RandomSeed) -> GenerationContext:
        """Create an empty generation context.

        Args:
            width: Level width in tiles.
            height: Level height in tiles.
            seed: Seed for deterministic generation.

        Returns:
            A new GenerationContext ready for layer processing.
        """
        walls = np.full(
            (width, height),
            fill_value=NO_WALL,
            dtype=np.uint8,
            order="F",
        )

        return cls(
            width=width,
            height=height,
            seed=seed,
            walls=walls,
            rng=RNGProvider(seed),
            placements=[],
        )

    def add_placements(self, placements: list[SpritePlacement]) -> None:
        """Append placements produced by a layer."""
        self.placements.extend(placements)

    def blocked_tiles(self) -> frozenset[WorldTilePos]:
        """Snapshot of tiles occupied by blocking sprites so far."""
        return blocked_tiles(self.placements)

    def door_tiles(self) -> frozenset[WorldTilePos]:
        """Snapshot of wall openings placed so far."""
        return door_tiles(self.placements)
