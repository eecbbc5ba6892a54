"""Pipeline generator that orchestrates layer-based level generation.

The PipelineGenerator runs a sequence of GenerationLayers, each transforming
a shared GenerationContext. Each layer focuses on one aspect of the level and
sees everything the earlier layers produced.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from lonely_tribes.environment.generators.base import BaseMapGenerator
from lonely_tribes.environment.sprites import LevelMap
from lonely_tribes.types import RandomSeed, TileCoord

from .context import GenerationContext

if TYPE_CHECKING:
    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineGenerator(BaseMapGenerator):
    """Level generator that runs layers sequentially on a shared context.

    The pipeline creates an empty GenerationContext for every call to
    generate() and passes it through each layer in order. Nothing is kept
    between calls, so the same seed always gives the same level.

    Example:
        generator = PipelineGenerator(
            layers=[
                RoomLayoutLayer(),
                WallClassificationLayer(),
                FoliageLayer(),
                PlayerSpawnLayer(),
            ],
            map_width=64,
            map_height=64,
        )
        level = generator.generate(seed=12345)

    Attributes:
        layers: List of GenerationLayer instances to apply.
    """

    def __init__(
        self,
        layers: list[GenerationLayer],
        map_width: TileCoord,
        map_height: TileCoord,
    ) -> None:
        """Initialize the pipeline generator.

        Args:
            layers: List of GenerationLayer instances to apply in order.
            map_width: Width of the level in tiles.
            map_height: Height of the level in tiles.
        """
        super().__init__(map_width, map_height)
        self.layers = layers

    def generate(self, seed: RandomSeed) -> LevelMap:
        """Generate a level by running all layers in sequence.

        Args:
            seed: Seed for deterministic generation.

        Returns:
            Every placement accumulated by the layers.

        Raises:
            LevelGenerationError: The first failure of any layer.
        """
        ctx = GenerationContext.create_empty(
            width=self.map_width,
            height=self.map_height,
            seed=seed,
        )

        start = time.perf_counter()
        for layer in self.layers:
            before = len(ctx.placements)
            layer.apply(ctx)
            logger.debug(
                f"{type(layer).__name__} added {len(ctx.placements) - before} "
                f"placements"
            )

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info(
            f"Generated {self.map_width}x{self.map_height} level for seed {seed}: "
            f"{len(ctx.placements)} placements in {elapsed_ms:.1f} ms"
        )
        return ctx.placements
