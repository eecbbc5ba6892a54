"""Pipeline-based level generation system.

This package provides a layered architecture for level generation. Each
layer transforms a shared GenerationContext, and the pipeline returns the
accumulated sprite placements.

Example usage:
    from lonely_tribes.environment.generators.pipeline import create_pipeline

    generator = create_pipeline("level", width=64, height=64)
    level = generator.generate(seed=42)

The pipeline can also be assembled manually for custom configurations:
    from lonely_tribes.environment.generators.pipeline import (
        PipelineGenerator,
        RoomLayoutLayer,
        WallClassificationLayer,
    )

    generator = PipelineGenerator(
        layers=[RoomLayoutLayer(), WallClassificationLayer()],
        map_width=64,
        map_height=64,
    )
"""

from .context import GenerationContext
from .factory import create_level_pipeline, create_pipeline
from .layer import GenerationLayer
from .layers import (
    FoliageLayer,
    PlayerSpawnLayer,
    RoomLayoutLayer,
    WallClassificationLayer,
)
from .pipeline import PipelineGenerator

__all__ = [
    "FoliageLayer",
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "PlayerSpawnLayer",
    "RoomLayoutLayer",
    "WallClassificationLayer",
    "create_level_pipeline",
    "create_pipeline",
]
