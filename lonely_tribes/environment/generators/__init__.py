"""Level generation for Lonely Tribes.

This package provides:
- ProceduralGenerator: seed -> complete level (walls, foliage, players)
- PipelineGenerator: Layered pipeline the procedural generator is built on

And the reusable wall classification:
- classify_walls: Wall grid -> wall and door sprites
- WALL_CLASSIFICATION_TABLE: The closed neighbor-pattern table
"""

from .base import (
    BaseMapGenerator,
    InvalidGridConfiguration,
    LevelGenerationError,
    NoFreeCellForSpawn,
)
from .pipeline import (
    FoliageLayer,
    GenerationContext,
    GenerationLayer,
    PipelineGenerator,
    PlayerSpawnLayer,
    RoomLayoutLayer,
    WallClassificationLayer,
    create_level_pipeline,
    create_pipeline,
)
from .procedural import ProceduralGenerator, generate_level
from .wall_classifier import (
    WALL_CLASSIFICATION_TABLE,
    classify_walls,
    neighbor_bitmask,
)

__all__ = [
    "WALL_CLASSIFICATION_TABLE",
    "BaseMapGenerator",
    "FoliageLayer",
    "GenerationContext",
    "GenerationLayer",
    "InvalidGridConfiguration",
    "LevelGenerationError",
    "NoFreeCellForSpawn",
    "PipelineGenerator",
    "PlayerSpawnLayer",
    "ProceduralGenerator",
    "RoomLayoutLayer",
    "WallClassificationLayer",
    "classify_walls",
    "create_level_pipeline",
    "create_pipeline",
    "generate_level",
    "neighbor_bitmask",
]
