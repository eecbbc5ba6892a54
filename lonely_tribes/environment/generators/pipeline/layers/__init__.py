"""Generation layers for the pipeline level generator.

Each layer transforms the GenerationContext in a specific way:
- Wall layers: Carve room outlines and classify them into wall sprites
- Foliage layer: Scatter shrubbery and trees with coherent noise
- Player layer: Spawn the tribes on free tiles
"""

from .foliage import FoliageLayer
from .players import PlayerSpawnLayer
from .walls import RoomLayoutLayer, WallClassificationLayer

__all__ = [
    "FoliageLayer",
    "PlayerSpawnLayer",
    "RoomLayoutLayer",
    "WallClassificationLayer",
]
