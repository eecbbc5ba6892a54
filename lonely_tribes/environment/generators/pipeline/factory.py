"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to manually assemble layers.
"""

from __future__ import annotations

from .layers import (
    FoliageLayer,
    PlayerSpawnLayer,
    RoomLayoutLayer,
    WallClassificationLayer,
)
from .pipeline import PipelineGenerator


def create_pipeline(name: str, width: int, height: int) -> PipelineGenerator:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "level": Rooms, foliage and players (the full puzzle level)
    - "walls": Rooms and wall sprites only

    Args:
        name: Name of the pipeline configuration to use.
        width: Level width in tiles.
        height: Level height in tiles.

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "level":
        return create_level_pipeline(width, height)
    if name == "walls":
        return PipelineGenerator(
            layers=[RoomLayoutLayer(), WallClassificationLayer()],
            map_width=width,
            map_height=height,
        )
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_level_pipeline(
    width: int,
    height: int,
    room_layer: RoomLayoutLayer | None = None,
    foliage_layer: FoliageLayer | None = None,
    player_layer: PlayerSpawnLayer | None = None,
) -> PipelineGenerator:
    """Create the full level pipeline.

    The level pipeline generates:
    1. Room outlines in the wall grid (RoomLayoutLayer)
    2. Wall and door sprites from the outlines (WallClassificationLayer)
    3. Shrubbery and trees, overgrowing doors (FoliageLayer)
    4. Tribes of players on free tiles (PlayerSpawnLayer)

    Args:
        width: Level width in tiles.
        height: Level height in tiles.
        room_layer: Replacement for the default room layer.
        foliage_layer: Replacement for the default foliage layer.
        player_layer: Replacement for the default player layer.
    """
    room_layer = room_layer if room_layer is not None else RoomLayoutLayer()
    # Fail at construction rather than on the first generate() call.
    room_layer.check_grid(width, height)

    layers = [
        room_layer,
        WallClassificationLayer(),
        foliage_layer if foliage_layer is not None else FoliageLayer(),
        player_layer if player_layer is not None else PlayerSpawnLayer(),
    ]

    return PipelineGenerator(layers=layers, map_width=width, map_height=height)
