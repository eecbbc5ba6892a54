"""Tests for the pipeline infrastructure.

Covers:
- GenerationContext
- PipelineGenerator
- Pipeline factories
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np
import pytest

from lonely_tribes.environment.generators import (
    FoliageLayer,
    GenerationContext,
    GenerationLayer,
    InvalidGridConfiguration,
    LevelGenerationError,
    PipelineGenerator,
    PlayerSpawnLayer,
    RoomLayoutLayer,
    WallClassificationLayer,
    create_level_pipeline,
    create_pipeline,
)
from lonely_tribes.environment.sprites import (
    NO_WALL,
    SpriteKind,
    SpritePlacement,
    SpriteRequest,
)

# =============================================================================
# GenerationContext
# =============================================================================


class TestGenerationContext:
    """Tests for GenerationContext dataclass."""

    def test_create_empty_initializes_walls(self) -> None:
        ctx = GenerationContext.create_empty(width=40, height=30, seed=1)

        assert ctx.walls.shape == (40, 30)
        assert ctx.walls.dtype == np.uint8
        assert np.all(ctx.walls == NO_WALL)
        assert ctx.placements == []
        assert ctx.rng.master_seed == 1

    def test_blocked_and_door_snapshots(self) -> None:
        ctx = GenerationContext.create_empty(width=10, height=10, seed=1)
        ctx.add_placements(
            [
                SpritePlacement(1, 1, SpriteRequest(SpriteKind.LEFT_WALL)),
                SpritePlacement(2, 1, SpriteRequest(SpriteKind.DOOR)),
                SpritePlacement(3, 3, SpriteRequest(SpriteKind.SHRUBBERY)),
            ]
        )

        assert ctx.blocked_tiles() == {(1, 1), (3, 3)}
        assert ctx.door_tiles() == {(2, 1)}


# =============================================================================
# PipelineGenerator
# =============================================================================


class RecordingLayer(GenerationLayer):
    """Test layer that records when it was applied."""

    call_order: ClassVar[list[str]] = []

    def __init__(self, name: str) -> None:
        self.name = name

    def apply(self, ctx: GenerationContext) -> None:
        RecordingLayer.call_order.append(self.name)
        ctx.add_placements(
            [SpritePlacement(0, 0, SpriteRequest(SpriteKind.BLANK))]
        )


class SnapshotLayer(GenerationLayer):
    """Test layer that remembers what earlier layers produced."""

    def __init__(self) -> None:
        self.seen: list[SpritePlacement] = []

    def apply(self, ctx: GenerationContext) -> None:
        self.seen = list(ctx.placements)


class FailingLayer(GenerationLayer):
    def apply(self, ctx: GenerationContext) -> None:
        raise LevelGenerationError("boom")


class TestPipelineGenerator:
    """Tests for PipelineGenerator."""

    def test_layers_applied_in_order(self) -> None:
        RecordingLayer.call_order = []
        generator = PipelineGenerator(
            layers=[RecordingLayer("a"), RecordingLayer("b"), RecordingLayer("c")],
            map_width=10,
            map_height=10,
        )

        level = generator.generate(seed=1)

        assert RecordingLayer.call_order == ["a", "b", "c"]
        assert len(level) == 3

    def test_fresh_context_per_call(self) -> None:
        generator = PipelineGenerator(
            layers=[RecordingLayer("a")], map_width=10, map_height=10
        )

        assert len(generator.generate(seed=1)) == 1
        assert len(generator.generate(seed=1)) == 1

    def test_later_layers_see_earlier_output(self) -> None:
        snapshot = SnapshotLayer()
        generator = PipelineGenerator(
            layers=[RoomLayoutLayer(), WallClassificationLayer(), snapshot],
            map_width=40,
            map_height=40,
        )

        level = generator.generate(seed=8)

        assert snapshot.seen == level
        assert snapshot.seen

    def test_output_only_grows(self) -> None:
        walls_only = create_pipeline("walls", 40, 40).generate(seed=12)
        full = create_level_pipeline(40, 40).generate(seed=12)

        assert full[: len(walls_only)] == walls_only
        assert len(full) > len(walls_only)

    def test_layer_failure_propagates(self) -> None:
        generator = PipelineGenerator(
            layers=[RecordingLayer("a"), FailingLayer()], map_width=10, map_height=10
        )

        with pytest.raises(LevelGenerationError, match="boom"):
            generator.generate(seed=1)

    def test_non_positive_size_rejected(self) -> None:
        with pytest.raises(InvalidGridConfiguration):
            PipelineGenerator(layers=[], map_width=0, map_height=10)


# =============================================================================
# Factories
# =============================================================================


class TestFactories:
    def test_level_pipeline_layers(self) -> None:
        generator = create_pipeline("level", 40, 40)

        assert [type(layer) for layer in generator.layers] == [
            RoomLayoutLayer,
            WallClassificationLayer,
            FoliageLayer,
            PlayerSpawnLayer,
        ]

    def test_custom_layers_are_used(self) -> None:
        players = PlayerSpawnLayer(groups_min=1, groups_max=1)

        generator = create_level_pipeline(40, 40, player_layer=players)

        assert generator.layers[-1] is players

    def test_walls_pipeline_only_emits_walls_and_doors(self) -> None:
        level = create_pipeline("walls", 40, 40).generate(seed=3)

        assert level
        assert all(
            p.sprite.is_wall or p.sprite.kind is SpriteKind.DOOR for p in level
        )

    def test_small_grid_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidGridConfiguration):
            create_level_pipeline(20, 40)

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown pipeline name"):
            create_pipeline("dungeon", 40, 40)
