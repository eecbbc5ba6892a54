"""End-to-end properties of procedural level generation."""

from __future__ import annotations

from collections import Counter

import pytest

from lonely_tribes.environment.generators import (
    InvalidGridConfiguration,
    ProceduralGenerator,
    generate_level,
)
from lonely_tribes.environment.sprites import (
    LevelMap,
    SpriteKind,
    SpriteRequest,
    blocked_tiles,
)


def _players(level: LevelMap) -> LevelMap:
    return [p for p in level if p.sprite.kind is SpriteKind.PLAYER]


class TestSeed42:
    def test_has_walls_and_first_tribe(self, level_42: LevelMap) -> None:
        assert level_42
        assert any(p.sprite.is_wall for p in level_42)
        assert any(p.sprite == SpriteRequest.player(0) for p in level_42)

    def test_coordinates_in_bounds(self, level_42: LevelMap) -> None:
        for p in level_42:
            assert 0 <= p.x < 40
            assert 0 <= p.y < 40

    def test_stage_order(self, level_42: LevelMap) -> None:
        """Walls come first, then foliage, then players."""
        stages = []
        for p in level_42:
            if p.sprite.is_wall or p.sprite.kind is SpriteKind.DOOR:
                stage = 0
            elif p.sprite.is_foliage:
                stage = 1
            else:
                stage = 2
            stages.append(stage)

        assert stages == sorted(stages)

    def test_players_avoid_blocked_tiles(self, level_42: LevelMap) -> None:
        before_spawn = [p for p in level_42 if p.sprite.kind is not SpriteKind.PLAYER]
        blocked = blocked_tiles(before_spawn)
        positions = [p.pos for p in _players(level_42)]

        assert len(positions) == len(set(positions))
        assert not set(positions) & blocked


class TestDeterminism:
    @pytest.mark.parametrize("seed", [0, 1, 42, 1234, 2**31])
    def test_same_seed_same_level(self, seed: int) -> None:
        generator = ProceduralGenerator(48, 40)

        first = generator.generate(seed)
        second = generator.generate(seed)

        assert set(first) == set(second)
        assert Counter(first) == Counter(second)

    def test_independent_generators_agree(self) -> None:
        assert generate_level(77, 40, 40) == ProceduralGenerator(40, 40).generate(77)

    def test_different_seeds_differ(self) -> None:
        assert set(generate_level(1, 40, 40)) != set(generate_level(2, 40, 40))


class TestTribes:
    @pytest.mark.parametrize("seed", range(10))
    def test_group_sizes(self, seed: int) -> None:
        groups = Counter(p.sprite.group for p in _players(generate_level(seed, 40, 40)))

        assert 1 <= len(groups) <= 4
        for group, size in groups.items():
            offset = 4 - group
            assert 2 * offset <= size < 5 * offset


class TestConfiguration:
    def test_default_size(self) -> None:
        generator = ProceduralGenerator()

        assert (generator.map_width, generator.map_height) == (64, 64)

    @pytest.mark.parametrize(("width", "height"), [(20, 64), (64, 20), (5, 5)])
    def test_grid_too_small(self, width: int, height: int) -> None:
        with pytest.raises(InvalidGridConfiguration):
            ProceduralGenerator(width, height)

    def test_non_square_grid(self) -> None:
        level = generate_level(5, width=80, height=30)

        assert all(0 <= p.x < 80 and 0 <= p.y < 30 for p in level)
