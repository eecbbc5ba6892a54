from __future__ import annotations

import pytest

from lonely_tribes.environment.sprites import (
    FOLIAGE_KINDS,
    WALL_KINDS,
    SpriteKind,
    SpritePlacement,
    SpriteRequest,
    blocked_tiles,
    door_tiles,
)


class TestSpriteRequest:
    def test_player_carries_group(self) -> None:
        sprite = SpriteRequest.player(2)

        assert sprite.kind is SpriteKind.PLAYER
        assert sprite.group == 2
        assert repr(sprite) == "Player(2)"

    def test_player_without_group_rejected(self) -> None:
        with pytest.raises(ValueError):
            SpriteRequest(SpriteKind.PLAYER)

    def test_group_on_non_player_rejected(self) -> None:
        with pytest.raises(ValueError):
            SpriteRequest(SpriteKind.TREE, group=1)

    def test_requests_are_hashable_values(self) -> None:
        assert SpriteRequest(SpriteKind.DOOR) == SpriteRequest(SpriteKind.DOOR)
        assert len({SpriteRequest.player(0), SpriteRequest.player(0)}) == 1
        assert SpriteRequest.player(0) != SpriteRequest.player(1)

    def test_categories(self) -> None:
        assert len(WALL_KINDS) == 8
        assert len(FOLIAGE_KINDS) == 4
        assert SpriteRequest(SpriteKind.BACK_WALL_LEFT_CORNER).is_wall
        assert SpriteRequest(SpriteKind.WARPED_TREE).is_foliage
        assert not SpriteRequest(SpriteKind.DOOR).is_wall

    @pytest.mark.parametrize(
        ("kind", "blocking"),
        [
            (SpriteKind.BLANK, False),
            (SpriteKind.DOOR, False),
            (SpriteKind.FRONT_WALL, True),
            (SpriteKind.SHRUBBERY, True),
            (SpriteKind.TREE, True),
        ],
    )
    def test_is_blocking(self, kind: SpriteKind, blocking: bool) -> None:
        assert SpriteRequest(kind).is_blocking is blocking


def test_blocked_and_door_tiles() -> None:
    placements = [
        SpritePlacement(0, 0, SpriteRequest(SpriteKind.BACK_WALL)),
        SpritePlacement(1, 0, SpriteRequest(SpriteKind.DOOR)),
        SpritePlacement(1, 0, SpriteRequest(SpriteKind.TREE)),
        SpritePlacement(2, 0, SpriteRequest(SpriteKind.BLANK)),
        SpritePlacement(3, 3, SpriteRequest.player(0)),
    ]

    assert blocked_tiles(placements) == {(0, 0), (1, 0), (3, 3)}
    assert door_tiles(placements) == {(1, 0)}
