from __future__ import annotations

from lonely_tribes.util.coordinates import Rect, is_valid_world_tile_pos


class TestRect:
    def test_far_corner_is_inclusive(self) -> None:
        room = Rect(2, 3, 4, 5)

        assert (room.x1, room.y1, room.x2, room.y2) == (2, 3, 6, 8)

    def test_from_bounds(self) -> None:
        room = Rect.from_bounds(1, 2, 10, 12)

        assert room.width == 9
        assert room.height == 10
        assert room == Rect(1, 2, 9, 10)
        assert hash(room) == hash(Rect(1, 2, 9, 10))


def test_is_valid_world_tile_pos() -> None:
    assert is_valid_world_tile_pos((0, 0), 10, 10)
    assert is_valid_world_tile_pos((9, 9), 10, 10)
    assert not is_valid_world_tile_pos((10, 0), 10, 10)
    assert not is_valid_world_tile_pos((0, -1), 10, 10)
