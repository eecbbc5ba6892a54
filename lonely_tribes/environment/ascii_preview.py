"""Plain-text preview of a generated level, for debugging and the CLI."""

from __future__ import annotations

from collections.abc import Iterable

from lonely_tribes.environment.sprites import SpriteKind, SpritePlacement

FLOOR_GLYPH = "."

SPRITE_GLYPHS: dict[SpriteKind, str] = {
    SpriteKind.BLANK: FLOOR_GLYPH,
    SpriteKind.DOOR: "+",
    SpriteKind.BACK_WALL: "-",
    SpriteKind.FRONT_WALL: "=",
    SpriteKind.LEFT_WALL: "[",
    SpriteKind.RIGHT_WALL: "]",
    SpriteKind.BACK_WALL_LEFT_CORNER: "/",
    SpriteKind.BACK_WALL_RIGHT_CORNER: "\\",
    SpriteKind.FRONT_WALL_LEFT_CORNER: "L",
    SpriteKind.FRONT_WALL_RIGHT_CORNER: "J",
    SpriteKind.SHRUBBERY: '"',
    SpriteKind.DARK_SHRUBBERY: ";",
    SpriteKind.TREE: "T",
    SpriteKind.WARPED_TREE: "Y",
}


def render_ascii(
    placements: Iterable[SpritePlacement], width: int, height: int
) -> str:
    """Render placements as one line of glyphs per row.

    Row 0 is printed first. When several placements share a tile the last
    one wins. Players are drawn as their group id.
    """
    rows = [[FLOOR_GLYPH] * width for _ in range(height)]
    for p in placements:
        if p.sprite.kind is SpriteKind.PLAYER:
            glyph = str(p.sprite.group)
        else:
            glyph = SPRITE_GLYPHS[p.sprite.kind]
        rows[p.y][p.x] = glyph
    return "\n".join("".join(row) for row in rows)
