"""Foliage layer for scattering shrubbery and trees.

Three coherent noise fields (fBm simplex noise) are laid over the level:
- The light field decides where Shrubbery and Trees grow
- The dark field decides where DarkShrubbery and WarpedTrees grow, and
  which variant overgrows a door
- The override field decides where a tree may grow on top of a blocked
  tile (a wall)

Every tile is evaluated on its own, so the work is split per column and run
on a thread pool. Each column only reads its own coordinates, the noise
fields and frozen snapshots of the blocked/door tiles; the columns are merged
in order once all of them are done.

A tile can receive several foliage entries, one per check that fires. They
are all kept and the consumer decides how to layer them.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Set
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np
import tcod.noise

from lonely_tribes import config
from lonely_tribes.environment.generators.pipeline.context import GenerationContext
from lonely_tribes.environment.generators.pipeline.layer import GenerationLayer
from lonely_tribes.environment.sprites import (
    LevelMap,
    SpriteKind,
    SpritePlacement,
    SpriteRequest,
)
from lonely_tribes.types import RandomSeed, TileCoord, WorldTilePos

logger = logging.getLogger(__name__)

LIGHT_VARIANTS = (SpriteKind.SHRUBBERY, SpriteKind.TREE)
DARK_VARIANTS = (SpriteKind.DARK_SHRUBBERY, SpriteKind.WARPED_TREE)


@dataclass(frozen=True)
class FoliageFields:
    """The three noise fields of one level."""

    light: tcod.noise.Noise
    dark: tcod.noise.Noise
    override: tcod.noise.Noise


class FoliageLayer(GenerationLayer):
    """Scatters foliage over the level using layered coherent noise.

    Per tile, up to three independent checks may each add an entry:
    1. Door tiles are overgrown. The dark field picks the variant (dark if
       positive) and its amplified magnitude picks tree or shrub.
    2. Positive light-field values grow light foliage.
    3. Positive dark-field values grow dark foliage.

    A value above tree_threshold grows a tree and a value above
    shrubbery_threshold grows a shrub. Trees never grow on blocked tiles,
    unless the override field is above override_threshold there, in which
    case checks 2 and 3 always grow a tree.
    """

    def __init__(
        self,
        scale: float = config.PERLIN_SCALE,
        tree_threshold: float = config.TREE_THRESHOLD,
        shrubbery_threshold: float = config.SHRUBBERY_THRESHOLD,
        override_threshold: float | None = config.OVERRIDE_WALL_THRESHOLD,
        door_modifier: float = config.DOOR_REPLACER_MODIFIER,
        octaves: int = config.FOLIAGE_NOISE_OCTAVES,
        max_workers: int | None = config.FOLIAGE_MAX_WORKERS,
    ) -> None:
        """Initialize the foliage layer.

        Args:
            scale: Tile coordinates are divided by this before sampling noise.
            tree_threshold: Noise value above which a tree grows.
            shrubbery_threshold: Noise value above which a shrub grows.
            override_threshold: Override-field value above which trees may
                grow on blocked tiles. None never lets them.
            door_modifier: Multiplier applied to the noise on door tiles.
            octaves: Number of fBm octaves per field.
            max_workers: Thread pool size for the per-column pass.
        """
        if scale <= 0:
            raise ValueError(f"Noise scale must be positive, got {scale}")
        self.scale = scale
        self.tree_threshold = tree_threshold
        self.shrubbery_threshold = shrubbery_threshold
        self.override_threshold = override_threshold
        self.door_modifier = door_modifier
        self.octaves = octaves
        self.max_workers = max_workers

    def _make_field(self, seed: int) -> tcod.noise.Noise:
        return tcod.noise.Noise(
            dimensions=2,
            algorithm=tcod.noise.Algorithm.SIMPLEX,
            implementation=tcod.noise.Implementation.FBM,
            hurst=config.FOLIAGE_NOISE_HURST,
            lacunarity=config.FOLIAGE_NOISE_LACUNARITY,
            octaves=self.octaves,
            seed=seed,
        )

    def create_fields(self, seed: RandomSeed) -> FoliageFields:
        """Create the light, dark and override fields for a level seed."""
        return FoliageFields(
            light=self._make_field(seed),
            dark=self._make_field(seed + config.FOLIAGE_SECOND_FIELD_SEED_OFFSET),
            override=self._make_field(
                seed // config.FOLIAGE_OVERRIDE_FIELD_SEED_DIVISOR
            ),
        )

    def sample_column(
        self, field: tcod.noise.Noise, x: TileCoord, height: int
    ) -> list[float]:
        """Sample a noise field at every row of column x."""
        xs = np.full(height, x / self.scale, dtype=np.float32)
        ys = np.arange(height, dtype=np.float32) / np.float32(self.scale)
        return field[xs, ys].tolist()

    def _choose(
        self,
        variants: tuple[SpriteKind, SpriteKind],
        value: float,
        blocked: bool,
        can_override: bool,
    ) -> SpriteKind | None:
        shrub, tree = variants
        if blocked and can_override:
            return tree
        if value > self.tree_threshold:
            return None if blocked else tree
        if value > self.shrubbery_threshold:
            return shrub
        return None

    def _scatter_column(
        self,
        fields: FoliageFields,
        x: TileCoord,
        height: int,
        blocked: Set[WorldTilePos],
        doors: Set[WorldTilePos],
    ) -> LevelMap:
        light = self.sample_column(fields.light, x, height)
        dark = self.sample_column(fields.dark, x, height)
        override = self.sample_column(fields.override, x, height)

        placements: LevelMap = []
        for y in range(height):
            pos = (x, y)
            is_blocked = pos in blocked
            can_override = (
                self.override_threshold is not None
                and override[y] > self.override_threshold
            )
            choices: list[SpriteKind | None] = []

            if pos in doors:
                variants = (
                    DARK_VARIANTS
                    if dark[y] > self.shrubbery_threshold
                    else LIGHT_VARIANTS
                )
                # Door tiles are never blocked, so no override here.
                choices.append(
                    self._choose(
                        variants, abs(dark[y]) * self.door_modifier, is_blocked, False
                    )
                )
            if light[y] > 0.0:
                choices.append(
                    self._choose(LIGHT_VARIANTS, light[y], is_blocked, can_override)
                )
            if dark[y] > 0.0:
                choices.append(
                    self._choose(DARK_VARIANTS, dark[y], is_blocked, can_override)
                )

            placements.extend(
                SpritePlacement(x, y, SpriteRequest(kind))
                for kind in choices
                if kind is not None
            )
        return placements

    def scatter(
        self,
        seed: RandomSeed,
        blocked: Set[WorldTilePos],
        doors: Set[WorldTilePos],
        width: int,
        height: int,
    ) -> LevelMap:
        """Compute the foliage placements for a level.

        Args:
            seed: Level seed; the noise fields are derived from it.
            blocked: Tiles already occupied by blocking sprites.
            doors: Door tiles, which get overgrown.
            width: Level width in tiles.
            height: Level height in tiles.

        Returns:
            New placements only. Several may share a tile.
        """
        fields = self.create_fields(seed)
        blocked = frozenset(blocked)
        doors = frozenset(doors)

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="foliage"
        ) as executor:
            columns = executor.map(
                lambda x: self._scatter_column(fields, x, height, blocked, doors),
                range(width),
            )
            placements = [p for column in columns for p in column]

        if logger.isEnabledFor(logging.DEBUG):
            counts = Counter(p.sprite.kind.name for p in placements)
            logger.debug(f"Scattered foliage: {dict(counts)}")
        return placements

    def apply(self, ctx: GenerationContext) -> None:
        """Add foliage placements to the context.

        Args:
            ctx: The generation context to modify.
        """
        ctx.add_placements(
            self.scatter(
                ctx.seed,
                ctx.blocked_tiles(),
                ctx.door_tiles(),
                ctx.width,
                ctx.height,
            )
        )
