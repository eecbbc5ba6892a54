"""Player spawn layer.

Places the tribes of players on free tiles. Runs last, so every wall and
foliage tile is already known and can be avoided.
"""

from __future__ import annotations

import logging
from collections.abc import Set

from lonely_tribes import config
from lonely_tribes.environment.generators.base import NoFreeCellForSpawn
from lonely_tribes.environment.generators.pipeline.context import GenerationContext
from lonely_tribes.environment.generators.pipeline.layer import GenerationLayer
from lonely_tribes.environment.sprites import LevelMap, SpritePlacement, SpriteRequest
from lonely_tribes.types import PlayerGroupId, WorldTilePos
from lonely_tribes.util.coordinates import is_valid_world_tile_pos
from lonely_tribes.util.rng import RNG

logger = logging.getLogger(__name__)


class PlayerSpawnLayer(GenerationLayer):
    """Spawns one to four tribes of players on free tiles.

    Earlier tribes are larger: tribe `id` gets between `2 * offset` and
    `5 * offset - 1` players, where `offset = groups_max - id`.

    Each player rejection-samples uniform tiles until it finds one that is
    neither blocked nor taken by another player. A player that keeps being
    rejected for max_attempts samples aborts the run.
    """

    def __init__(
        self,
        groups_min: int = config.PLAYER_GROUPS_MIN,
        groups_max: int = config.PLAYER_GROUPS_MAX,
        max_attempts: int = config.SPAWN_MAX_ATTEMPTS,
    ) -> None:
        """Initialize the player spawn layer.

        Args:
            groups_min: Minimum number of tribes (inclusive).
            groups_max: Maximum number of tribes (inclusive).
            max_attempts: Rejected samples allowed per player.
        """
        if not 1 <= groups_min <= groups_max:
            raise ValueError(f"Invalid group range [{groups_min}, {groups_max}]")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.groups_min = groups_min
        self.groups_max = groups_max
        self.max_attempts = max_attempts

    def roll_group_sizes(self, rng: RNG) -> list[int]:
        """Draw the number of tribes and the size of each."""
        group_count = rng.randint(self.groups_min, self.groups_max)
        sizes = []
        for group in range(group_count):
            offset = self.groups_max - group
            sizes.append(rng.randrange(2 * offset, 5 * offset))
        return sizes

    def _find_free_tile(
        self,
        rng: RNG,
        group: PlayerGroupId,
        width: int,
        height: int,
        blocked: Set[WorldTilePos],
        taken: set[WorldTilePos],
    ) -> WorldTilePos:
        for _attempt in range(self.max_attempts):
            pos = (rng.randrange(0, width), rng.randrange(0, height))
            if pos not in blocked and pos not in taken:
                return pos
        raise NoFreeCellForSpawn(group, self.max_attempts)

    def spawn(
        self,
        rng: RNG,
        blocked: Set[WorldTilePos],
        width: int,
        height: int,
    ) -> LevelMap:
        """Place every player of every tribe.

        Args:
            rng: Random stream to draw from.
            blocked: Tiles players may not stand on.
            width: Level width in tiles.
            height: Level height in tiles.

        Returns:
            One PLAYER placement per player, no two on the same tile.

        Raises:
            NoFreeCellForSpawn: If a player cannot be placed.
        """
        sizes = self.roll_group_sizes(rng)
        free_tiles = width * height - sum(
            1 for pos in blocked if is_valid_world_tile_pos(pos, width, height)
        )

        taken: set[WorldTilePos] = set()
        placements: LevelMap = []
        for group, size in enumerate(sizes):
            for _ in range(size):
                if len(taken) >= free_tiles:
                    raise NoFreeCellForSpawn(group, 0, free_tiles=free_tiles)
                pos = self._find_free_tile(rng, group, width, height, blocked, taken)
                taken.add(pos)
                placements.append(SpritePlacement(*pos, SpriteRequest.player(group)))

        logger.debug(f"Spawned tribes of sizes {sizes}")
        return placements

    def apply(self, ctx: GenerationContext) -> None:
        """Add player placements to the context.

        Args:
            ctx: The generation context to modify.
        """
        ctx.add_placements(
            self.spawn(
                ctx.rng.get("map.players"),
                ctx.blocked_tiles(),
                ctx.width,
                ctx.height,
            )
        )
