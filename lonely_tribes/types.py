from __future__ import annotations

# =============================================================================
# SPATIAL TYPES
# =============================================================================

type TileCoord = int  # Always integer tile position

# World coordinates - absolute positions on the level grid
type WorldTileCoord = TileCoord  # Example: x=5, y=3
type WorldTilePos = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on the level

# Relative step to a neighboring tile
type TileOffset = tuple[int, int]  # Example: (-1, 1) = one left, one up

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Seed for deterministic level generation. The whole level (walls, foliage,
# players) is a pure function of this value and the grid size.
type RandomSeed = int

# Identifier of a tribe of players. Group 0 is always the largest.
type PlayerGroupId = int
