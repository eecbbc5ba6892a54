"""
Configuration constants.

Centralizes the magic numbers used by level generation.
Organized by functional area for easy maintenance.
"""

import logging

# =============================================================================
# GENERAL
# =============================================================================

# Default seed used by the CLI when none is given
DEFAULT_SEED = 42

# =============================================================================
# GRID SIZE
# =============================================================================

# Default level dimensions in tiles. Generators take the size as arguments,
# these are only the defaults.
GRID_WIDTH = 64
GRID_HEIGHT = 64

# =============================================================================
# ROOM LAYOUT
# =============================================================================

# Number of rooms carved per level (inclusive bounds)
ROOM_COUNT_MIN = 3
ROOM_COUNT_MAX = 8

# Room extents. Widths/heights are drawn from [ROOM_MIN_SIZE, ROOM_MAX_*).
# The grid must be strictly larger than the maximum room size.
ROOM_MIN_SIZE = 4
ROOM_MAX_WIDTH = 20
ROOM_MAX_HEIGHT = 20

# =============================================================================
# FOLIAGE
# =============================================================================

# Noise coordinates are tile coordinates divided by this
PERLIN_SCALE = 5.0

# Noise values above this become trees
TREE_THRESHOLD = 0.5
# Noise values above this become shrubbery
SHRUBBERY_THRESHOLD = 0.0
# Override-field values above this let a tree grow on a blocked tile
OVERRIDE_WALL_THRESHOLD = 0.4
# Door tiles amplify the noise so openings get overgrown more readily
DOOR_REPLACER_MODIFIER = 5.0

# Offsets applied to the level seed for the three noise fields
FOLIAGE_SECOND_FIELD_SEED_OFFSET = 100
FOLIAGE_OVERRIDE_FIELD_SEED_DIVISOR = 3

# fBm parameters shared by all foliage fields
FOLIAGE_NOISE_OCTAVES = 6
FOLIAGE_NOISE_HURST = 0.5
FOLIAGE_NOISE_LACUNARITY = 2.0

# Worker threads for the per-column foliage pass (None = executor default)
FOLIAGE_MAX_WORKERS: int | None = None

# =============================================================================
# PLAYER SPAWNING
# =============================================================================

# Number of player groups (inclusive bounds)
PLAYER_GROUPS_MIN = 1
PLAYER_GROUPS_MAX = 4

# Consecutive rejected samples allowed before a spawn gives up
SPAWN_MAX_ATTEMPTS = 10_000

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.INFO
