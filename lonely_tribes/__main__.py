"""Command line entry point: generate a level and print a preview."""

import argparse
import logging
import sys
from collections import Counter

from . import config
from .environment.ascii_preview import render_ascii
from .environment.generators import LevelGenerationError, ProceduralGenerator

logger = logging.getLogger("lonely_tribes")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lonely_tribes",
        description="Generate a procedural Lonely Tribes level from a seed.",
    )
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH)
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--no-preview", action="store_true", help="Only log the sprite summary"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    try:
        generator = ProceduralGenerator(args.width, args.height)
        level = generator.generate(args.seed)
    except LevelGenerationError as e:
        logger.error(f"Level generation failed for seed {args.seed}: {e}")
        return 1

    counts = Counter(repr(p.sprite) for p in level)
    logger.info(f"Sprites: {dict(sorted(counts.items()))}")

    if not args.no_preview:
        print(render_ascii(level, args.width, args.height))
    return 0


if __name__ == "__main__":
    sys.exit(main())
