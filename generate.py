#!/usr/bin/env python3
"""
Tile Mosaic - Generator

Fills a grid from a tile configuration and renders it as a PNG mosaic.

Usage:
    python generate.py                       # uses config.yml, random seed
    python generate.py -c tiles.yml --seed 42 -o mosaic.png
    python generate.py --from-grid run.json  # re-render a saved grid
"""

import argparse
import logging
import sys
import time

from mosaic.core import (
    DegenerateWeightsError,
    Grid,
    GridFiller,
    InvalidTileDefinitionError,
    TileCatalog,
    UnsatisfiableCellError,
)
from mosaic.formats.grid_data import GridData
from mosaic.formats.tile_config import DEFAULT_CONFIG_PATH, load_tile_config
from mosaic.logging_config import setup_logging
from mosaic.rendering.pil_renderer import load_tile_images, render_grid_to_image

logger = logging.getLogger("mosaic.generate")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def fill_with_retries(
    catalog: TileCatalog,
    width: int,
    height: int,
    seed: int,
    retries: int = 0,
) -> tuple[Grid, int]:
    """
    Fill a grid, retrying with the next seed when a cell is unsatisfiable.

    Each attempt is an independent run from an empty grid; nothing is
    backtracked within a run.

    Returns:
        (grid, seed that produced it)

    Raises:
        UnsatisfiableCellError: If every attempt dead-ends
    """
    attempt = 0
    while True:
        attempt_seed = seed + attempt
        try:
            grid = GridFiller(catalog, width, height, seed=attempt_seed).fill()
            return grid, attempt_seed
        except UnsatisfiableCellError as e:
            if attempt >= retries:
                raise
            logger.warning("Seed %d failed: %s; retrying with seed %d", attempt_seed, e, attempt_seed + 1)
            attempt += 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an edge-matched tile mosaic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                # config.yml, wall-clock seed
  %(prog)s -c tiles.yml --seed 42         # reproducible run
  %(prog)s --seed 7 --grid-json run.json  # also save the grid
  %(prog)s --from-grid run.json -o b.png  # re-render a saved grid
        """,
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        metavar="config.yml",
        help=f"Tile configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (default: current time in nanoseconds)",
    )
    parser.add_argument("--width", type=positive_int, help="Grid width in tiles (overrides config)")
    parser.add_argument("--height", type=positive_int, help="Grid height in tiles (overrides config)")
    parser.add_argument(
        "--tile-size", type=positive_int, help="Tile size in pixels (overrides config)"
    )
    parser.add_argument("-o", "--output", help="Output PNG path (overrides config)")
    parser.add_argument("--grid-json", help="Also save the resolved grid as JSON")
    parser.add_argument(
        "--from-grid",
        help="Render a grid previously saved with --grid-json instead of generating",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=0,
        help="Retry with the next seed this many times if a cell is unsatisfiable",
    )
    parser.add_argument("--log-file", help="Write a DEBUG log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show per-cell debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.retries < 0:
        parser.error("--retries cannot be negative")
    if args.from_grid and args.grid_json:
        parser.error("--from-grid and --grid-json are mutually exclusive")

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        config = load_tile_config(args.config)
    except (FileNotFoundError, ValueError, InvalidTileDefinitionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    catalog = config.catalog
    tile_size = args.tile_size or config.tile_size
    output = args.output or config.output

    if args.from_grid:
        data = GridData()
        try:
            data.load(args.from_grid)
        except (OSError, KeyError, TypeError, ValueError) as e:
            print(f"Error: could not load grid {args.from_grid}: {e}", file=sys.stderr)
            return 1
        if not data.matches_catalog(catalog):
            print(
                f"Error: grid {args.from_grid} was generated from a different tile list",
                file=sys.stderr,
            )
            return 1
        grid = data.to_grid()
        seed = data.seed
    else:
        width = args.width or config.width
        height = args.height or config.height
        seed = args.seed if args.seed is not None else time.time_ns()
        try:
            grid, seed = fill_with_retries(catalog, width, height, seed, args.retries)
        except (UnsatisfiableCellError, DegenerateWeightsError) as e:
            print(f"Error: generation failed (seed {seed}): {e}", file=sys.stderr)
            return 1

    try:
        images = load_tile_images(catalog, config.base_dir, tile_size)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    img = render_grid_to_image(grid, catalog, images, tile_size)
    try:
        img.save(output)
    except OSError as e:
        print(f"Error: could not write {output}: {e}", file=sys.stderr)
        return 1
    print(f"Saved: {output} ({img.width}x{img.height}, seed {seed})")

    if args.grid_json:
        try:
            GridData.from_grid(grid, catalog, seed).save(args.grid_json)
        except OSError as e:
            print(f"Error: could not write {args.grid_json}: {e}", file=sys.stderr)
            return 1
        print(f"Saved grid: {args.grid_json}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
