#!/usr/bin/env python3
"""
Tile Mosaic - Catalog Analyzer

Generates grids for a range of seeds and reports dead-end rate, where runs
dead-end, and tile usage versus configured weights.

Usage: python -m tools.analyze [-c config.yml] [--runs 200] [--first-seed 0]
"""

import argparse
import sys

from generate import positive_int
from mosaic.analysis import analyze_seeds
from mosaic.core import InvalidTileDefinitionError
from mosaic.formats.tile_config import DEFAULT_CONFIG_PATH, load_tile_config


def print_report(report: dict, top_failures: int = 10):
    print("=" * 60)
    print("RUNS")
    print("=" * 60)
    print(f"  Runs:      {report['runs']}")
    print(f"  Failures:  {report['failures']} ({report['failure_rate']:.1%})")

    if report["failure_cells"]:
        print(f"\n  Most common dead-end cells (top {top_failures}):")
        for (x, y), count in report["failure_cells"].most_common(top_failures):
            print(f"    ({x:3d}, {y:3d}): {count}")

    print()
    print("=" * 60)
    print("TILE USAGE (placed share vs unconstrained weight share)")
    print("=" * 60)
    for name, share in report["usage_share"].items():
        expected = report["weight_share"][name]
        print(f"  {name:30s} {share:7.1%}  (weights: {expected:6.1%})")

    stats = report["distinct_tiles"]
    if stats is not None:
        print()
        print("=" * 60)
        print("DISTINCT TILES PER RUN")
        print("=" * 60)
        print(
            f"  min={stats['min']:.0f}  25th={stats['25th']:.1f}  50th={stats['50th']:.1f}  "
            f"75th={stats['75th']:.1f}  max={stats['max']:.0f}"
        )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyze a tile catalog over many seeds")
    parser.add_argument("-c", "--config", default=DEFAULT_CONFIG_PATH, help="Tile configuration file")
    parser.add_argument("--runs", type=positive_int, default=200, help="Number of seeds to try (default: 200)")
    parser.add_argument("--first-seed", type=int, default=0, help="First seed (default: 0)")
    parser.add_argument("--width", type=positive_int, help="Grid width (overrides config)")
    parser.add_argument("--height", type=positive_int, help="Grid height (overrides config)")
    args = parser.parse_args(argv)

    try:
        config = load_tile_config(args.config)
    except (FileNotFoundError, ValueError, InvalidTileDefinitionError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    width = args.width or config.width
    height = args.height or config.height
    seeds = range(args.first_seed, args.first_seed + args.runs)

    print(f"Analyzing {len(config.catalog)} tiles on a {width}x{height} grid, {args.runs} seeds\n")
    report = analyze_seeds(config.catalog, width, height, seeds)
    print_report(report)


if __name__ == "__main__":
    main()
