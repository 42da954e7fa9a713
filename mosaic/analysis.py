"""
Tile Mosaic - Seed Analysis

Runs the grid filler over many seeds and summarizes how a catalog behaves:
how often it dead-ends, where, and how tile usage compares with the
configured weights.
"""

from collections import Counter
from typing import Iterable

import numpy as np

from .core.grid_filler import GridFiller, UnsatisfiableCellError
from .core.tiles import TileCatalog


def percentile_stats(values):
    """Return min/25th/50th/75th/max statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "count": len(values),
    }


def weight_shares(catalog: TileCatalog) -> np.ndarray:
    """
    Share of draws each tile would get with no edge constraints at all.

    A tile's weight counts once per allowed rotation.
    """
    raw = np.array([tile.weight * len(tile.rotations) for tile in catalog], dtype=float)
    return raw / raw.sum()


def analyze_seeds(
    catalog: TileCatalog,
    width: int,
    height: int,
    seeds: Iterable[int],
) -> dict:
    """
    Generate one grid per seed and collect statistics.

    Returns:
        Dictionary with keys:
            runs, failures, failure_rate: run counts
            failure_cells: Counter of (x, y) where runs dead-ended
            usage_share: {tile name: share of placed cells} over successful runs
            weight_share: {tile name: unconstrained share from weights}
            distinct_tiles: percentile_stats of distinct tiles per successful run
                (None if every run failed)
    """
    names = catalog.names
    usage_rows = []
    failure_cells: Counter = Counter()
    runs = 0

    for seed in seeds:
        runs += 1
        try:
            grid = GridFiller(catalog, width, height, seed=seed).fill()
        except UnsatisfiableCellError as e:
            failure_cells[(e.x, e.y)] += 1
            continue

        counts = np.zeros(len(names), dtype=int)
        for _, _, cell in grid.resolved_cells():
            counts[cell.tile_index] += 1
        usage_rows.append(counts)

    failures = sum(failure_cells.values())
    shares = weight_shares(catalog)

    if usage_rows:
        usage = np.vstack(usage_rows)
        totals = usage.sum(axis=0)
        usage_share = {name: float(totals[i] / totals.sum()) for i, name in enumerate(names)}
        distinct_tiles = percentile_stats([int(np.count_nonzero(row)) for row in usage])
    else:
        usage_share = {name: 0.0 for name in names}
        distinct_tiles = None

    return {
        "runs": runs,
        "failures": failures,
        "failure_rate": failures / runs if runs else 0.0,
        "failure_cells": failure_cells,
        "usage_share": usage_share,
        "weight_share": {name: float(shares[i]) for i, name in enumerate(names)},
        "distinct_tiles": distinct_tiles,
    }
