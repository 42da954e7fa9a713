"""
Tile Mosaic - Candidate Enumeration

Expands the catalog into every (tile, rotation) pair admissible at one cell.
"""

from __future__ import annotations

from dataclasses import dataclass

from .compatibility import compatible
from .grid import Grid
from .tiles import SIDES, TileCatalog, TileDefinition


@dataclass(frozen=True)
class Candidate:
    """A (tile, rotation) pair considered for one cell."""

    tile_index: int
    rotation: int
    tile: TileDefinition

    @property
    def weight(self) -> float:
        return self.tile.weight


def enumerate_candidates(catalog: TileCatalog, grid: Grid, x: int, y: int) -> list[Candidate]:
    """
    Find every admissible (tile, rotation) pair for cell (x, y).

    All four sides are consulted. Resolved neighbours and the grid boundary
    constrain the candidate; neighbours that are inside the grid but not yet
    resolved are permissive.

    Args:
        catalog: Tiles to choose from
        grid: Current grid state
        x: Cell column
        y: Cell row

    Returns:
        Candidates in catalog order, then rotation order. Empty if nothing fits.
    """
    constraints = []
    for side in SIDES:
        neighbor = grid.neighbor(catalog, x, y, side)
        if neighbor.constrains:
            constraints.append((side, neighbor))

    result: list[Candidate] = []
    for tile_index, tile in enumerate(catalog):
        for rotation in tile.rotations:
            if all(
                compatible(tile, rotation, neighbor.tile, neighbor.rotation, side)
                for side, neighbor in constraints
            ):
                result.append(Candidate(tile_index, rotation, tile))

    return result
