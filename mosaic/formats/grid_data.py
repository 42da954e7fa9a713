"""
Tile Mosaic - Grid Data File

Saves a resolved grid to JSON and loads it back, so a generated mosaic can
be inspected or re-rendered without regenerating it.
"""

import json
from typing import List, Optional

from ..core.grid import Grid
from ..core.tiles import TileCatalog


class GridData:
    """A resolved grid as stored on disk: tile names plus (index, rotation) cells."""

    def __init__(self):
        self.seed: Optional[int] = None
        self.width: int = 0
        self.height: int = 0
        self.tiles: List[str] = []
        # cells[y][x] = [tile_index, rotation]
        self.cells: List[List[List[int]]] = []

    @classmethod
    def from_grid(cls, grid: Grid, catalog: TileCatalog, seed: Optional[int] = None) -> "GridData":
        """
        Capture a resolved grid.

        Raises:
            ValueError: If the grid still has unresolved cells
        """
        if not grid.is_complete():
            raise ValueError(
                f"Grid is incomplete: {grid.resolved_count} of "
                f"{grid.width * grid.height} cells resolved"
            )

        data = cls()
        data.seed = seed
        data.width = grid.width
        data.height = grid.height
        data.tiles = list(catalog.names)
        data.cells = [
            [[cell.tile_index, cell.rotation] for cell in row]
            for row in grid.rows()
        ]
        return data

    def to_grid(self) -> Grid:
        """Rebuild a Grid from the stored cells."""
        grid = Grid(self.width, self.height)
        for y, row in enumerate(self.cells):
            for x, (tile_index, rotation) in enumerate(row):
                grid.commit(x, y, tile_index, rotation)
        return grid

    def load(self, path: str):
        """
        Load grid data from a JSON file.

        Raises:
            ValueError: If dimensions, tile indices or rotations are inconsistent
        """
        with open(path, "r") as f:
            data = json.load(f)

        self.seed = data.get("seed")
        self.width = data["width"]
        self.height = data["height"]
        self.tiles = list(data["tiles"])
        self.cells = data["cells"]
        self._validate()

    def save(self, path: str):
        """Save grid data to a JSON file."""
        data = {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "tiles": self.tiles,
            "cells": self.cells,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    def _validate(self):
        if len(self.cells) != self.height:
            raise ValueError(f"Expected {self.height} rows, got {len(self.cells)}")

        for y, row in enumerate(self.cells):
            if len(row) != self.width:
                raise ValueError(f"Row {y}: expected {self.width} cells, got {len(row)}")
            for x, cell in enumerate(row):
                if len(cell) != 2:
                    raise ValueError(f"Cell ({x}, {y}): expected [tile_index, rotation]")
                tile_index, rotation = cell
                if not 0 <= tile_index < len(self.tiles):
                    raise ValueError(f"Cell ({x}, {y}): tile index {tile_index} out of range")
                if rotation not in (0, 1, 2, 3):
                    raise ValueError(f"Cell ({x}, {y}): invalid rotation {rotation}")

    def tile_name_at(self, x: int, y: int) -> str:
        return self.tiles[self.cells[y][x][0]]

    def matches_catalog(self, catalog: TileCatalog) -> bool:
        """True if the stored tile names line up with `catalog`'s order."""
        return self.tiles == list(catalog.names)

