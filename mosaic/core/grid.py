"""
Tile Mosaic - Grid State

The partially resolved grid and the neighbour lookups the candidate
enumeration reads from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Union

from .tiles import BOUNDARY_TILE, DOWN, LEFT, RIGHT, UP, TileCatalog, TileDefinition

# (dx, dy) per side; y grows downward
DIRECTION_DELTAS = {
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Unresolved:
    """A cell the scan has not reached yet."""

    def __repr__(self) -> str:
        return "UNRESOLVED"


UNRESOLVED = Unresolved()


@dataclass(frozen=True)
class Resolved:
    """A committed cell: catalog index of the tile and its rotation step."""

    tile_index: int
    rotation: int


Cell = Union[Unresolved, Resolved]


class NeighborKind(Enum):
    BOUNDARY = auto()
    UNRESOLVED = auto()
    RESOLVED = auto()


@dataclass(frozen=True)
class Neighbor:
    """
    What lies on one side of a cell.

    Boundary neighbours behave as BOUNDARY_TILE at rotation 0. Unresolved
    neighbours carry no tile and impose no constraint.
    """

    kind: NeighborKind
    tile: TileDefinition | None = None
    rotation: int = 0

    @property
    def constrains(self) -> bool:
        return self.kind is not NeighborKind.UNRESOLVED


_BOUNDARY_NEIGHBOR = Neighbor(NeighborKind.BOUNDARY, BOUNDARY_TILE, 0)
_UNRESOLVED_NEIGHBOR = Neighbor(NeighborKind.UNRESOLVED)


class Grid:
    """
    Width x height array of cells, committed one at a time.

    Cells are stored row-major (cells[y][x]). A committed cell is never
    changed again.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: list[list[Cell]] = [[UNRESOLVED] * width for _ in range(height)]
        self._resolved_count = 0

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, resolved={self._resolved_count})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self._cells[y][x]

    def commit(self, x: int, y: int, tile_index: int, rotation: int) -> Resolved:
        """
        Resolve a cell.

        Raises:
            IndexError: If (x, y) is outside the grid
            ValueError: If the cell was already resolved
        """
        current = self.cell(x, y)
        if isinstance(current, Resolved):
            raise ValueError(f"Cell ({x}, {y}) is already resolved")
        resolved = Resolved(tile_index, rotation)
        self._cells[y][x] = resolved
        self._resolved_count += 1
        return resolved

    def neighbor(self, catalog: TileCatalog, x: int, y: int, side: int) -> Neighbor:
        """Look up the neighbour of (x, y) on `side`."""
        dx, dy = DIRECTION_DELTAS[side]
        nx, ny = x + dx, y + dy
        if not self.in_bounds(nx, ny):
            return _BOUNDARY_NEIGHBOR

        cell = self._cells[ny][nx]
        if isinstance(cell, Resolved):
            return Neighbor(NeighborKind.RESOLVED, catalog[cell.tile_index], cell.rotation)
        return _UNRESOLVED_NEIGHBOR

    @property
    def resolved_count(self) -> int:
        return self._resolved_count

    def is_complete(self) -> bool:
        return self._resolved_count == self.width * self.height

    def resolved_cells(self) -> Iterator[tuple[int, int, Resolved]]:
        """Yield (x, y, cell) for every resolved cell, row by row."""
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if isinstance(cell, Resolved):
                    yield x, y, cell

    def rows(self) -> list[list[Cell]]:
        """Copy of the cells in row-major order."""
        return [row[:] for row in self._cells]
