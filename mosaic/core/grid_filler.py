"""
Tile Mosaic - Grid Filler

Resolves every cell of a grid in a fixed scan order, one cell at a time,
with no propagation and no backtracking.

Scan order is column-major: x is the outer loop and y the inner loop. When
cell (x, y) is processed its up and left neighbours are already resolved (or
outside the grid), while its down and right neighbours are still unresolved
and therefore unconstrained. A cell with no admissible candidate ends the
run with UnsatisfiableCellError.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterator

from .candidates import enumerate_candidates
from .compatibility import edge_of, opposite_side
from .grid import Grid
from .selection import DegenerateWeightsError, RandomSource, select
from .tiles import SIDE_NAMES, SIDES, TileCatalog

logger = logging.getLogger(__name__)


class UnsatisfiableCellError(Exception):
    """Raised when no (tile, rotation) pair fits a cell during the scan."""

    def __init__(self, x: int, y: int, required_edges: dict[int, int] | None = None):
        self.x = x
        self.y = y
        # {side: edge code the cell would have to present on that side}
        self.required_edges = dict(required_edges or {})
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"No tile fits cell ({self.x}, {self.y})"
        if self.required_edges:
            needs = ", ".join(
                f"{SIDE_NAMES[side]}={code}" for side, code in sorted(self.required_edges.items())
            )
            message += f" (required edges: {needs})"
        return message


class GenerationCancelledError(Exception):
    """Raised when a cancel callback stops a fill between columns."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Generation cancelled before column {column}")


class GridFiller:
    """
    Drives the enumerate -> select -> commit loop over a fresh grid.

    The filler owns its grid exclusively; the grid should only be read by
    others once fill() has returned.
    """

    def __init__(
        self,
        catalog: TileCatalog,
        width: int,
        height: int,
        rng: RandomSource | None = None,
        seed: int | None = None,
    ):
        self.catalog = catalog
        self.grid = Grid(width, height)
        self.rng = rng if rng is not None else random.Random(seed)
        self.seed = seed
        self._filled = False

    def scan_order(self) -> Iterator[tuple[int, int]]:
        """Yield cell coordinates in the order they are resolved."""
        for x in range(self.grid.width):
            for y in range(self.grid.height):
                yield x, y

    def fill(
        self,
        cancel: Callable[[], bool] | None = None,
        progress: Callable[[int, int], None] | None = None,
    ) -> Grid:
        """
        Resolve every cell.

        Args:
            cancel: Checked once before each column; returning True stops the run
            progress: Called after each column with (columns_done, width)

        Returns:
            The fully resolved grid

        Raises:
            UnsatisfiableCellError: If some cell has no admissible candidate
            DegenerateWeightsError: If a cell's candidates all have zero weight
            GenerationCancelledError: If `cancel` requested a stop
            RuntimeError: If this filler was already used
        """
        if self._filled:
            raise RuntimeError("GridFiller.fill() can only run once per filler")
        self._filled = True

        width, height = self.grid.width, self.grid.height
        logger.info(
            "Filling %dx%d grid from %d tiles (seed=%s)",
            width, height, len(self.catalog), self.seed,
        )

        for x in range(width):
            if cancel is not None and cancel():
                logger.info("Fill cancelled before column %d", x)
                raise GenerationCancelledError(x)

            for y in range(height):
                self._resolve_cell(x, y)

            if progress is not None:
                progress(x + 1, width)

        logger.info("Filled %d cells", self.grid.resolved_count)
        return self.grid

    def _resolve_cell(self, x: int, y: int) -> None:
        candidates = enumerate_candidates(self.catalog, self.grid, x, y)
        if not candidates:
            required = self._required_edges(x, y)
            logger.debug("Cell (%d, %d) unsatisfiable, required edges %s", x, y, required)
            raise UnsatisfiableCellError(x, y, required)

        try:
            chosen = select(candidates, self.rng)
        except DegenerateWeightsError as e:
            raise DegenerateWeightsError(e.candidate_count, x, y) from e

        self.grid.commit(x, y, chosen.tile_index, chosen.rotation)
        logger.debug(
            "Cell (%d, %d) <- %s rot %d (%d candidates)",
            x, y, chosen.tile.name, chosen.rotation, len(candidates),
        )

    def _required_edges(self, x: int, y: int) -> dict[int, int]:
        """Edge codes the constraining neighbours demand of cell (x, y)."""
        required = {}
        for side in SIDES:
            neighbor = self.grid.neighbor(self.catalog, x, y, side)
            if neighbor.constrains:
                required[side] = edge_of(neighbor.tile, neighbor.rotation, opposite_side(side))
        return required


def generate_grid(
    catalog: TileCatalog,
    width: int,
    height: int,
    seed: int | None = None,
    rng: RandomSource | None = None,
) -> Grid:
    """Fill a width x height grid from `catalog` in one call."""
    return GridFiller(catalog, width, height, rng=rng, seed=seed).fill()
