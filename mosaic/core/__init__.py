"""
Core tile mosaic functionality.

This package contains the tile catalog, edge compatibility checks, candidate
enumeration, weighted selection, and the scan-order grid filler.
"""

from .tiles import (
    ALL_ROTATIONS,
    BOUNDARY_TILE,
    DOWN,
    LEFT,
    OPEN_EDGE,
    OPPOSITE,
    RIGHT,
    SIDES,
    UP,
    InvalidTileDefinitionError,
    TileCatalog,
    TileDefinition,
)
from .compatibility import compatible, edge_of, opposite_side
from .grid import UNRESOLVED, Grid, Neighbor, NeighborKind, Resolved, Unresolved
from .candidates import Candidate, enumerate_candidates
from .selection import DegenerateWeightsError, select
from .grid_filler import (
    GenerationCancelledError,
    GridFiller,
    UnsatisfiableCellError,
    generate_grid,
)

__all__ = [
    "ALL_ROTATIONS",
    "BOUNDARY_TILE",
    "DOWN",
    "LEFT",
    "OPEN_EDGE",
    "OPPOSITE",
    "RIGHT",
    "SIDES",
    "UP",
    "InvalidTileDefinitionError",
    "TileCatalog",
    "TileDefinition",
    "compatible",
    "edge_of",
    "opposite_side",
    "UNRESOLVED",
    "Grid",
    "Neighbor",
    "NeighborKind",
    "Resolved",
    "Unresolved",
    "Candidate",
    "enumerate_candidates",
    "DegenerateWeightsError",
    "select",
    "GenerationCancelledError",
    "GridFiller",
    "UnsatisfiableCellError",
    "generate_grid",
]
