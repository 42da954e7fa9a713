"""
Tile Mosaic - Tile Definitions

Tile definitions, the validated tile catalog, and side/edge constants shared
by the constraint code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

# Side constants, indexed the same way as TileDefinition.edges
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
SIDES = (UP, RIGHT, DOWN, LEFT)
OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}
SIDE_NAMES = {UP: "up", RIGHT: "right", DOWN: "down", LEFT: "left"}

# Edge code presented by everything outside the grid
OPEN_EDGE = 0

# Quarter-turn rotation steps
ALL_ROTATIONS = (0, 1, 2, 3)

DEFAULT_WEIGHT = 1.0


class InvalidTileDefinitionError(Exception):
    """Raised when a tile definition or catalog fails validation."""

    def __init__(self, tile_name: str | None, reason: str):
        self.tile_name = tile_name
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.tile_name is None:
            return f"Invalid tile catalog: {self.reason}"
        return f"Invalid tile '{self.tile_name}': {self.reason}"


def _check_edges(name: str | None, edges: Sequence[int]) -> None:
    if len(edges) != 4:
        raise InvalidTileDefinitionError(name, f"expected 4 edge codes, got {len(edges)}")
    for code in edges:
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidTileDefinitionError(name, f"edge code {code!r} is not an integer")


def _check_rotations(name: str | None, rotations: Sequence[int]) -> None:
    if not rotations:
        raise InvalidTileDefinitionError(name, "no allowed rotations")
    for step in rotations:
        if isinstance(step, bool) or not isinstance(step, int) or step not in ALL_ROTATIONS:
            raise InvalidTileDefinitionError(name, f"rotation step {step!r} is outside 0-3")


@dataclass(frozen=True)
class TileDefinition:
    """
    A single square tile.

    Attributes:
        name: Opaque identity, normally the artwork filename
        edges: Edge codes for (up, right, down, left) at rotation 0
        rotations: Allowed quarter-turn steps, in configured order
        weight: Selection weight, shared by every rotation of the tile
    """

    name: str
    edges: tuple[int, int, int, int]
    rotations: tuple[int, ...] = ALL_ROTATIONS
    weight: float = DEFAULT_WEIGHT

    @classmethod
    def create(
        cls,
        name: str,
        edges: Sequence[int],
        rotations: Sequence[int] | None = None,
        weight: float | None = None,
    ) -> TileDefinition:
        """
        Build a validated, normalized tile definition.

        Missing or empty rotations default to all four steps. A missing or
        non-positive weight is coerced to 1.

        Args:
            name: Tile identity
            edges: Exactly four integer edge codes (up, right, down, left)
            rotations: Allowed rotation steps, each in 0-3
            weight: Selection weight

        Returns:
            Normalized TileDefinition

        Raises:
            InvalidTileDefinitionError: If any field is malformed
        """
        if not isinstance(name, str) or not name:
            raise InvalidTileDefinitionError(None, f"tile name must be a non-empty string, got {name!r}")

        if not isinstance(edges, (list, tuple)):
            raise InvalidTileDefinitionError(name, f"edges must be a list of 4 integers, got {edges!r}")
        _check_edges(name, edges)

        if rotations is None or (isinstance(rotations, (list, tuple)) and not rotations):
            normalized_rotations = ALL_ROTATIONS
        elif not isinstance(rotations, (list, tuple)):
            raise InvalidTileDefinitionError(
                name, f"rotations must be a list of steps in 0-3, got {rotations!r}"
            )
        else:
            _check_rotations(name, rotations)
            normalized_rotations = tuple(dict.fromkeys(rotations))

        if weight is None:
            normalized_weight = DEFAULT_WEIGHT
        else:
            try:
                normalized_weight = float(weight)
            except (TypeError, ValueError):
                raise InvalidTileDefinitionError(name, f"weight {weight!r} is not a number")
            if not normalized_weight > 0:
                normalized_weight = DEFAULT_WEIGHT

        return cls(
            name=name,
            edges=tuple(edges),
            rotations=normalized_rotations,
            weight=normalized_weight,
        )


# Synthetic neighbour for positions outside the grid. Never part of a catalog.
BOUNDARY_TILE = TileDefinition(
    name="<boundary>",
    edges=(OPEN_EDGE, OPEN_EDGE, OPEN_EDGE, OPEN_EDGE),
    rotations=(0,),
)


def _check_catalog_tile(tile: TileDefinition) -> None:
    """Tiles built without create() are checked here. Weight is left alone."""
    if not isinstance(tile.name, str) or not tile.name:
        raise InvalidTileDefinitionError(
            None, f"tile name must be a non-empty string, got {tile.name!r}"
        )
    if not isinstance(tile.edges, (list, tuple)):
        raise InvalidTileDefinitionError(tile.name, f"edges must be a tuple, got {tile.edges!r}")
    _check_edges(tile.name, tile.edges)
    if not isinstance(tile.rotations, (list, tuple)):
        raise InvalidTileDefinitionError(
            tile.name, f"rotations must be a tuple, got {tile.rotations!r}"
        )
    _check_rotations(tile.name, tile.rotations)


class TileCatalog:
    """
    Immutable, ordered set of tile definitions used for one generation run.

    Iteration order is the configured order; it only affects which candidate
    a given random draw lands on, never which candidates are admissible.
    """

    def __init__(self, tiles: Iterable[TileDefinition]):
        self._tiles: tuple[TileDefinition, ...] = tuple(tiles)
        if not self._tiles:
            raise InvalidTileDefinitionError(None, "catalog contains no tiles")

        self._index: dict[str, int] = {}
        for i, tile in enumerate(self._tiles):
            _check_catalog_tile(tile)
            if tile.name in self._index:
                raise InvalidTileDefinitionError(tile.name, "duplicate tile name")
            self._index[tile.name] = i

    @classmethod
    def from_dicts(cls, entries: Iterable[dict]) -> TileCatalog:
        """Build a catalog from raw mappings with filename/edges/rotations/weight keys."""
        tiles = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise InvalidTileDefinitionError(None, f"tile entry must be a mapping, got {entry!r}")
            tiles.append(
                TileDefinition.create(
                    name=entry.get("filename", entry.get("name")),
                    edges=entry.get("edges"),
                    rotations=entry.get("rotations"),
                    weight=entry.get("weight"),
                )
            )
        return cls(tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[TileDefinition]:
        return iter(self._tiles)

    def __getitem__(self, index: int) -> TileDefinition:
        return self._tiles[index]

    def __repr__(self) -> str:
        return f"TileCatalog({list(self.names)!r})"

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(tile.name for tile in self._tiles)

    def index_of(self, name: str) -> int:
        """
        Look up a tile's catalog index by name.

        Raises:
            KeyError: If no tile has that name
        """
        return self._index[name]
