"""
Unit tests for tile definitions and the tile catalog.
"""

import pytest

from mosaic.core.tiles import (
    ALL_ROTATIONS,
    BOUNDARY_TILE,
    OPEN_EDGE,
    InvalidTileDefinitionError,
    TileCatalog,
    TileDefinition,
)


class TestTileDefinitionCreate:
    """Tests for TileDefinition.create() normalization and validation."""

    def test_basic_fields(self):
        tile = TileDefinition.create("road.png", [0, 1, 0, 1], [0, 1], 2.5)
        assert tile.name == "road.png"
        assert tile.edges == (0, 1, 0, 1)
        assert tile.rotations == (0, 1)
        assert tile.weight == 2.5

    def test_missing_rotations_default_to_all(self):
        tile = TileDefinition.create("a.png", [0, 0, 0, 0])
        assert tile.rotations == ALL_ROTATIONS

    def test_empty_rotations_default_to_all(self):
        tile = TileDefinition.create("a.png", [0, 0, 0, 0], [])
        assert tile.rotations == (0, 1, 2, 3)

    def test_duplicate_rotations_removed_order_kept(self):
        tile = TileDefinition.create("a.png", [0, 0, 0, 0], [2, 0, 2, 1])
        assert tile.rotations == (2, 0, 1)

    def test_missing_weight_is_one(self):
        assert TileDefinition.create("a.png", [0, 0, 0, 0]).weight == 1.0

    def test_zero_weight_coerced_to_one(self):
        assert TileDefinition.create("a.png", [0, 0, 0, 0], weight=0).weight == 1.0

    def test_negative_weight_coerced_to_one(self):
        assert TileDefinition.create("a.png", [0, 0, 0, 0], weight=-3).weight == 1.0

    def test_wrong_edge_count_rejected(self):
        with pytest.raises(InvalidTileDefinitionError, match="expected 4 edge codes, got 3"):
            TileDefinition.create("a.png", [0, 1, 0])

    def test_too_many_edges_rejected(self):
        with pytest.raises(InvalidTileDefinitionError):
            TileDefinition.create("a.png", [0, 1, 0, 1, 0])

    def test_missing_edges_rejected(self):
        with pytest.raises(InvalidTileDefinitionError):
            TileDefinition.create("a.png", None)

    def test_non_integer_edge_rejected(self):
        with pytest.raises(InvalidTileDefinitionError, match="not an integer"):
            TileDefinition.create("a.png", [0, "x", 0, 0])

    def test_rotation_out_of_range_rejected(self):
        with pytest.raises(InvalidTileDefinitionError, match="outside 0-3"):
            TileDefinition.create("a.png", [0, 0, 0, 0], [0, 4])

    def test_negative_rotation_rejected(self):
        with pytest.raises(InvalidTileDefinitionError):
            TileDefinition.create("a.png", [0, 0, 0, 0], [-1])

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidTileDefinitionError):
            TileDefinition.create("", [0, 0, 0, 0])

    def test_error_carries_tile_name(self):
        with pytest.raises(InvalidTileDefinitionError) as exc_info:
            TileDefinition.create("bad.png", [1, 2])
        assert exc_info.value.tile_name == "bad.png"
        assert "bad.png" in str(exc_info.value)


class TestBoundaryTile:
    def test_all_edges_open(self):
        assert BOUNDARY_TILE.edges == (OPEN_EDGE,) * 4
        assert OPEN_EDGE == 0


class TestTileCatalog:
    """Tests for TileCatalog construction and lookup."""

    def test_preserves_order(self, pipe_tiles):
        catalog = TileCatalog(pipe_tiles)
        assert [t.name for t in catalog] == [t.name for t in pipe_tiles]
        assert catalog.names[0] == "blank.png"
        assert len(catalog) == len(pipe_tiles)

    def test_index_lookup(self, pipe_catalog):
        assert pipe_catalog[pipe_catalog.index_of("corner.png")].name == "corner.png"

    def test_unknown_name_raises_key_error(self, pipe_catalog):
        with pytest.raises(KeyError):
            pipe_catalog.index_of("missing.png")

    def test_empty_catalog_rejected(self):
        with pytest.raises(InvalidTileDefinitionError, match="no tiles"):
            TileCatalog([])

    def test_duplicate_names_rejected(self):
        tile = TileDefinition.create("a.png", [0, 0, 0, 0])
        with pytest.raises(InvalidTileDefinitionError, match="duplicate"):
            TileCatalog([tile, tile])

    def test_from_dicts_normalizes(self):
        catalog = TileCatalog.from_dicts(
            [
                {"filename": "a.png", "edges": [0, 1, 0, 1]},
                {"filename": "b.png", "edges": [1, 1, 1, 1], "rotations": [0], "weight": 0},
            ]
        )
        assert catalog[0].rotations == (0, 1, 2, 3)
        assert catalog[1].rotations == (0,)
        assert catalog[1].weight == 1.0

    def test_from_dicts_rejects_non_mapping(self):
        with pytest.raises(InvalidTileDefinitionError):
            TileCatalog.from_dicts(["a.png"])

    def test_from_dicts_rejects_bad_tile_before_use(self):
        with pytest.raises(InvalidTileDefinitionError):
            TileCatalog.from_dicts([{"filename": "a.png", "edges": [0, 0, 0]}])


class TestCatalogRevalidation:
    """Tiles constructed directly, skipping create(), are checked by the catalog."""

    def test_three_edges_rejected_at_construction(self):
        bad = TileDefinition(name="bad.png", edges=(0, 0, 0), rotations=(0,))
        with pytest.raises(InvalidTileDefinitionError, match="expected 4 edge codes") as exc_info:
            TileCatalog([bad])
        assert exc_info.value.tile_name == "bad.png"

    def test_rotation_out_of_range_rejected_at_construction(self):
        bad = TileDefinition(name="bad.png", edges=(0, 0, 0, 0), rotations=(5,))
        with pytest.raises(InvalidTileDefinitionError, match="outside 0-3"):
            TileCatalog([bad])

    def test_empty_rotation_set_rejected(self):
        bad = TileDefinition(name="bad.png", edges=(0, 0, 0, 0), rotations=())
        with pytest.raises(InvalidTileDefinitionError, match="no allowed rotations"):
            TileCatalog([bad])

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidTileDefinitionError):
            TileCatalog([TileDefinition(name="", edges=(0, 0, 0, 0))])

    def test_zero_weight_still_accepted(self):
        zero = TileDefinition(name="z.png", edges=(0, 0, 0, 0), rotations=(0,), weight=0.0)
        assert len(TileCatalog([zero])) == 1
