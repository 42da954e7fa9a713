"""Shared pytest fixtures for tile mosaic tests."""

import pytest
import yaml
from PIL import Image

from mosaic.core import TileCatalog, TileDefinition


# Solid colours for the pipe tile artwork written by `pipe_config`
PIPE_COLORS = {
    "blank.png": (20, 20, 20, 255),
    "end.png": (200, 40, 40, 255),
    "straight.png": (40, 200, 40, 255),
    "corner.png": (40, 40, 200, 255),
    "tee.png": (200, 200, 40, 255),
    "cross.png": (200, 40, 200, 255),
}


@pytest.fixture
def pipe_tiles():
    """Pipe tiles covering every edge pattern, so no cell can dead-end."""
    return [
        TileDefinition.create("blank.png", [0, 0, 0, 0], [0]),
        TileDefinition.create("end.png", [1, 0, 0, 0]),
        TileDefinition.create("straight.png", [1, 0, 1, 0], [0, 1]),
        TileDefinition.create("corner.png", [1, 1, 0, 0], weight=2),
        TileDefinition.create("tee.png", [1, 1, 1, 0]),
        TileDefinition.create("cross.png", [1, 1, 1, 1], [0]),
    ]


@pytest.fixture
def pipe_catalog(pipe_tiles):
    return TileCatalog(pipe_tiles)


@pytest.fixture
def pipe_colors():
    return dict(PIPE_COLORS)


@pytest.fixture
def coin_flip_catalog():
    """
    For a 1x2 (width x height) grid: the top cell picks O or X with equal
    weight, and picking X dead-ends the cell below it.
    """
    return TileCatalog(
        [
            TileDefinition.create("o.png", [0, 0, 0, 0], [0]),
            TileDefinition.create("x.png", [0, 0, 1, 0], [0]),
        ]
    )


@pytest.fixture
def unsatisfiable_catalog():
    """A single tile with three pipe edges: no rotation fits a 1x1 grid."""
    return TileCatalog([TileDefinition.create("tee.png", [1, 1, 1, 0])])


def write_tile_config(directory, tiles, colors, **settings):
    """Write solid-colour PNG artwork and a config.yml for `tiles` into `directory`."""
    tile_dir = directory / "tiles"
    tile_dir.mkdir(exist_ok=True)

    entries = []
    for tile in tiles:
        Image.new("RGBA", (4, 4), colors[tile.name]).save(tile_dir / tile.name)
        entries.append(
            {
                "filename": f"tiles/{tile.name}",
                "edges": list(tile.edges),
                "rotations": list(tile.rotations),
                "weight": tile.weight,
            }
        )

    data = dict(settings)
    data["tiles"] = entries
    config_path = directory / "config.yml"
    with open(config_path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    return config_path


@pytest.fixture
def pipe_config(tmp_path, pipe_tiles):
    """Path to a config.yml with pipe tiles and real PNG artwork."""
    return write_tile_config(tmp_path, pipe_tiles, PIPE_COLORS, width=6, height=5, tile_size=4)


@pytest.fixture
def tile_config_writer(tmp_path):
    """Factory writing a config.yml plus artwork into tmp_path."""

    def _write(tiles, colors, **settings):
        return write_tile_config(tmp_path, tiles, colors, **settings)

    return _write
