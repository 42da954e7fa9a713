"""
Tile Mosaic - Tile Configuration

Loads the YAML tile configuration into a validated TileCatalog plus the
generation settings that travel with it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.tiles import TileCatalog

DEFAULT_CONFIG_PATH = "config.yml"
DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 40
DEFAULT_TILE_SIZE = 15
DEFAULT_OUTPUT = "output.png"


@dataclass
class TileConfig:
    """Parsed configuration file."""

    catalog: TileCatalog
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tile_size: int = DEFAULT_TILE_SIZE
    output: str = DEFAULT_OUTPUT
    base_dir: Path = Path(".")

    def resolve_tile_path(self, name: str) -> Path:
        """Tile filenames are relative to the directory holding the config."""
        path = Path(name)
        if path.is_absolute():
            return path
        return self.base_dir / path


def _positive_int(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def parse_tile_config(data: Any, base_dir: Optional[Path] = None) -> TileConfig:
    """
    Build a TileConfig from an already-parsed mapping.

    Args:
        data: Mapping with a 'tiles' list and optional settings
        base_dir: Directory tile filenames are relative to

    Returns:
        TileConfig with a validated catalog

    Raises:
        ValueError: If the document structure or a setting is invalid
        InvalidTileDefinitionError: If a tile entry is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Tile configuration must be a mapping with a 'tiles' section")

    tiles = data.get("tiles")
    if not isinstance(tiles, list):
        raise ValueError("Missing 'tiles' list in tile configuration")

    catalog = TileCatalog.from_dicts(tiles)

    output = data.get("output", DEFAULT_OUTPUT)
    if not isinstance(output, str) or not output:
        raise ValueError(f"'output' must be a file path, got {output!r}")

    return TileConfig(
        catalog=catalog,
        width=_positive_int(data, "width", DEFAULT_WIDTH),
        height=_positive_int(data, "height", DEFAULT_HEIGHT),
        tile_size=_positive_int(data, "tile_size", DEFAULT_TILE_SIZE),
        output=output,
        base_dir=base_dir if base_dir is not None else Path("."),
    )


def load_tile_config(path: str | Path = DEFAULT_CONFIG_PATH) -> TileConfig:
    """
    Load a tile configuration file (YAML; JSON files also parse).

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or is structurally wrong
        InvalidTileDefinitionError: If a tile entry is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Tile configuration not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}")

    return parse_tile_config(data, base_dir=config_path.parent)

