"""
Tile Mosaic - PIL Renderer

PIL-based rendering of a resolved grid into a single mosaic image.
Used by generate.py to write the final PNG.
"""

from pathlib import Path

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.grid import Grid
from ..core.tiles import TileCatalog

# Rotation step -> PIL transpose. PIL's ROTATE_* are counter-clockwise, which
# brings the tile's right edge to the top for step 1, matching edge_of().
_TRANSPOSE = {
    1: Image.Transpose.ROTATE_90,
    2: Image.Transpose.ROTATE_180,
    3: Image.Transpose.ROTATE_270,
}


def load_tile_images(
    catalog: TileCatalog,
    base_dir: Path | str,
    tile_size: int,
) -> dict[str, Image.Image]:
    """
    Load the artwork for every tile in the catalog.

    Args:
        catalog: Tiles whose names are image paths
        base_dir: Directory relative tile paths are resolved against
        tile_size: Edge length in pixels; images of another size are scaled
            with nearest-neighbour resampling

    Returns:
        Dictionary mapping tile name to an RGBA image of tile_size x tile_size

    Raises:
        FileNotFoundError: If a tile image does not exist
    """
    base = Path(base_dir)
    images = {}

    for tile in catalog:
        path = Path(tile.name)
        if not path.is_absolute():
            path = base / path
        if not path.exists():
            raise FileNotFoundError(f"Image for tile '{tile.name}' not found: {path}")

        with Image.open(path) as src:
            img = src.convert("RGBA")
        if img.size != (tile_size, tile_size):
            img = img.resize((tile_size, tile_size), Image.Resampling.NEAREST)
        images[tile.name] = img

    return images


def rotate_tile_image(image: Image.Image, rotation: int) -> Image.Image:
    """Rotate tile artwork by `rotation` quarter turns."""
    step = rotation % 4
    if step == 0:
        return image
    return image.transpose(_TRANSPOSE[step])


def render_grid_to_image(
    grid: Grid,
    catalog: TileCatalog,
    images: dict[str, Image.Image],
    tile_size: int,
) -> Image.Image:
    """
    Composite a resolved grid into one image.

    Args:
        grid: Fully resolved grid
        catalog: Catalog the grid's tile indices refer to
        images: Tile artwork keyed by tile name (see load_tile_images)
        tile_size: Pixel size of each cell

    Returns:
        RGBA image of (width * tile_size) x (height * tile_size)

    Raises:
        ValueError: If the grid has unresolved cells
        KeyError: If a placed tile has no image
    """
    if not grid.is_complete():
        raise ValueError(
            f"Cannot render incomplete grid: {grid.resolved_count} of "
            f"{grid.width * grid.height} cells resolved"
        )

    img = Image.new("RGBA", (grid.width * tile_size, grid.height * tile_size))

    # Rotated artwork is reused across cells
    cache: dict[tuple[int, int], Image.Image] = {}

    for x, y, cell in grid.resolved_cells():
        key = (cell.tile_index, cell.rotation)
        tile_img = cache.get(key)
        if tile_img is None:
            name = catalog[cell.tile_index].name
            tile_img = rotate_tile_image(images[name], cell.rotation)
            cache[key] = tile_img

        img.paste(tile_img, (x * tile_size, y * tile_size))

    return img
