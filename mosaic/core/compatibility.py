"""
Tile Mosaic - Edge Compatibility

Pure functions deciding whether two placed tiles agree on their shared edge.
"""

from .tiles import OPPOSITE, TileDefinition


def opposite_side(side: int) -> int:
    """Get the side facing `side` across a shared edge."""
    return OPPOSITE[side]


def edge_of(tile: TileDefinition, rotation: int, side: int) -> int:
    """
    Get the edge code a tile presents on `side` when placed at `rotation`.

    Rotation shifts which stored edge faces each side; edge values themselves
    are never transformed.
    """
    return tile.edges[(side + rotation) % 4]


def compatible(
    candidate: TileDefinition,
    candidate_rotation: int,
    neighbor: TileDefinition,
    neighbor_rotation: int,
    shared_side: int,
) -> bool:
    """
    Check whether a candidate agrees with a neighbour on their shared edge.

    Args:
        candidate: Tile being considered
        candidate_rotation: Rotation step of the candidate
        neighbor: Tile already placed (or the boundary tile)
        neighbor_rotation: Rotation step of the neighbour
        shared_side: Side of the candidate that faces the neighbour

    Returns:
        True if the facing edge codes are equal
    """
    return edge_of(candidate, candidate_rotation, shared_side) == edge_of(
        neighbor, neighbor_rotation, opposite_side(shared_side)
    )
