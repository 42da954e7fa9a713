"""
Tile Mosaic - Weighted Selection

Linear weighted pick over a candidate list using a caller-supplied random
source.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from .candidates import Candidate


class RandomSource(Protocol):
    def random(self) -> float: ...


class DegenerateWeightsError(Exception):
    """Raised when every candidate for a cell has zero (or negative) weight."""

    def __init__(self, candidate_count: int, x: int | None = None, y: int | None = None):
        self.candidate_count = candidate_count
        self.x = x
        self.y = y
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f" at cell ({self.x}, {self.y})" if self.x is not None else ""
        return (
            f"Total candidate weight is zero{where}: "
            f"{self.candidate_count} candidate(s), none selectable"
        )


def select(candidates: Sequence[Candidate], rng: RandomSource) -> Candidate:
    """
    Pick one candidate with probability proportional to its tile weight.

    Draws exactly one number from `rng`. Candidates are scanned in the order
    given, so a fixed random stream always lands on the same candidate.

    Args:
        candidates: Non-empty candidate list
        rng: Source with a random() method returning floats in [0, 1)

    Returns:
        The selected candidate

    Raises:
        ValueError: If candidates is empty
        DegenerateWeightsError: If the total weight is not positive
    """
    if not candidates:
        raise ValueError("Cannot select from an empty candidate list")

    total = sum(candidate.weight for candidate in candidates)
    if not total > 0:
        raise DegenerateWeightsError(len(candidates))

    remainder = rng.random() * total
    for candidate in candidates:
        remainder -= candidate.weight
        if remainder < 0:
            return candidate

    # Rounding can leave a tiny non-negative remainder after the last weight
    return next(candidate for candidate in reversed(candidates) if candidate.weight > 0)
