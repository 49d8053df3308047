"""Solution counting on top of the exhaustive placer."""

from __future__ import annotations

from .placer import place_queens


def count_queen_placements(size: int) -> int:
    """Return how many N-Queens solutions exist for a board of ``size``.

    The full search always runs before the count is available. Negative
    sizes are not rejected; they simply yield no solutions.
    """
    return len(place_queens(int(size)))
