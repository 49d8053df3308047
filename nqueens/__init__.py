"""N-Queens exhaustive placement and counting."""

from .placer import QueenPlacer, Solution, Square, place_queens, queens_attack
from .counting import count_queen_placements
from .utils import conflicts, conflicts_on2, is_valid_solution, solution_columns

__all__ = [
    "Square",
    "Solution",
    "QueenPlacer",
    "place_queens",
    "queens_attack",
    "count_queen_placements",
    "conflicts",
    "conflicts_on2",
    "is_valid_solution",
    "solution_columns",
]
