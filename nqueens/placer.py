"""Exhaustive backtracking placer for the N-Queens problem.

This module enumerates every arrangement of N non-attacking queens on an
N x N board, one queen per row. It exposes:

- queens_attack(a, b): symmetric attack predicate between two squares.
- QueenPlacer(size): a single stateful search object that runs the search.
- place_queens(size): convenience entry point returning all solutions.

Representation
--------------
A queen position is a ``Square(row, column)``. The live placement is a
single list of squares where ``placement[i]`` is the queen on row ``i``;
rows are always filled in order 0, 1, 2, ... A solution is an immutable
tuple snapshot of a full placement.

Search strategy
---------------
Depth-first, non-recursive. For the next empty row, columns are scanned in
ascending order starting at a resume column; the first square that no placed
queen attacks is taken. When a row has no candidate left (or the board is
full) the placement is recorded if complete, then the search backtracks by
popping queens until one can move one column to the right.

Because columns are tried ascending, solutions are returned in lexicographic
order of their per-row column lists.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple


class Square(NamedTuple):
    """Position of a single queen."""

    row: int
    column: int


Solution = Tuple[Square, ...]


def queens_attack(queen_a: Square, queen_b: Square) -> bool:
    """Return True if queens on the two squares attack each other.

    Two squares attack when they share a row, share a column, or lie on the
    same diagonal. The relation is symmetric.
    """
    if queen_a.row == queen_b.row or queen_a.column == queen_b.column:
        return True
    return abs(queen_a.row - queen_b.row) == abs(queen_a.column - queen_b.column)


class QueenPlacer:
    """Stateful iterative backtracking search over one board size.

    Parameters
    ----------
    size : int
        Board dimension N. No upper bound is enforced; the number of explored
        nodes grows roughly factorially with N.

    Attributes
    ----------
    nodes_explored : int
        Number of candidate squares tested against the placed queens. Updated
        while ``place_queens`` runs.
    """

    def __init__(self, size: int):
        self.size = size
        self.nodes_explored = 0
        self._queen_positions: List[Square] = []

    def place_queens(self) -> List[Solution]:
        """Run the search to exhaustion and return every solution found.

        Returns
        -------
        list[tuple[Square, ...]]
            Solutions in discovery order. Each solution holds ``size`` squares
            ordered by row. For ``size == 0`` the result is a single empty
            solution.
        """
        solutions: List[Solution] = []
        first_possible_column = 0
        while True:
            row = self.next_row_for_placement()
            if row is not None and self.attempt_to_place_queen_on_row(row, first_possible_column):
                first_possible_column = 0
                continue

            if self.found_solution():
                self.record_solution(solutions)

            resume_column = self.backtrack()
            if resume_column is None:
                break
            first_possible_column = resume_column
        return solutions

    def next_row_for_placement(self) -> Optional[int]:
        """Return the next empty row, or None when every row holds a queen."""
        rows_filled = len(self._queen_positions)
        if rows_filled == self.size:
            return None
        return rows_filled

    def attempt_to_place_queen_on_row(self, row: int, first_possible_column: int) -> bool:
        """Place a queen on the first safe column of ``row`` at or after ``first_possible_column``."""
        for column in range(first_possible_column, self.size):
            square = Square(row, column)
            self.nodes_explored += 1
            if self.can_place_queen_at(square):
                self.place_queen(square)
                return True
        return False

    def can_place_queen_at(self, square: Square) -> bool:
        return not any(queens_attack(queen, square) for queen in self._queen_positions)

    def place_queen(self, square: Square) -> None:
        if square.row != len(self._queen_positions):
            raise AssertionError(
                f"Queen placed on row {square.row}, expected row {len(self._queen_positions)}"
            )
        if not self.can_place_queen_at(square):
            raise AssertionError(f"Queen placed on attacked square {square}")
        self._queen_positions.append(square)

    def found_solution(self) -> bool:
        return len(self._queen_positions) == self.size

    def record_solution(self, solutions: List[Solution]) -> None:
        """Append an immutable snapshot of the current full placement."""
        if len(self._queen_positions) != self.size:
            raise AssertionError(
                f"Recording incomplete placement: {len(self._queen_positions)} of {self.size} queens"
            )
        solutions.append(tuple(self._queen_positions))

    def backtrack(self) -> Optional[int]:
        """Undo placements until a queen can advance to the next column.

        Queens sitting on the last column have no alternative left on their
        row, so they are popped as well. Returns the column to resume from on
        the row of the last popped queen, or None when the placement is empty
        and the search space is exhausted.
        """
        while self._queen_positions:
            last_queen = self._queen_positions.pop()
            if last_queen.column < self.size - 1:
                return last_queen.column + 1
        return None


def place_queens(size: int) -> List[Solution]:
    """Enumerate all N-Queens solutions for a board of the given size."""
    placer = QueenPlacer(size)
    return placer.place_queens()
