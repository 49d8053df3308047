"""Utility helpers for the N-Queens project.

This module provides reusable, low-level primitives used by the analysis
pipeline and the tests to check solutions produced by the placer. It
includes two implementations to count the number of attacking queen pairs in
a given placement.

Representation
--------------
Solutions are sequences of ``Square(row, column)`` ordered by row, so that
``solution[i].row == i``.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from .placer import Square, queens_attack


def solution_columns(solution: Sequence[Square]) -> List[int]:
    """Return the per-row column list of a solution (e.g. ``[1, 3, 0, 2]``)."""
    return [square.column for square in solution]


def conflicts(solution: Sequence[Square]) -> int:
    """Compute the number of attacking queen pairs in O(N).

    Uses hash maps to count occurrences per row, column and diagonals instead
    of comparing every pair.
    """
    row_count: Counter[int] = Counter()
    column_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for square in solution:
        row_count[square.row] += 1
        column_count[square.column] += 1
        diag1[square.row - square.column] += 1
        diag2[square.row + square.column] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(row_count) + _pairs(column_count) + _pairs(diag1) + _pairs(diag2)


def conflicts_on2(solution: Sequence[Square]) -> int:
    """Compute the number of attacking queen pairs in O(N^2).

    Reference implementation built on ``queens_attack``. Pairs that share
    both a row and a diagonal count once here, while ``conflicts`` counts
    them per line; the two agree on any placement with one queen per row.
    """
    n = len(solution)
    conflicts_count = 0
    for i in range(n):
        for j in range(i + 1, n):
            if queens_attack(solution[i], solution[j]):
                conflicts_count += 1
    return conflicts_count


def is_valid_solution(solution: Sequence[Square], size: int) -> bool:
    """Return True if ``solution`` is a complete N-Queens solution for ``size``.

    Contract
    - Input: sequence of squares ordered by row
    - Valid if: exactly ``size`` squares, rows are 0..size-1 in order, every
      column is in range and no two queens attack each other
    - The empty solution is valid for ``size == 0``
    """
    if len(solution) != size:
        return False
    for index, square in enumerate(solution):
        if square.row != index:
            return False
        if not isinstance(square.column, int):
            return False
        if square.column < 0 or square.column >= size:
            return False
    return conflicts(solution) == 0
