"""Counting sweep over a range of board sizes.

Runs the exhaustive placer repeatedly for each requested size, records the
solution count, explored nodes and wall-clock time of every run, and folds
the runs into one ``SweepEntry`` per size. Validation hooks optionally check
every solution and compare counts against the known sequence.
"""
from __future__ import annotations

from time import perf_counter
from typing import List, Optional, Sequence

from . import settings
from .stats import (
    ProgressPrinter,
    SweepEntry,
    SweepRecord,
    SweepResults,
    compute_detailed_statistics,
)
from nqueens.placer import QueenPlacer, Solution
from nqueens.utils import is_valid_solution


def run_single_search(size: int, validate: bool = False) -> SweepRecord:
    """Run one full search for ``size`` and return its measurements."""
    placer = QueenPlacer(size)
    start = perf_counter()
    solutions = placer.place_queens()
    elapsed = perf_counter() - start
    if validate:
        validate_search(size, solutions)
    return {
        "size": size,
        "solutions": len(solutions),
        "nodes": placer.nodes_explored,
        "time": elapsed,
    }


def validate_search(size: int, solutions: Sequence[Solution]) -> None:
    """Check a search result for correctness.

    Raises
    ------
    ValueError
        If a solution is incomplete or contains attacking queens, if a
        solution is repeated, or if the count disagrees with
        ``settings.KNOWN_COUNTS`` for this size.
    """
    for index, solution in enumerate(solutions):
        if not is_valid_solution(solution, size):
            raise ValueError(f"Invalid solution #{index} for N={size}: {list(solution)}")
    if len(set(solutions)) != len(solutions):
        raise ValueError(f"Duplicate solutions reported for N={size}")
    expected = settings.KNOWN_COUNTS.get(size)
    if expected is not None and len(solutions) != expected:
        raise ValueError(
            f"Solution count mismatch for N={size}: got {len(solutions)}, expected {expected}"
        )


def run_sweep(
    sizes: Optional[List[int]] = None,
    runs: Optional[int] = None,
    validate: Optional[bool] = None,
    progress_label: Optional[str] = None,
) -> SweepResults:
    """Count solutions for every size, repeating each search ``runs`` times.

    Parameters default to the current values in ``nqueens.analysis.settings``.
    Each size's count and node total must be identical across runs since the
    search is deterministic; a difference raises ``ValueError``.
    """
    if sizes is None:
        sizes = settings.SWEEP_SIZES
    if runs is None:
        runs = settings.RUNS_PER_SIZE
    if validate is None:
        validate = settings.VALIDATE_SOLUTIONS
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")

    progress = ProgressPrinter(len(sizes), progress_label or "Sweep")
    results: SweepResults = {}
    for index, size in enumerate(sizes, start=1):
        records = [run_single_search(size, validate=validate) for _ in range(runs)]

        counts = {record["solutions"] for record in records}
        nodes = {record["nodes"] for record in records}
        if len(counts) != 1 or len(nodes) != 1:
            raise ValueError(f"Non-deterministic search for N={size}: counts={counts}, nodes={nodes}")

        entry: SweepEntry = {
            "size": size,
            "solutions": records[0]["solutions"],
            "nodes": records[0]["nodes"],
            "total_runs": runs,
            "expected": settings.KNOWN_COUNTS.get(size),
            "validated": validate,
            "time": compute_detailed_statistics([record["time"] for record in records]),
            "raw_runs": records,
        }
        results[size] = entry
        progress.update(index, f"N={size}: {entry['solutions']} solutions")
    return results
