"""Global settings for the N-Queens analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via ``configure`` or the configuration
loader in `nqueens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from typing import Dict, List, Optional

# Board size used by the demonstration entry point
DEMO_SIZE: int = 4

# Board sizes to evaluate (in ascending order) for the counting sweep
SWEEP_SIZES: List[int] = [0, 1, 2, 3, 4, 5, 6, 7, 8]

# Repetitions per size; the search is deterministic, extra runs only sharpen timings
RUNS_PER_SIZE: int = 3

# When True, every solution is checked and counts are compared to KNOWN_COUNTS
VALIDATE_SOLUTIONS: bool = False

# Number of solutions per board size (OEIS A000170)
KNOWN_COUNTS: Dict[int, int] = {
    0: 1,
    1: 1,
    2: 0,
    3: 0,
    4: 2,
    5: 10,
    6: 4,
    7: 40,
    8: 92,
    9: 352,
    10: 724,
    11: 2680,
    12: 14200,
}


def configure(
        demo_size: Optional[int] = None,
        sweep_sizes: Optional[List[int]] = None,
        runs_per_size: Optional[int] = None,
        validate: Optional[bool] = None,
        verbose: bool = True,
) -> None:
        """Override pipeline settings; ``None`` leaves a value unchanged.

        Raises
        - ValueError: negative board sizes or a non-positive run count.

        Side effects
        - Updates module-level globals. With ``verbose`` it also prints a concise
            summary to stdout to make the active settings explicit at run start.
        """
        global DEMO_SIZE, SWEEP_SIZES, RUNS_PER_SIZE, VALIDATE_SOLUTIONS
        if demo_size is not None:
                if demo_size < 0:
                        raise ValueError(f"demo_size must be non-negative, got {demo_size}")
                DEMO_SIZE = demo_size
        if sweep_sizes is not None:
                negative = [n for n in sweep_sizes if n < 0]
                if negative:
                        raise ValueError(f"sweep_sizes must be non-negative, got {negative}")
                SWEEP_SIZES = sorted(set(sweep_sizes))
        if runs_per_size is not None:
                if runs_per_size < 1:
                        raise ValueError(f"runs_per_size must be at least 1, got {runs_per_size}")
                RUNS_PER_SIZE = runs_per_size
        if validate is not None:
                VALIDATE_SOLUTIONS = validate

        if verbose:
                print_settings()


def print_settings() -> None:
        """Print the active settings."""
        print("Settings configured:")
        print(f"   - Demo size: {DEMO_SIZE}")
        print(f"   - Sweep sizes: {SWEEP_SIZES}")
        print(f"   - Runs per size: {RUNS_PER_SIZE}")
        print(f"   - Validation: {'on' if VALIDATE_SOLUTIONS else 'off'}")
