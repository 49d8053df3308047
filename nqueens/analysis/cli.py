"""Command-line interface for N-Queens counting.

This module wires together configuration loading, the demonstration count,
single-size listings, and the counting sweep. It isolates I/O, argument
parsing, and progress reporting from the core placer so that the rest of the
codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from . import settings
from .experiments import run_single_search, run_sweep, validate_search
from .reporting import build_summary_frame, print_summary
from config_manager import ConfigManager
from nqueens.counting import count_queen_placements
from nqueens.placer import place_queens, queens_attack, Square
from nqueens.utils import is_valid_solution, solution_columns

DEFAULT_CONFIG_PATH = "config.json"


# ------------- Utils --------------------------------------------------------

def parse_size_list(size_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize ``--sizes`` inputs into a flat list of board sizes.

    Accepts repeated flags (e.g., ``--sizes 4 --sizes 8``), comma-separated
    lists (``--sizes 4,5,6``) and inclusive ranges (``--sizes 4-8``). Returns
    ``None`` when no filter is provided so that callers can fall back to the
    configured default set.
    """
    if not size_args:
        return None
    selected: List[int] = []
    for entry in size_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                bounds = [int(part) for part in token.split("-", 1)]
            except ValueError as exc:
                raise ValueError(f"Invalid board size '{token}'") from exc
            if len(bounds) == 1:
                selected.append(bounds[0])
                continue
            low, high = bounds
            if low > high:
                raise ValueError(f"Reversed size range '{token}' (expected low-high)")
            selected.extend(range(low, high + 1))
    unique = list(dict.fromkeys(selected))  # preserve order, remove dups
    return unique or None


def apply_configuration(config_path: Optional[str]) -> Optional[ConfigManager]:
    """Load configuration and push its values into ``settings``.

    When ``config_path`` is None the default ``config.json`` is read only if
    it exists; built-in settings are kept otherwise. An explicit path that
    does not exist raises ``FileNotFoundError``.
    """
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            return None
        config_path = DEFAULT_CONFIG_PATH

    config_mgr = ConfigManager(config_path)
    exp = config_mgr.get_experiment_settings()
    try:
        demo_size = int(exp["demo_size"]) if "demo_size" in exp else None
        sweep_sizes = [int(n) for n in exp["sweep_sizes"]] if "sweep_sizes" in exp else None
        runs_per_size = int(exp["runs_per_size"]) if "runs_per_size" in exp else None
    except TypeError as exc:
        raise ValueError(f"Invalid experiment_settings in {config_path}: {exc}") from exc
    validate = exp.get("validate")
    if validate is not None and not isinstance(validate, bool):
        raise ValueError(f"experiment_settings.validate must be true or false, got {validate!r}")
    settings.configure(
        demo_size=demo_size,
        sweep_sizes=sweep_sizes,
        runs_per_size=runs_per_size,
        validate=validate,
        verbose=False,
    )
    return config_mgr


def non_negative_int(value: str) -> int:
    """argparse type for board sizes."""
    size = int(value)
    if size < 0:
        raise argparse.ArgumentTypeError(f"board size must be non-negative, got {size}")
    return size


def positive_int(value: str) -> int:
    """argparse type for run counts."""
    runs = int(value)
    if runs < 1:
        raise argparse.ArgumentTypeError(f"value must be at least 1, got {runs}")
    return runs


# ------------- Pipelines ----------------------------------------------------

def run_demo(size: Optional[int] = None, validate: bool = False) -> int:
    """Print and return the solution count for ``size`` (default: DEMO_SIZE)."""
    if size is None:
        size = settings.DEMO_SIZE
    if validate:
        solutions = place_queens(size)
        validate_search(size, solutions)
        count = len(solutions)
    else:
        count = count_queen_placements(size)
    print(count)
    return count


def run_listing(size: int, validate: bool = False) -> int:
    """Print each solution for ``size`` as its per-row column list."""
    solutions = place_queens(size)
    if validate:
        validate_search(size, solutions)
    for solution in solutions:
        print(solution_columns(solution))
    print(f"{len(solutions)} solutions for N={size}")
    return len(solutions)


def run_quick_regression_tests() -> None:
    """Run lightweight deterministic checks on the placer and the sweep."""

    print("Running quick regression tests...")

    if not queens_attack(Square(0, 1), Square(2, 3)):
        raise AssertionError("Squares (0, 1) and (2, 3) share a diagonal but were not reported as attacking.")
    if queens_attack(Square(0, 0), Square(1, 2)):
        raise AssertionError("Squares (0, 0) and (1, 2) were reported as attacking.")

    four = [solution_columns(solution) for solution in place_queens(4)]
    if four != [[1, 3, 0, 2], [2, 0, 3, 1]]:
        raise AssertionError(f"Unexpected solutions for N=4: {four}")
    print(f"  Placer: N=4 solutions {four}")

    record = run_single_search(8, validate=True)
    if record["solutions"] != 92:
        raise AssertionError(f"Expected 92 solutions for N=8, got {record['solutions']}.")
    print(f"  Placer: N=8 -> {record['solutions']} solutions, {record['nodes']} nodes in {record['time']:.4f}s")

    if not all(is_valid_solution(solution, 6) for solution in place_queens(6)):
        raise AssertionError("Invalid solution reported for N=6.")

    sizes = list(range(0, 7))
    results = run_sweep(sizes, runs=2, validate=True, progress_label="Quick regression sweep")
    frame = build_summary_frame(results)
    if list(frame["N"]) != sizes or list(frame["solutions"]) != [settings.KNOWN_COUNTS[n] for n in sizes]:
        raise AssertionError("Sweep summary does not match the known solution counts.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Count N-Queens solutions. Without arguments, prints the count for the demo size."
    )
    parser.add_argument("--size", "-n", type=non_negative_int, help="Board size to count (default: demo size from settings).")
    parser.add_argument("--list", action="store_true", help="Print every solution as a per-row column list.")
    parser.add_argument("--sweep", action="store_true", help="Count solutions over the configured range of sizes and print a summary table.")
    parser.add_argument("--sizes", action="append", help="Sizes for --sweep (comma-separated, ranges like 4-8, or multiple flags).")
    parser.add_argument("--runs", type=positive_int, help="Repetitions per size for --sweep.")
    parser.add_argument("--config", default=None, help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH} if present).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Validate every solution and compare counts with known values (applies to the demo count, --size, --list and --sweep).")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        sizes = parse_size_list(args.sizes)
        apply_configuration(args.config)
        if sizes is not None or args.runs is not None or args.validate:
            settings.configure(
                sweep_sizes=sizes,
                runs_per_size=args.runs,
                validate=True if args.validate else None,
                verbose=False,
            )
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    try:
        if args.sweep:
            settings.print_settings()
            results = run_sweep(progress_label="Counting sweep")
            print_summary(results)
        elif args.list:
            size = args.size if args.size is not None else settings.DEMO_SIZE
            run_listing(size, validate=settings.VALIDATE_SOLUTIONS)
        else:
            run_demo(args.size, validate=settings.VALIDATE_SOLUTIONS)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except ValueError as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc
