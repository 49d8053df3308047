"""Tabular summaries of sweep results.

Builds a ``pandas`` table with one row per board size and renders it to
stdout. Nothing is written to disk.
"""
from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from .stats import SweepResults

SUMMARY_COLUMNS = [
    "N",
    "solutions",
    "expected",
    "nodes",
    "runs",
    "time_mean",
    "time_median",
    "time_std",
    "time_min",
    "time_max",
]


def build_summary_frame(results: SweepResults) -> pd.DataFrame:
    """Return one row per size, ordered by N.

    ``expected`` is left empty for sizes outside the known-count table.
    """
    rows: List[Dict[str, Any]] = []
    for size in sorted(results):
        entry = results[size]
        time_stats = entry.get("time", {})
        rows.append(
            {
                "N": size,
                "solutions": entry.get("solutions"),
                "expected": entry.get("expected"),
                "nodes": entry.get("nodes"),
                "runs": entry.get("total_runs"),
                "time_mean": time_stats.get("mean"),
                "time_median": time_stats.get("median"),
                "time_std": time_stats.get("std"),
                "time_min": time_stats.get("min"),
                "time_max": time_stats.get("max"),
            }
        )
    frame = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    frame["expected"] = frame["expected"].astype("Int64")
    return frame


def print_summary(results: SweepResults) -> None:
    """Print the summary table of a sweep."""
    if not results:
        print("No sweep results to report.")
        return
    frame = build_summary_frame(results)
    print(frame.to_string(index=False, float_format=lambda value: f"{value:.6f}"))
