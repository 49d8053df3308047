"""
Analysis and orchestration package for N-Queens counting.

This package contains:
- settings: global knobs and known solution counts
- stats: typed summaries and aggregation helpers
- experiments: repeated counting runs over a range of board sizes
- reporting: tabular summaries printed to stdout
- cli: top-level entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    SweepRecord,
    SweepEntry,
    SweepResults,
    compute_detailed_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "SweepRecord",
    "SweepEntry",
    "SweepResults",
    # utils
    "compute_detailed_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
