"""Tests for the counting sweep, its statistics and its reporting."""

from contextlib import redirect_stdout
import io
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens.analysis import settings
from nqueens.analysis.experiments import run_single_search, run_sweep, validate_search
from nqueens.analysis.reporting import SUMMARY_COLUMNS, build_summary_frame, print_summary
from nqueens.analysis.stats import ProgressPrinter, compute_detailed_statistics
from nqueens.placer import Square, place_queens


class SettingsIsolation(unittest.TestCase):
    """Restore module-level settings after each test."""

    def setUp(self):
        self._saved = (
            settings.DEMO_SIZE,
            list(settings.SWEEP_SIZES),
            settings.RUNS_PER_SIZE,
            settings.VALIDATE_SOLUTIONS,
        )

    def tearDown(self):
        (
            settings.DEMO_SIZE,
            settings.SWEEP_SIZES,
            settings.RUNS_PER_SIZE,
            settings.VALIDATE_SOLUTIONS,
        ) = self._saved


class StatisticsTests(unittest.TestCase):

    def test_empty_values(self):
        summary = compute_detailed_statistics([])
        self.assertEqual(summary["count"], 0)
        self.assertIsNone(summary["mean"])

    def test_summary_values(self):
        summary = compute_detailed_statistics([4.0, 1.0, 3.0, 2.0])
        self.assertEqual(summary["count"], 4)
        self.assertAlmostEqual(summary["mean"], 2.5)
        self.assertAlmostEqual(summary["median"], 2.5)
        self.assertEqual(summary["min"], 1.0)
        self.assertEqual(summary["max"], 4.0)
        self.assertEqual(summary["range"], 3.0)
        self.assertEqual(summary["q25"], 2.0)
        self.assertEqual(summary["q75"], 4.0)

    def test_single_value_has_zero_spread(self):
        summary = compute_detailed_statistics([0.5])
        self.assertEqual(summary["std"], 0.0)
        self.assertEqual(summary["q25"], 0.5)

    def test_progress_printer(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            ProgressPrinter(4, "Sweep").update(1, "N=4")
        self.assertEqual(buffer.getvalue().strip(), "[Sweep] 1/4 (25%) - N=4")


class ExperimentTests(SettingsIsolation):

    def test_single_search_record(self):
        record = run_single_search(6, validate=True)
        self.assertEqual(record["size"], 6)
        self.assertEqual(record["solutions"], 4)
        self.assertGreater(record["nodes"], 0)
        self.assertGreaterEqual(record["time"], 0.0)

    def test_validate_search_accepts_placer_output(self):
        validate_search(5, place_queens(5))

    def test_validate_search_rejects_wrong_count(self):
        with self.assertRaises(ValueError):
            validate_search(4, place_queens(4)[:1])

    def test_validate_search_rejects_invalid_solution(self):
        bad = (Square(0, 0), Square(1, 1), Square(2, 2), Square(3, 3))
        with self.assertRaises(ValueError):
            validate_search(4, [bad, bad])

    def test_validate_search_rejects_duplicates(self):
        solution = place_queens(4)[0]
        with self.assertRaises(ValueError):
            validate_search(4, [solution, solution])

    def test_sweep_counts_and_shape(self):
        with redirect_stdout(io.StringIO()):
            results = run_sweep([0, 2, 4, 6], runs=2, validate=True)
        self.assertEqual(sorted(results), [0, 2, 4, 6])
        self.assertEqual([results[n]["solutions"] for n in (0, 2, 4, 6)], [1, 0, 2, 4])
        entry = results[4]
        self.assertEqual(entry["total_runs"], 2)
        self.assertEqual(entry["expected"], 2)
        self.assertEqual(len(entry["raw_runs"]), 2)
        self.assertEqual(entry["time"]["count"], 2)

    def test_sweep_uses_settings_defaults(self):
        settings.SWEEP_SIZES = [1, 3]
        settings.RUNS_PER_SIZE = 1
        with redirect_stdout(io.StringIO()):
            results = run_sweep()
        self.assertEqual(sorted(results), [1, 3])
        self.assertEqual(results[1]["total_runs"], 1)

    def test_sweep_rejects_zero_runs(self):
        with self.assertRaises(ValueError):
            run_sweep([4], runs=0)

    def test_configure_rejects_bad_values(self):
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(ValueError):
                settings.configure(sweep_sizes=[4, -1])
            with self.assertRaises(ValueError):
                settings.configure(runs_per_size=0)
            with self.assertRaises(ValueError):
                settings.configure(demo_size=-2)

    def test_configure_sorts_and_deduplicates_sizes(self):
        with redirect_stdout(io.StringIO()):
            settings.configure(sweep_sizes=[6, 4, 6], validate=True)
        self.assertEqual(settings.SWEEP_SIZES, [4, 6])
        self.assertTrue(settings.VALIDATE_SOLUTIONS)


class ReportingTests(unittest.TestCase):

    def test_summary_frame(self):
        with redirect_stdout(io.StringIO()):
            results = run_sweep([4, 5], runs=1)
        frame = build_summary_frame(results)
        self.assertEqual(list(frame.columns), SUMMARY_COLUMNS)
        self.assertEqual(list(frame["N"]), [4, 5])
        self.assertEqual(list(frame["solutions"]), [2, 10])
        self.assertEqual(list(frame["expected"]), [2, 10])

    def test_unknown_size_has_missing_expected(self):
        results = {
            20: {"size": 20, "solutions": 0, "expected": None, "nodes": 0, "total_runs": 1, "time": compute_detailed_statistics([0.1])},
        }
        frame = build_summary_frame(results)
        self.assertTrue(frame["expected"].isna().all())

    def test_print_summary(self):
        with redirect_stdout(io.StringIO()):
            results = run_sweep([4], runs=1)
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            print_summary(results)
        output = buffer.getvalue()
        self.assertIn("solutions", output)
        self.assertIn("time_mean", output)

    def test_print_empty_summary(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            print_summary({})
        self.assertIn("No sweep results", buffer.getvalue())


if __name__ == "__main__":
    unittest.main()
