"""Quick regression tests for the N-Queens command-line pipeline."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens.analysis import cli


class QuickRegressionTests(unittest.TestCase):
    """Verify that the lightweight regression checks pass."""

    def test_placer_and_sweep(self):
        """Ensure the placer and the sweep summary agree with known counts."""
        cli.run_quick_regression_tests()


if __name__ == "__main__":
    unittest.main()
