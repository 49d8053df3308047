"""Script entry point: ``python algo.py`` prints the solution count for N=4.

See ``nqueens.analysis.cli`` for the available flags.
"""
from nqueens.analysis.cli import main


if __name__ == "__main__":
    main()
