"""Command-line interface modules for puzzle execution.

This package contains the execution logic; the console script is a thin wrapper.
"""

from aoc23.cli.run_puzzle import run_puzzle

__all__ = ['run_puzzle']
