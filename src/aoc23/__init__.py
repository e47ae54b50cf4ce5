"""`aoc23` - Advent of Code 2023 puzzle solvers.

Subpackages:
- almanac: Range-remapping engine for the seed almanac (day 5)
- puzzles: Line-scanning solvers for days 1-4
- pipeline: Runner dispatching days and reporting answers
- schemas: Layered configuration
"""

__version__ = "0.1.0"
