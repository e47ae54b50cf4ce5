"""Pipeline modules.

- runner: Day dispatch, logging setup and answer reporting
"""

from aoc23.pipeline.runner import PuzzleRunner

__all__ = [
    "PuzzleRunner",
]
