"""Almanac range-remapping engine.

- model: Range, Rule, Stage
- parser: Mapping tables and seeds
- ranges: Range splitting and mapping
- propagation: Pipeline driver and solver
"""

from aoc23.almanac.model import Range, Rule, Stage
from aoc23.almanac.parser import parse_almanac, parse_stages, extract_seeds
from aoc23.almanac.ranges import split_range, map_piece
from aoc23.almanac.propagation import propagate, propagate_value, lowest_location, AlmanacSolver

__all__ = [
    "Range",
    "Rule",
    "Stage",
    "parse_almanac",
    "parse_stages",
    "extract_seeds",
    "split_range",
    "map_piece",
    "propagate",
    "propagate_value",
    "lowest_location",
    "AlmanacSolver",
]
