"""Line-scanning puzzle solvers.

- trebuchet: Calibration values (day 1)
- cube_conundrum: Cube games (day 2)
- gear_ratios: Engine schematic (day 3)
- scratchcards: Scratchcard scoring (day 4)
"""

from aoc23.puzzles.trebuchet import calibrate
from aoc23.puzzles.cube_conundrum import sum_permitted_ids, sum_game_power
from aoc23.puzzles.gear_ratios import Schematic
from aoc23.puzzles.scratchcards import ScoringPolicy, total_score, total_cards_won

__all__ = [
    "calibrate",
    "sum_permitted_ids",
    "sum_game_power",
    "Schematic",
    "ScoringPolicy",
    "total_score",
    "total_cards_won",
]
