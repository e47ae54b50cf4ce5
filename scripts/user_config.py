"""aoc23 User Configuration.

User-facing overrides for the puzzle runner. Defaults live in
aoc23.schemas.param.ParamConfig.

Usage:
    aoc23 5 data/day_5.dat --config scripts/user_config.py
    aoc23 2 data/day_2.dat --config scripts/user_config.py --part 1
"""

CONFIG = {
    # ========================================================================
    # RUNNER
    # ========================================================================
    "PARTS": [1, 2],          # Puzzle parts to solve
    "LOG_LEVEL": "INFO",      # DEBUG traces frontiers and per-line values
    "LOG_FILE": None,         # e.g. "logs/aoc23.log"

    # ========================================================================
    # ALMANAC (DAY 5)
    # ========================================================================
    "WORKERS": 1,             # Threads evaluating seed ranges
    "CONTRACT_POLICY": "fail_fast",  # "skip" disables split/map checks

    # ========================================================================
    # CUBE GAME (DAY 2) - bag contents
    # ========================================================================
    "RED": 12,
    "GREEN": 13,
    "BLUE": 14,

    # ========================================================================
    # SCHEMATIC (DAY 3)
    # ========================================================================
    "GEAR_SYMBOL": "*",
}
