"""Puzzle runner.

Dispatches a day to its solver, runs the configured parts against one input
document, and reports the answers. Owns logging setup for a run.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Dict, List, Union, TYPE_CHECKING

from aoc23.almanac import AlmanacSolver
from aoc23.puzzles import trebuchet, cube_conundrum, scratchcards
from aoc23.puzzles.gear_ratios import Schematic
from aoc23.puzzles.scratchcards import ScoringPolicy
from aoc23.reader import read_document

if TYPE_CHECKING:
    from aoc23.schemas import InternalConfig

__all__ = ['PuzzleRunner', 'PUZZLE_TITLES']

logger = logging.getLogger(__name__)

PUZZLE_TITLES = {
    1: "Trebuchet?!",
    2: "Cube Conundrum",
    3: "Gear Ratios",
    4: "Scratchcards",
    5: "If You Give A Seed A Fertilizer",
}


class PuzzleRunner:
    """Runs one day's puzzle parts against an input document.

    Every day has two parts:

    1. Trebuchet: calibration with digits only / with spelled digits
    2. Cube games: sum of permitted game ids / sum of game powers
    3. Schematic: sum of part numbers / sum of gear ratios
    4. Scratchcards: total doubling score / total cards won
    5. Almanac: lowest location for scalar seeds / for seed ranges

    Example usage::

        runner = PuzzleRunner(config)
        answers = runner.run(5, "data/day_5.dat")   # {1: 35, 2: 46}
    """

    def __init__(self, config: "InternalConfig"):
        """Initialize runner with validated configuration.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.
        """
        self.config = config
        self._parsed: Dict[str, object] = {}
        self._solvers: Dict[int, Callable[[str, int], int]] = {
            1: self._solve_trebuchet,
            2: self._solve_cube_game,
            3: self._solve_gear_ratios,
            4: self._solve_scratchcards,
            5: self._solve_almanac,
        }

    def setup_logging(self) -> None:
        """Configure the root logger from config.

        Replaces existing root handlers with a console handler and, when
        ``logging.file`` is set, a file handler.
        """
        log_level = getattr(logging, self.config.logging.level, logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root = logging.getLogger()
        root.setLevel(log_level)
        for handler in root.handlers[:]:
            root.removeHandler(handler)

        ch = logging.StreamHandler()
        ch.setLevel(log_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        if self.config.logging.file:
            log_path = Path(self.config.logging.file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path)
            fh.setLevel(log_level)
            fh.setFormatter(formatter)
            root.addHandler(fh)

        logger.info("Logging: level=%s, file=%s", self.config.logging.level, self.config.logging.file)

    @property
    def days(self) -> List[int]:
        return sorted(self._solvers)

    def run(self, day: int, input_path: Union[str, Path]) -> Dict[int, int]:
        """Solve the configured parts of ``day``.

        Parameters
        ----------
        day : int
            Puzzle day (1-5).
        input_path : str or Path
            Input document.

        Returns
        -------
        dict
            Answer per part number.

        Raises
        ------
        ValueError
            If ``day`` has no solver.
        PuzzleError
            If the input cannot be read or parsed.
        """
        if day not in self._solvers:
            raise ValueError(f"No solver for day {day}; available days: {self.days}")

        text = read_document(input_path)
        # parsed documents shared by the parts of this run
        self._parsed = {}
        answers = {}
        for part in self.config.runner.parts:
            started = time.perf_counter()
            answers[part] = self._solvers[day](text, part)
            logger.info(
                "Day %d (%s) part %d: %d [%.3fs]",
                day, PUZZLE_TITLES[day], part, answers[part], time.perf_counter() - started
            )
        return answers

    def _solve_trebuchet(self, text: str, part: int) -> int:
        return trebuchet.calibrate(text.splitlines(), allow_words=(part == 2))

    def _solve_cube_game(self, text: str, part: int) -> int:
        if part == 1:
            return cube_conundrum.sum_permitted_ids(text.splitlines(), self.config.cube_game.available)
        return cube_conundrum.sum_game_power(text.splitlines())

    def _solve_gear_ratios(self, text: str, part: int) -> int:
        schematic = Schematic(text.splitlines())
        if part == 1:
            return sum(schematic.part_numbers())
        return sum(schematic.gear_ratios(self.config.gear_ratios.gear_symbol))

    def _solve_scratchcards(self, text: str, part: int) -> int:
        if part == 1:
            return scratchcards.total_score(text.splitlines(), ScoringPolicy.DOUBLING)
        return scratchcards.total_cards_won(text.splitlines())

    def _solve_almanac(self, text: str, part: int) -> int:
        if "almanac" not in self._parsed:
            self._parsed["almanac"] = AlmanacSolver(text, self.config)
        return self._parsed["almanac"].lowest_location(as_ranges=(part == 2))
