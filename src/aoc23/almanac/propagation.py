"""Almanac pipeline driver.

Feeds seed ranges through every stage in document order and reduces the
final frontier to its minimum lower bound. Seed ranges are independent of
each other, so they may be evaluated on a worker pool; ``min`` is safe to
reduce in any order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from pathlib import Path
from typing import List, Optional, Sequence, Union, TYPE_CHECKING

from aoc23.almanac.model import Range, Stage
from aoc23.almanac.parser import parse_stages, extract_seeds, seed_values, split_document
from aoc23.almanac.ranges import split_range, map_piece
from aoc23.contracts import FailurePolicy, assert_tiled, assert_width_preserved
from aoc23.reader import read_document

if TYPE_CHECKING:
    from aoc23.schemas import InternalConfig

__all__ = ['propagate', 'propagate_value', 'lowest_location', 'AlmanacSolver']

logger = logging.getLogger(__name__)


def _advance(frontier: List[Range], stage: Stage, check_contracts: bool) -> List[Range]:
    """Push every frontier range through one stage."""
    advanced = []
    for rng in frontier:
        pieces = split_range(rng, stage.rules)
        if check_contracts:
            assert_tiled(rng, pieces)
        for piece in pieces:
            mapped = map_piece(piece, stage.rules)
            if check_contracts:
                assert_width_preserved(piece, mapped)
            advanced.append(mapped)
    return advanced


def propagate(seed_range: Range, stages: Sequence[Stage],
              check_contracts: bool = False) -> List[Range]:
    """Propagate one seed range through all stages.

    Parameters
    ----------
    seed_range : Range
        Initial half-open range.
    stages : sequence of Stage
        Stages in pipeline order.
    check_contracts : bool, optional
        Verify split and mapping contracts at every stage (default False).

    Returns
    -------
    list of Range
        Final frontier. With no stages this is ``[seed_range]``; ranges in
        the frontier may overlap.
    """
    frontier = [seed_range] if not seed_range.empty else []
    for stage in stages:
        frontier = _advance(frontier, stage, check_contracts)
        logger.debug("Stage %s: %d ranges in frontier", stage.name, len(frontier))
    return frontier


def propagate_value(value: int, stages: Sequence[Stage]) -> int:
    """Propagate a single scalar through all stages (first match wins)."""
    for stage in stages:
        for rule in stage.rules:
            if value in rule.domain:
                logger.debug(
                    "%s: %d in %s -> %d",
                    stage.name, value, rule.domain, value + rule.offset
                )
                value += rule.offset
                break
    return value


def lowest_location(seed_ranges: Sequence[Range], stages: Sequence[Stage],
                    workers: int = 1, check_contracts: bool = False) -> int:
    """Minimum value reachable at the last stage from any seed range.

    Parameters
    ----------
    seed_ranges : sequence of Range
        Independent seed ranges.
    stages : sequence of Stage
        Stages in pipeline order.
    workers : int, optional
        Size of the thread pool evaluating seed ranges (default 1, no pool).
        Propagation is pure Python and holds the GIL, so extra workers give
        no CPU parallelism; the answer is the same for any worker count.
    check_contracts : bool, optional
        Forwarded to propagate().

    Raises
    ------
    ValueError
        If no value is reachable (no seeds, or only empty seed ranges).
    """
    def run(seed_range):
        return propagate(seed_range, stages, check_contracts)

    if workers > 1 and len(seed_ranges) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            frontiers = list(pool.map(run, seed_ranges))
    else:
        frontiers = [run(seed_range) for seed_range in seed_ranges]

    final = list(chain.from_iterable(frontiers))
    if not final:
        raise ValueError("No seed values reach the final stage")

    logger.debug("Final frontier holds %d ranges from %d seed ranges",
                 len(final), len(seed_ranges))
    return min(rng.lo for rng in final)


class AlmanacSolver:
    """Config-driven solver for an almanac document.

    Stages and seed values are parsed once on construction and are read-only
    afterwards; every call builds fresh frontiers.

    Example usage::

        solver = AlmanacSolver(text, config)
        solver.lowest_location(as_ranges=False)  # part 1
        solver.lowest_location(as_ranges=True)   # part 2
    """

    def __init__(self, text: str, config: Optional["InternalConfig"] = None):
        """Parse the document.

        Parameters
        ----------
        text : str
            Full almanac document.
        config : InternalConfig, optional
            Runtime configuration; without one, a single worker is used and
            contracts are checked.
        """
        self.seeds_line, rest = split_document(text)
        # fail on a bad seeds line before parsing the tables
        seed_values(self.seeds_line)
        self.stages = parse_stages(rest)

        if config is not None:
            self.workers = config.almanac.workers
            self.check_contracts = config.almanac.contract_policy == FailurePolicy.FAIL_FAST.value
        else:
            self.workers = 1
            self.check_contracts = True

        logger.info("AlmanacSolver initialized: %d stages, workers=%d",
                    len(self.stages), self.workers)

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional["InternalConfig"] = None) -> "AlmanacSolver":
        return cls(read_document(path), config)

    def seed_ranges(self, as_ranges: bool) -> List[Range]:
        return extract_seeds(self.seeds_line, as_ranges)

    def lowest_location(self, as_ranges: bool) -> int:
        """Minimum final-stage value for scalar (False) or range (True) seeds."""
        return lowest_location(
            self.seed_ranges(as_ranges),
            self.stages,
            workers=self.workers,
            check_contracts=self.check_contracts,
        )
