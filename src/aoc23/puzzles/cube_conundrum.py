"""Cube conundrum (day 2).

A game record lists handfuls of coloured cubes drawn from a bag::

    Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green

A game is permitted when no draw shows more cubes of a colour than the bag
holds. The power of a game is the product of its per-colour maxima.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Mapping

import pandas as pd

from aoc23.errors import ParseError

__all__ = [
    'Color',
    'Game',
    'parse_game',
    'game_table',
    'game_permitted',
    'game_power',
    'sum_permitted_ids',
    'sum_game_power',
]

logger = logging.getLogger(__name__)

GAME_RE = re.compile(r"Game\s+(\d+):(.*)")
CUBES_RE = re.compile(r"(\d+)\s+(\w+)")


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


COLORS = [c.value for c in Color]


@dataclass
class Game:
    """One game: identifier plus the cube counts of every draw."""
    game_id: int
    draws: List[Dict[str, int]] = field(default_factory=list)

    def maxima(self) -> Dict[str, int]:
        """Largest count seen per colour (0 if a colour never appears)."""
        return {
            color: max((draw.get(color, 0) for draw in self.draws), default=0)
            for color in COLORS
        }


def parse_game(line: str) -> Game:
    """Parse one ``Game N: ...`` record.

    Raises
    ------
    ParseError
        If the header is missing or a draw item is not ``<count> <colour>``.
    """
    match = GAME_RE.fullmatch(line.strip())
    if match is None:
        raise ParseError("Expected 'Game <id>: <draws>'", line)

    game = Game(int(match.group(1)))
    for handful in match.group(2).split(";"):
        draw = {}
        for item in handful.split(","):
            if not item.strip():
                continue
            cubes = CUBES_RE.fullmatch(item.strip())
            if cubes is None or cubes.group(2) not in COLORS:
                raise ParseError("Expected '<count> <red|green|blue>'", item.strip())
            draw[cubes.group(2)] = draw.get(cubes.group(2), 0) + int(cubes.group(1))
        game.draws.append(draw)
    return game


def game_table(games: Iterable[Game]) -> pd.DataFrame:
    """Tabulate per-colour maxima, one row per game.

    Returns
    -------
    pd.DataFrame
        Columns ``game_id``, ``red``, ``green``, ``blue``.
    """
    rows = [{"game_id": game.game_id, **game.maxima()} for game in games]
    return pd.DataFrame(rows, columns=["game_id", *COLORS])


def game_permitted(game: Game, available: Mapping[str, int]) -> bool:
    """Whether every draw of ``game`` fits within the ``available`` cubes."""
    maxima = game.maxima()
    return all(maxima[color] <= available.get(color, 0) for color in COLORS)


def game_power(game: Game) -> int:
    """Product of the per-colour maxima."""
    maxima = game.maxima()
    return maxima["red"] * maxima["green"] * maxima["blue"]


def _parse_games(lines: Iterable[str]) -> List[Game]:
    return [parse_game(line) for line in lines if line.strip()]


def sum_permitted_ids(lines: Iterable[str], available: Mapping[str, int]) -> int:
    """Sum of the identifiers of every permitted game."""
    table = game_table(_parse_games(lines))
    if table.empty:
        return 0

    permitted = pd.Series(True, index=table.index)
    for color in COLORS:
        permitted &= table[color] <= available.get(color, 0)

    logger.debug("Permitted games: %s", table.loc[permitted, "game_id"].tolist())
    return int(table.loc[permitted, "game_id"].sum())


def sum_game_power(lines: Iterable[str]) -> int:
    """Sum of the power of every game."""
    table = game_table(_parse_games(lines))
    if table.empty:
        return 0
    return int(table[COLORS].prod(axis=1).sum())
