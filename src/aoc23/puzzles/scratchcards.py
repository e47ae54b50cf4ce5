"""Scratchcards (day 4).

Each card lists winning numbers and the numbers held::

    Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53

A card's score depends on how many held numbers are winning numbers and on
the scoring policy. Under the copy rules a card with ``n`` matches wins one
copy of each of the next ``n`` cards, and copies win in turn.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from aoc23.errors import ParseError

__all__ = [
    'ScoringPolicy',
    'Card',
    'parse_card',
    'card_scores',
    'total_score',
    'total_cards_won',
]

logger = logging.getLogger(__name__)

CARD_RE = re.compile(r"Card\s+(\d+):([\d\s]*)\|([\d\s]*)", re.ASCII)


class ScoringPolicy(str, Enum):
    """How matches translate into a card score.

    DOUBLING: first match scores 1, every further match doubles the score
    COUNT: score is the number of matches
    """
    DOUBLING = "doubling"
    COUNT = "count"

    def score(self, matches: int) -> int:
        if self == ScoringPolicy.DOUBLING:
            return 2 ** (matches - 1) if matches else 0
        return matches


@dataclass(frozen=True)
class Card:
    card_id: int
    winning: Tuple[int, ...]
    held: Tuple[int, ...]

    @property
    def matches(self) -> int:
        """Number of held numbers that are winning numbers."""
        winning = set(self.winning)
        return sum(1 for number in self.held if number in winning)


def parse_card(line: str) -> Card:
    """Parse one ``Card N: winning | held`` record.

    Raises
    ------
    ParseError
        If the line does not follow the card grammar.
    """
    match = CARD_RE.fullmatch(line.strip())
    if match is None:
        raise ParseError("Expected 'Card <id>: <winning> | <held>'", line)
    return Card(
        card_id=int(match.group(1)),
        winning=tuple(int(tok) for tok in match.group(2).split()),
        held=tuple(int(tok) for tok in match.group(3).split()),
    )


def _parse_cards(lines: Iterable[str]) -> List[Card]:
    return [parse_card(line) for line in lines if line.strip()]


def card_scores(lines: Iterable[str], policy: ScoringPolicy = ScoringPolicy.DOUBLING) -> Dict[int, int]:
    """Score of every card, keyed by card id in document order."""
    scores = {}
    for card in _parse_cards(lines):
        scores[card.card_id] = policy.score(card.matches)
        logger.debug("Card %d: %d matches, score %d",
                     card.card_id, card.matches, scores[card.card_id])
    return scores


def total_score(lines: Iterable[str], policy: ScoringPolicy = ScoringPolicy.DOUBLING) -> int:
    """Sum of all card scores under ``policy``."""
    return sum(card_scores(lines, policy).values())


def total_cards_won(lines: Iterable[str]) -> int:
    """Total number of cards held once all copies have been won.

    Copies are only won of cards that exist; matches past the last card
    win nothing.
    """
    cards = _parse_cards(lines)
    if not cards:
        return 0

    table = pd.DataFrame(
        {"matches": [card.matches for card in cards], "copies": 1},
        index=pd.Index([card.card_id for card in cards], name="card_id"),
    )

    copies = table["copies"].to_numpy().copy()
    for position, matches in enumerate(table["matches"].to_numpy()):
        copies[position + 1:position + 1 + matches] += copies[position]

    table["copies"] = copies
    logger.debug("Cards won: %s", table["copies"].to_dict())
    return int(table["copies"].sum())
