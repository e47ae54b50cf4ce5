"""Trebuchet calibration (day 1).

Each line of a calibration document hides a two-digit value made of its
first and last digit. Advanced calibration also counts spelled-out digits,
which may overlap (``"twone"`` reads as 2 then 1).
"""

import logging
import re
from typing import Iterable, List

from aoc23.errors import ParseError

__all__ = ['DIGIT_WORDS', 'calibration_value', 'calibrate']

logger = logging.getLogger(__name__)

DIGIT_WORDS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

# Lookahead so overlapping spellings are all reported
_DIGIT_RE = re.compile(r"(?=([0-9]))")
_DIGIT_OR_WORD_RE = re.compile(r"(?=([0-9]|" + "|".join(DIGIT_WORDS) + r"))")


def _digits(line: str, allow_words: bool) -> List[int]:
    pattern = _DIGIT_OR_WORD_RE if allow_words else _DIGIT_RE
    return [
        int(token) if token.isdigit() else DIGIT_WORDS[token]
        for token in pattern.findall(line)
    ]


def calibration_value(line: str, allow_words: bool = False) -> int:
    """Two-digit value formed by the first and last digit of ``line``.

    A line with a single digit uses it twice (``"treb7uchet"`` -> 77).

    Raises
    ------
    ParseError
        If the line holds no digit.
    """
    digits = _digits(line, allow_words)
    if not digits:
        raise ParseError("Calibration line holds no digit", line)
    return digits[0] * 10 + digits[-1]


def calibrate(lines: Iterable[str], allow_words: bool = False) -> int:
    """Sum of calibration values over all non-blank lines."""
    total = 0
    for line in lines:
        if not line.strip():
            continue
        value = calibration_value(line, allow_words)
        logger.debug("Calibration value %d from '%s'", value, line)
        total += value
    return total
