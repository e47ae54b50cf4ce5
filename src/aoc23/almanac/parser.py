"""Almanac document parsing.

The document starts with a seeds line followed by mapping tables::

    seeds: 79 14 55 13

    seed-to-soil map:
    50 98 2
    52 50 48

Stage boundaries are found by locating header lines and slicing the text
between consecutive headers; the last stage runs to the end of the document.
Stage order is document order and is preserved as a tuple.
"""

import logging
import re
from typing import List, Tuple

from aoc23.almanac.model import Range, Rule, Stage
from aoc23.errors import MalformedHeader, MalformedRow, MissingSeeds

__all__ = ['parse_almanac', 'parse_stages', 'extract_seeds', 'seed_values', 'split_document']

logger = logging.getLogger(__name__)

# Lines ending in ":" are headers; a trailing \r (CRLF input) is allowed
HEADER_LINE_RE = re.compile(r"^[^\n]*:[ \t\r]*$", re.MULTILINE)
CATEGORY_RE = re.compile(r"(\w+)-to-(\w+) map:")
SEEDS_RE = re.compile(r"seeds:((?:[ \t]+\d+)+)", re.ASCII)
NUMBER_RE = re.compile(r"\d+", re.ASCII)


def split_document(text: str) -> Tuple[str, str]:
    """Split the document into its seeds line and the mapping-table text.

    Raises
    ------
    MissingSeeds
        If the document has no first line.
    """
    if not text.strip():
        raise MissingSeeds("Almanac document is empty")
    first_line, _, rest = text.lstrip("\r\n").partition("\n")
    return first_line, rest


def seed_values(line: str) -> List[int]:
    """Integers listed on the ``seeds:`` line."""
    match = SEEDS_RE.fullmatch(line.strip())
    if match is None:
        raise MissingSeeds("Expected 'seeds:' followed by integers", line)
    return [int(token) for token in match.group(1).split()]


def extract_seeds(line: str, as_ranges: bool) -> List[Range]:
    """Turn the seeds line into the initial ranges.

    Parameters
    ----------
    line : str
        First line of the document.
    as_ranges : bool
        If False every integer is an independent seed ``v`` (as ``[v, v+1)``).
        If True integers are read in ``(start, length)`` pairs.

    Returns
    -------
    list of Range
        Seed ranges in document order.

    Raises
    ------
    MissingSeeds
        If the line does not match the grammar, or range mode is requested
        with an odd number of integers.
    """
    values = seed_values(line)
    if not as_ranges:
        return [Range.point(v) for v in values]

    if len(values) % 2:
        raise MissingSeeds("Seed ranges must come in (start, length) pairs", line)
    return [Range.span(start, length) for start, length in zip(values[::2], values[1::2])]


def _parse_rule(row: str) -> Rule:
    row = row.strip()
    tokens = row.split()
    if len(tokens) != 3 or not all(NUMBER_RE.fullmatch(tok) for tok in tokens):
        raise MalformedRow("Expected three integers 'dest_start src_start length'", row)
    dest_start, src_start, length = (int(tok) for tok in tokens)
    if length <= 0:
        raise MalformedRow("Mapping length must be positive", row)
    return Rule(dest_start, src_start, length)


def parse_stages(text: str) -> Tuple[Stage, ...]:
    """Parse mapping tables into an ordered tuple of stages.

    Parameters
    ----------
    text : str
        Document text after the seeds line.

    Returns
    -------
    tuple of Stage
        Stages in document order. Empty if the text holds no headers.

    Raises
    ------
    MalformedHeader
        If a header line does not name two categories.
    MalformedRow
        If a row does not hold exactly three non-negative integers, or text
        appears before the first header.
    """
    headers = list(HEADER_LINE_RE.finditer(text))

    preamble = text[:headers[0].start()] if headers else text
    for line in preamble.splitlines():
        if line.strip():
            raise MalformedRow("Row outside of any mapping table", line.strip())

    stages = []
    for i, header in enumerate(headers):
        header_text = header.group(0).strip()
        names = CATEGORY_RE.fullmatch(header_text)
        if names is None:
            raise MalformedHeader("Expected '<from>-to-<to> map:'", header_text)

        block_end = headers[i + 1].start() if i + 1 < len(headers) else len(text)
        rules = tuple(
            _parse_rule(line)
            for line in text[header.end():block_end].splitlines()
            if line.strip()
        )

        stage = Stage(f"{names.group(1)}->{names.group(2)}", rules)
        logger.debug("Parsed stage %s with %d rules", stage.name, len(rules))
        stages.append(stage)

    return tuple(stages)


def parse_almanac(text: str, as_ranges: bool) -> Tuple[List[Range], Tuple[Stage, ...]]:
    """Parse a full almanac document into seed ranges and stages."""
    first_line, rest = split_document(text)
    return extract_seeds(first_line, as_ranges), parse_stages(rest)
