"""Range splitting and mapping against one stage's rules.

``split_range`` cuts a range at every rule boundary it straddles so that each
piece lies inside exactly one rule's domain or outside all of them;
``map_piece`` then translates a single piece. Cost grows with the number of
(range x rule) intersections, never with the width of the range.
"""

from typing import List, Sequence

from aoc23.almanac.model import Range, Rule

__all__ = ['split_range', 'map_piece', 'map_range']


def split_range(rng: Range, rules: Sequence[Rule]) -> List[Range]:
    """Split ``rng`` into pieces that each map through at most one rule.

    Parameters
    ----------
    rng : Range
        Half-open input range.
    rules : sequence of Rule
        Stage rules. Domains are assumed disjoint (not checked).

    Returns
    -------
    list of Range
        Pieces sorted by lower bound. Together they tile ``rng`` exactly;
        an empty ``rng`` yields no pieces.

    Examples
    --------
    >>> split_range(Range(45, 55), [Rule(52, 50, 48)])
    [Range(lo=45, hi=50), Range(lo=50, hi=55)]
    """
    if rng.empty:
        return []

    overlaps = sorted(
        overlap
        for overlap in (rng.intersection(rule.domain) for rule in rules)
        if overlap is not None
    )

    pieces = []
    cursor = rng.lo
    for overlap in overlaps:
        if overlap.hi <= cursor:
            continue
        if overlap.lo > cursor:
            # gap before this rule passes through unchanged
            pieces.append(Range(cursor, overlap.lo))
        pieces.append(Range(max(cursor, overlap.lo), overlap.hi))
        cursor = overlap.hi

    if cursor < rng.hi:
        pieces.append(Range(cursor, rng.hi))

    return pieces


def map_piece(piece: Range, rules: Sequence[Rule]) -> Range:
    """Translate a piece through the first rule whose domain holds it.

    ``piece`` must come from ``split_range`` with the same rules, so it is
    either wholly inside one domain or outside all domains (identity).
    Width is always preserved.
    """
    for rule in rules:
        if rule.covers(piece):
            return piece.shift(rule.offset)
    return piece


def map_range(rng: Range, rules: Sequence[Rule]) -> List[Range]:
    """Split ``rng`` and map every piece; the output of one stage."""
    return [map_piece(piece, rules) for piece in split_range(rng, rules)]
