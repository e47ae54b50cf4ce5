"""Almanac data types: half-open ranges, mapping rules and stages.

All three types are immutable. Ranges follow a single convention:
``Range(lo, hi)`` covers ``lo <= x < hi``, a point value ``v`` is
``Range(v, v + 1)`` and ``Range(v, v)`` is empty.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from aoc23.errors import RangeOverflowError

__all__ = ['INT64_MIN', 'INT64_MAX', 'Range', 'Rule', 'Stage']

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _check_bound(value: int, what: str) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise RangeOverflowError(f"{what} {value} outside signed 64-bit range")
    return value


@dataclass(frozen=True, order=True)
class Range:
    """Half-open integer interval ``[lo, hi)``."""

    lo: int
    hi: int

    def __post_init__(self):
        _check_bound(self.lo, "Range lower bound")
        _check_bound(self.hi, "Range upper bound")
        if self.lo > self.hi:
            raise ValueError(f"Range lower bound {self.lo} exceeds upper bound {self.hi}")

    @classmethod
    def point(cls, value: int) -> "Range":
        """Singleton range holding only ``value``."""
        return cls(value, value + 1)

    @classmethod
    def span(cls, start: int, length: int) -> "Range":
        """Range of ``length`` values beginning at ``start``."""
        return cls(start, start + length)

    @property
    def width(self) -> int:
        return self.hi - self.lo

    @property
    def empty(self) -> bool:
        return self.lo == self.hi

    def intersection(self, other: "Range") -> Optional["Range"]:
        """Overlap of two ranges, or None when they share no value."""
        lo = max(self.lo, other.lo)
        hi = min(self.hi, other.hi)
        if lo >= hi:
            return None
        return Range(lo, hi)

    def shift(self, offset: int) -> "Range":
        # Range() re-checks the 64-bit bounds of the translated ends
        return Range(self.lo + offset, self.hi + offset)

    def __contains__(self, value: int) -> bool:
        return self.lo <= value < self.hi

    def __str__(self):
        return f"[{self.lo}, {self.hi})"


@dataclass(frozen=True)
class Rule:
    """One row of a mapping table.

    Maps every ``x`` in ``[src_start, src_start + length)`` to
    ``x + (dest_start - src_start)``.
    """

    dest_start: int
    src_start: int
    length: int

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError(f"Rule length must be positive, got {self.length}")
        _check_bound(self.dest_start + self.length, "Rule destination end")
        _check_bound(self.src_start + self.length, "Rule source end")

    @property
    def domain(self) -> Range:
        return Range.span(self.src_start, self.length)

    @property
    def offset(self) -> int:
        return self.dest_start - self.src_start

    def covers(self, piece: Range) -> bool:
        """True when ``piece`` lies entirely inside the rule's domain."""
        return self.src_start <= piece.lo and piece.hi <= self.src_start + self.length


@dataclass(frozen=True)
class Stage:
    """Named category-to-category mapping table, e.g. ``seed->soil``."""

    name: str
    rules: Tuple[Rule, ...]

    @property
    def source(self) -> str:
        return self.name.split("->", 1)[0]

    @property
    def destination(self) -> str:
        return self.name.split("->", 1)[1]
