"""Gear ratios (day 3).

An engine schematic is a character grid of numbers, symbols and ``.``
filler. A number is a part number when any symbol touches it, diagonals
included. A gear is a gear symbol touching exactly two numbers; its ratio is
their product.

The grid is held as a numpy character array and numbers are found as
horizontally connected digit runs with ``scipy.ndimage.label``.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np
from scipy import ndimage

__all__ = ['Schematic', 'part_numbers', 'gear_ratios']

logger = logging.getLogger(__name__)

# Digits only join left-right; vertically stacked digits are separate numbers
_ROW_STRUCTURE = np.array([[0, 0, 0],
                           [1, 1, 1],
                           [0, 0, 0]])


class Schematic:
    """Labelled view of an engine schematic."""

    def __init__(self, lines: Sequence[str]):
        """Build the character grid and label the numbers.

        Parameters
        ----------
        lines : sequence of str
            Schematic rows; ragged rows are padded with ``.``.
        """
        rows = list(lines)
        while rows and not rows[-1].strip():
            rows.pop()

        width = max((len(row) for row in rows), default=0)
        if rows and width:
            self.grid = np.array([list(row.ljust(width, ".")) for row in rows], dtype="<U1")
        else:
            self.grid = np.full((0, 0), ".", dtype="<U1")

        digits = np.char.isdigit(self.grid)
        self.symbols = ~digits & (self.grid != ".")
        if self.grid.size:
            self.labels, self.n_numbers = ndimage.label(digits, structure=_ROW_STRUCTURE)
        else:
            self.labels, self.n_numbers = np.zeros(self.grid.shape, dtype=np.int32), 0

        # slices of number k at index k - 1; find_objects fails on a zero-size grid
        self.objects = (
            ndimage.find_objects(self.labels, max_label=self.n_numbers)
            if self.n_numbers else []
        )
        self.values = [int("".join(self.grid[obj].ravel())) for obj in self.objects]
        logger.debug("Schematic %s: %d numbers, %d symbols",
                     self.grid.shape, self.n_numbers, int(self.symbols.sum()))

    def _window(self, rows: slice, cols: slice) -> Tuple[slice, slice]:
        """Grow a slice pair by one cell on every side, clipped to the grid."""
        return (
            slice(max(rows.start - 1, 0), rows.stop + 1),
            slice(max(cols.start - 1, 0), cols.stop + 1),
        )

    def part_numbers(self) -> List[int]:
        """Numbers with at least one neighbouring symbol, in reading order."""
        parts = []
        for value, obj in zip(self.values, self.objects):
            if self.symbols[self._window(*obj)].any():
                parts.append(value)
        return parts

    def gear_ratios(self, gear_symbol: str = "*") -> List[int]:
        """Ratio of every gear symbol touching exactly two numbers."""
        ratios = []
        for row, col in zip(*np.nonzero(self.grid == gear_symbol)):
            window = self._window(slice(row, row + 1), slice(col, col + 1))
            neighbours = np.unique(self.labels[window])
            neighbours = neighbours[neighbours > 0]
            if len(neighbours) == 2:
                ratio = self.values[neighbours[0] - 1] * self.values[neighbours[1] - 1]
                logger.debug("Gear at (%d, %d) has ratio %d", row, col, ratio)
                ratios.append(ratio)
        return ratios


def part_numbers(lines: Sequence[str]) -> List[int]:
    return Schematic(lines).part_numbers()


def gear_ratios(lines: Sequence[str], gear_symbol: str = "*") -> List[int]:
    return Schematic(lines).gear_ratios(gear_symbol)
