"""Tests for engine schematic labelling."""

import pytest

from aoc23.puzzles.gear_ratios import Schematic, gear_ratios, part_numbers

pytestmark = pytest.mark.unit


class TestSchematic:

    def test_numbers_labelled(self, example_lines):
        schematic = Schematic(example_lines("day_3.dat"))
        assert schematic.n_numbers == 10
        assert schematic.values[:3] == [467, 114, 35]

    def test_vertical_digits_are_separate_numbers(self):
        schematic = Schematic(["1.", "2*"])
        assert schematic.values == [1, 2]
        assert schematic.gear_ratios() == [2]

    def test_ragged_rows_padded(self):
        schematic = Schematic(["12", "#"])
        assert schematic.grid.shape == (2, 2)
        assert schematic.part_numbers() == [12]

    def test_trailing_blank_lines_dropped(self):
        assert Schematic(["5*", "", ""]).grid.shape == (1, 2)

    def test_empty_schematic(self):
        schematic = Schematic([])
        assert schematic.n_numbers == 0
        assert schematic.part_numbers() == []
        assert schematic.gear_ratios() == []

    def test_blank_lines_only(self):
        schematic = Schematic(["", "   ", ""])
        assert schematic.grid.size == 0
        assert schematic.part_numbers() == []

    def test_grid_without_numbers(self):
        schematic = Schematic(["..*", "#.."])
        assert schematic.n_numbers == 0
        assert schematic.values == []
        assert schematic.gear_ratios() == []


class TestPartNumbers:

    def test_reference_parts(self, example_lines):
        parts = part_numbers(example_lines("day_3.dat"))
        assert 114 not in parts
        assert 58 not in parts
        assert sum(parts) == 4361

    def test_diagonal_neighbour_counts(self):
        assert part_numbers(["1..", ".$.", "..."]) == [1]

    def test_number_touching_edge(self):
        assert part_numbers(["...", "..4", "..."]) == []
        assert part_numbers(["..4", "..@"]) == [4]


class TestGearRatios:

    def test_reference_gears(self, example_lines):
        ratios = gear_ratios(example_lines("day_3.dat"))
        assert sorted(ratios) == [16345, 451490]
        assert sum(ratios) == 467835

    def test_three_neighbours_is_not_a_gear(self):
        assert gear_ratios(["2.3", ".*.", "4.."]) == []

    def test_single_neighbour_is_not_a_gear(self):
        assert gear_ratios(["12*"]) == []

    def test_same_number_counted_once(self):
        # 123 touches the gear at two cells
        assert gear_ratios(["123", ".*.", "..5"]) == [615]

    def test_custom_gear_symbol(self):
        assert gear_ratios(["12#3"], gear_symbol="#") == [36]
        assert gear_ratios(["12#3"]) == []
