"""Tests for range splitting and piece mapping."""

import random

import pytest

from aoc23.almanac import Range, Rule, split_range, map_piece
from aoc23.almanac.ranges import map_range
from aoc23.contracts import assert_tiled

pytestmark = pytest.mark.unit

SEED_TO_SOIL = [Rule(50, 98, 2), Rule(52, 50, 48)]


def _assert_tiles(rng, pieces):
    ordered = sorted(pieces)
    assert ordered[0].lo == rng.lo
    assert ordered[-1].hi == rng.hi
    for left, right in zip(ordered, ordered[1:]):
        assert left.hi == right.lo


class TestSplitRange:
    """split_range cuts at rule boundaries and nowhere else."""

    def test_range_straddling_rule_start(self):
        pieces = split_range(Range(45, 55), SEED_TO_SOIL)
        assert pieces == [Range(45, 50), Range(50, 55)]

    def test_range_spanning_two_rules_and_beyond(self):
        pieces = split_range(Range(40, 110), SEED_TO_SOIL)
        assert pieces == [Range(40, 50), Range(50, 98), Range(98, 100), Range(100, 110)]

    def test_range_equal_to_domain_is_one_piece(self):
        assert split_range(Range(50, 98), SEED_TO_SOIL) == [Range(50, 98)]

    def test_range_outside_all_rules_passes_through(self):
        assert split_range(Range(0, 10), SEED_TO_SOIL) == [Range(0, 10)]

    def test_empty_range_yields_nothing(self):
        assert split_range(Range(60, 60), SEED_TO_SOIL) == []

    def test_no_rules(self):
        assert split_range(Range(3, 9), []) == [Range(3, 9)]

    def test_unsorted_rules(self):
        rules = [Rule(0, 20, 5), Rule(100, 5, 5)]
        pieces = split_range(Range(0, 30), rules)
        assert pieces == [Range(0, 5), Range(5, 10), Range(10, 20), Range(20, 25), Range(25, 30)]

    def test_boundary_touch_is_not_an_overlap(self):
        """A range ending exactly at a domain start is neither split nor mapped."""
        rule = Rule(500, 50, 10)
        pieces = split_range(Range(40, 50), [rule])
        assert pieces == [Range(40, 50)]
        assert map_piece(pieces[0], [rule]) == Range(40, 50)

    def test_range_starting_at_domain_end_is_not_mapped(self):
        rule = Rule(500, 50, 10)
        assert map_range(Range(60, 70), [rule]) == [Range(60, 70)]

    def test_pieces_tile_input_for_random_rules(self):
        rnd = random.Random(2023)
        for _ in range(200):
            # disjoint domains laid out left to right, then shuffled
            rules, start = [], rnd.randint(0, 20)
            for _ in range(rnd.randint(0, 6)):
                length = rnd.randint(1, 15)
                rules.append(Rule(rnd.randint(0, 500), start, length))
                start += length + rnd.randint(0, 5)
            rnd.shuffle(rules)

            lo = rnd.randint(0, 80)
            rng = Range(lo, lo + rnd.randint(1, 80))
            pieces = split_range(rng, rules)

            _assert_tiles(rng, pieces)
            assert_tiled(rng, pieces)
            for piece in pieces:
                covering = [r for r in rules if r.covers(piece)]
                touching = [r for r in rules if piece.intersection(r.domain)]
                assert len(covering) <= 1
                assert covering == touching


class TestMapPiece:
    """map_piece translates by the covering rule's offset."""

    def test_piece_inside_rule_is_shifted(self):
        assert map_piece(Range(50, 55), SEED_TO_SOIL) == Range(52, 57)

    def test_piece_shifted_down(self):
        assert map_piece(Range(98, 100), SEED_TO_SOIL) == Range(50, 52)

    def test_piece_outside_rules_is_identity(self):
        assert map_piece(Range(10, 20), SEED_TO_SOIL) == Range(10, 20)

    def test_width_is_conserved(self):
        for piece in split_range(Range(0, 200), SEED_TO_SOIL):
            mapped = map_piece(piece, SEED_TO_SOIL)
            assert mapped.width == piece.width

    def test_map_range_flattens_split_and_map(self):
        assert map_range(Range(45, 55), SEED_TO_SOIL) == [Range(45, 50), Range(52, 57)]
