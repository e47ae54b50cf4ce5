"""Tests for almanac document parsing and seed extraction."""

import pytest

from aoc23.almanac import Range, Rule, parse_stages, extract_seeds, parse_almanac
from aoc23.almanac.parser import seed_values, split_document
from aoc23.errors import MalformedHeader, MalformedRow, MissingSeeds, ParseError

pytestmark = pytest.mark.unit


TWO_STAGES = """
seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15
"""


class TestParseStages:

    def test_stages_in_document_order(self):
        stages = parse_stages(TWO_STAGES)
        assert [s.name for s in stages] == ["seed->soil", "soil->fertilizer"]

    def test_rules_parsed_as_dest_src_length(self):
        stages = parse_stages(TWO_STAGES)
        assert stages[0].rules == (Rule(50, 98, 2), Rule(52, 50, 48))
        assert stages[1].rules[2] == Rule(39, 0, 15)

    def test_order_is_not_alphabetical(self):
        text = "zeta-to-alpha map:\n1 2 3\n\nalpha-to-zeta map:\n4 5 6\n"
        assert [s.name for s in parse_stages(text)] == ["zeta->alpha", "alpha->zeta"]

    def test_stage_source_and_destination(self):
        stage = parse_stages(TWO_STAGES)[1]
        assert stage.source == "soil"
        assert stage.destination == "fertilizer"

    def test_last_stage_runs_to_end_without_trailing_newline(self):
        stages = parse_stages("a-to-b map:\n1 2 3\n4 9 1")
        assert stages[0].rules == (Rule(1, 2, 3), Rule(4, 9, 1))

    def test_no_headers_gives_no_stages(self):
        assert parse_stages("\n\n") == ()

    def test_stage_without_rules(self):
        stages = parse_stages("a-to-b map:\n\nb-to-c map:\n1 2 3\n")
        assert stages[0].rules == ()
        assert len(stages[1].rules) == 1

    def test_malformed_header(self):
        with pytest.raises(MalformedHeader) as excinfo:
            parse_stages("seed to soil map:\n1 2 3\n")
        assert excinfo.value.fragment == "seed to soil map:"

    @pytest.mark.parametrize("header", ["seed-to-soil:", "seed-to-soil map :", "map:"])
    def test_header_without_categories(self, header):
        with pytest.raises(MalformedHeader) as excinfo:
            parse_stages(f"{header}\n1 2 3\n")
        assert excinfo.value.fragment == header

    def test_crlf_line_endings(self):
        stages = parse_stages(TWO_STAGES.replace("\n", "\r\n"))
        assert [s.name for s in stages] == ["seed->soil", "soil->fertilizer"]
        assert stages[0].rules == (Rule(50, 98, 2), Rule(52, 50, 48))
        assert stages[1].rules[2] == Rule(39, 0, 15)

    def test_crlf_malformed_header_fragment_is_stripped(self):
        with pytest.raises(MalformedHeader) as excinfo:
            parse_stages("seed-to-soil:\r\n1 2 3\r\n")
        assert excinfo.value.fragment == "seed-to-soil:"

    @pytest.mark.parametrize("row", ["1 2", "1 2 3 4", "1 x 3", "-1 2 3"])
    def test_malformed_row(self, row):
        with pytest.raises(MalformedRow) as excinfo:
            parse_stages(f"a-to-b map:\n{row}\n")
        assert excinfo.value.fragment == row

    def test_zero_length_row_rejected(self):
        with pytest.raises(MalformedRow, match="positive"):
            parse_stages("a-to-b map:\n1 2 0\n")

    def test_rows_before_first_header_rejected(self):
        with pytest.raises(MalformedRow, match="outside"):
            parse_stages("1 2 3\na-to-b map:\n4 5 6\n")

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_stages("a-to-b map:\nnope\n")


class TestExtractSeeds:

    def test_scalar_mode_gives_singletons(self):
        assert extract_seeds("seeds: 79 14 55 13", as_ranges=False) == [
            Range(79, 80), Range(14, 15), Range(55, 56), Range(13, 14)
        ]

    def test_range_mode_gives_pairs(self):
        assert extract_seeds("seeds: 79 14 55 13", as_ranges=True) == [
            Range(79, 93), Range(55, 68)
        ]

    def test_zero_length_seed_range_is_empty(self):
        assert extract_seeds("seeds: 5 0", as_ranges=True) == [Range(5, 5)]

    def test_odd_count_in_range_mode(self):
        with pytest.raises(MissingSeeds, match="pairs"):
            extract_seeds("seeds: 1 2 3", as_ranges=True)

    @pytest.mark.parametrize("line", ["", "seeds:", "seed: 1 2", "seeds: 1 a", "1 2 3"])
    def test_bad_seed_line(self, line):
        with pytest.raises(MissingSeeds):
            seed_values(line)

    def test_missing_seeds_is_parse_error(self):
        with pytest.raises(ParseError):
            extract_seeds("soil: 1", as_ranges=False)


class TestDocument:

    def test_split_document(self, almanac_text):
        first, rest = split_document(almanac_text)
        assert first == "seeds: 79 14 55 13"
        assert rest.lstrip().startswith("seed-to-soil map:")

    def test_crlf_document(self, almanac_text):
        seeds, stages = parse_almanac(almanac_text.replace("\n", "\r\n"), as_ranges=True)
        assert seeds == [Range(79, 93), Range(55, 68)]
        assert len(stages) == 7
        assert stages[0].rules == (Rule(50, 98, 2), Rule(52, 50, 48))

    def test_empty_document(self):
        with pytest.raises(MissingSeeds):
            split_document("")

    def test_parse_almanac(self, almanac_text):
        seeds, stages = parse_almanac(almanac_text, as_ranges=True)
        assert seeds == [Range(79, 93), Range(55, 68)]
        assert len(stages) == 7
        assert stages[-1].name == "humidity->location"
