import datetime

import pytest
from models import SECTION_NAMES, TourConfig
from tour import SECTIONS, run_tour


class TestSections:
    """Test the values each tour section computes"""

    def test_registry_matches_section_names(self):
        assert list(SECTIONS) == SECTION_NAMES

    def test_basic_functions(self, tour_config):
        section = SECTIONS["basic_functions"](tour_config)
        assert section.get("squaring 4573 and adding 3") == 20912332
        assert section.get("second sample function of (7 + 4)") == 243
        assert section.get("third sample function of (6.5 + 4.5)") == pytest.approx(242.8)

    def test_immutability(self, tour_config):
        section = SECTIONS["immutability"](tour_config)
        assert section.get("'other_number' is") == 2
        assert section.get("'other_number' changed to be") == 3

    def test_integers_and_numbers(self, tour_config):
        section = SECTIONS["integers_and_numbers"](tour_config)
        assert section.get("sample_integer2") == 172
        table = section.get("table of squares from 0 to 99")
        assert len(table) == 100
        assert table[-1] == (99, 9801)

    def test_booleans(self, tour_config):
        section = SECTIONS["booleans"](tour_config)
        assert section.get("not boolean1 and (boolean2 or False)") is False

    def test_strings(self, tour_config):
        section = SECTIONS["strings"](tour_config)
        assert section.get("concatenated") == "Hello world"
        assert section.get("raw string literal") == "C:\\Program Files\\"
        assert section.get("first 7 characters") == "Hello w"
        assert section.get("from index 0") == "Hello world"
        assert section.get("japanese") == "こんにちは世界"

    def test_tuples(self, tour_config):
        section = SECTIONS["tuples"](tour_config)
        assert section.get("swapping (1, 2)") == (2, 1)
        assert section.get("plain tuple from named tuple") == (1, 2)
        assert type(section.get("plain tuple from named tuple")) is tuple
        assert section.get("named tuple from plain tuple").b == 2

    def test_pipelines(self, tour_config):
        section = SECTIONS["pipelines"](tour_config)
        assert len(section.examples) == 5
        assert all(example.value == [2, 10, 26] for example in section.examples)

    def test_lists(self, tour_config):
        section = SECTIONS["lists"](tour_config)
        assert section.get("days in 2023") == 365
        assert section.get("first 5 days of 2023") == [datetime.date(2023, 1, d) for d in range(1, 6)]
        assert section.get("black squares on a chess board") == 32
        assert section.get("sum of squares up to 1000 divisible by 3") == 111277611

    def test_arrays(self, tour_config):
        section = SECTIONS["arrays"](tour_config)
        assert section.get("words containing 'l'") == ["hello", "world", "hello", "world"]
        assert section.get("even numbers") == 1001
        assert section.get("even numbers slice") == 501
        assert section.get("array2 after mutation")[1] == "WORLD!"
        assert section.get("sum of lengths of words starting with 'h'") == 10

    def test_sequences(self, tour_config):
        section = SECTIONS["sequences"](tour_config)
        assert section.get("empty sequence") == []
        assert section.get("on-demand 1 to 1000, summed") == 500500
        assert section.get("even numbers up to 2000") == 1001

        walk = section.get("random walk")
        assert len(walk) == tour_config.walk_length
        assert walk[0] == tour_config.walk_start

    def test_seeded_walk_is_repeatable(self, tour_config):
        first = SECTIONS["sequences"](tour_config).get("random walk")
        second = SECTIONS["sequences"](tour_config).get("random walk")
        assert first == second

    def test_empty_walk(self):
        section = SECTIONS["sequences"](TourConfig(walk_length=0))
        assert section.get("random walk") == []

    def test_recursive_functions(self, tour_config):
        section = SECTIONS["recursive_functions"](tour_config)
        assert section.get("factorial of 6") == 720
        assert section.get("greatest common factor of 300 and 620") == 20
        assert section.get("recursive sum 1-10") == 55
        assert section.get("tail recursive sum 1-10") == 55

    def test_unknown_label(self, tour_config):
        section = SECTIONS["booleans"](tour_config)
        with pytest.raises(KeyError):
            section.get("no such example")


class TestRunTour:
    """Test running the whole tour"""

    def test_runs_every_section_in_order(self, tour_config):
        report = run_tour(tour_config)
        assert [s.name for s in report.sections] == SECTION_NAMES
        assert report.total_time_ms >= 0.0

    def test_runs_selected_sections_in_tour_order(self):
        report = run_tour(TourConfig(sections=["recursive_functions", "booleans"]))
        assert [s.name for s in report.sections] == ["booleans", "recursive_functions"]
        assert report.section("recursive_functions").get("tail recursive sum 1-10") == 55

    def test_default_config(self):
        report = run_tour()
        walk = report.section("sequences").get("random walk")
        assert len(walk) == 100
        assert walk[0] == 5.0

    def test_missing_section_lookup(self):
        report = run_tour(TourConfig(sections=["booleans"]))
        with pytest.raises(KeyError):
            report.section("lists")
