import pytest
from tuipe.model.types import CharAggregate
from tuipe.stats import (
    format_table,
    moving_average,
    parse_chars,
    select_weak_chars,
    session_metrics,
    sparkline,
    top_chars_by_frequency,
)


class TestSessionMetrics:
    def test_rates(self):
        wpm, cpm, acc = session_metrics(correct=100, incorrect=25, duration_ms=60_000)
        assert wpm == pytest.approx(20.0)
        assert cpm == pytest.approx(100.0)
        assert acc == pytest.approx(0.8)

    def test_zero_duration(self):
        assert session_metrics(10, 1, 0) == (0.0, 0.0, 0.0)
        assert session_metrics(10, 1, -5) == (0.0, 0.0, 0.0)

    def test_no_keystrokes(self):
        _, _, acc = session_metrics(0, 0, 1000)
        assert acc == 0.0


class TestMovingAverage:
    def test_window_one_is_copy(self):
        values = [1.0, 2.0, 3.0]
        out = moving_average(values, 1)
        assert out == values
        assert out is not values

    def test_trailing_mean_grows_denominator(self):
        assert moving_average([2.0, 4.0, 6.0, 8.0], 2) == [2.0, 3.0, 5.0, 7.0]
        assert moving_average([3.0, 6.0, 9.0], 5) == [3.0, 4.5, 6.0]

    def test_empty(self):
        assert moving_average([], 3) == []


class TestSparkline:
    def test_ramp(self):
        assert sparkline([0, 9]) == " @"
        assert sparkline([0, 1, 2, 3, 4, 5, 6, 7, 8, 9]) == " .:-=+*#%@"

    def test_flat_uses_middle_char(self):
        assert sparkline([3, 3, 3]) == "+++"

    def test_empty(self):
        assert sparkline([]) == ""


class TestFormatTable:
    def test_aligns_columns(self):
        lines = format_table(
            ["Char", "Accuracy", "Correct"],
            [["a", "97.50%", "12"], ["<space>", "8.00%", "3"]],
            right_align={1, 2},
        )
        assert lines == [
            "Char    Accuracy Correct",
            "a         97.50%      12",
            "<space>    8.00%       3",
        ]

    def test_short_rows_are_padded(self):
        lines = format_table(["A", "B"], [["x"]])
        assert lines == ["A B", "x  "]

    def test_nothing_to_format(self):
        assert format_table([], []) == []


class TestCharSelection:
    def test_top_chars_by_frequency(self):
        aggs = [
            CharAggregate("b", correct=3, incorrect=1),
            CharAggregate("a", correct=2, incorrect=2),
            CharAggregate("c", correct=1, incorrect=0),
        ]
        assert top_chars_by_frequency(aggs, 2) == ["a", "b"]
        assert top_chars_by_frequency(aggs, 0) == []

    def test_weak_chars_lowest_accuracy_first(self):
        aggs = [
            CharAggregate("a", correct=9, incorrect=1),
            CharAggregate("b", correct=1, incorrect=1),
            CharAggregate("c", correct=3, incorrect=1),
            CharAggregate("d"),
        ]
        assert select_weak_chars(aggs, 2) == {"b", "c"}

    def test_weak_chars_untyped_counts_as_perfect(self):
        aggs = [CharAggregate("x"), CharAggregate("y", correct=1, incorrect=1)]
        assert select_weak_chars(aggs, 1) == {"y"}

    @pytest.mark.parametrize("top", [0, -1, 10])
    def test_weak_chars_selects_all_for_out_of_range_top(self, top: int):
        aggs = [CharAggregate("a", correct=1), CharAggregate("b", incorrect=1)]
        assert select_weak_chars(aggs, top) == {"a", "b"}

    def test_weak_chars_uses_first_character(self):
        assert select_weak_chars([CharAggregate("th", correct=1, incorrect=3)], 1) == {"t"}

    def test_weak_chars_empty(self):
        assert select_weak_chars([], 3) == set()

    @pytest.mark.parametrize(
        "text,expected",
        [("a,b,th", ["a", "b", "th"]), ("abc", ["a", "b", "c"]), ("  ", []), ("a, ,b", ["a", "b"])],
    )
    def test_parse_chars(self, text: str, expected: list[str]):
        assert parse_chars(text) == expected
