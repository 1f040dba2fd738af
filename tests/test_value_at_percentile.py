"""
Tests for value_at_percentile.
"""

from decimal import Decimal

import pytest

from relative_standing import EmptySampleError, PercentileOutOfRangeError, value_at_percentile


class TestBoundaries:
    @pytest.mark.parametrize(
        "sample",
        [
            [10, 20, 30, 40, 50],
            [Decimal("-3.5"), Decimal("0"), Decimal("12.25")],
            [5, 5, 1],
            [42],
        ],
    )
    def test_hundredth_is_best_and_zeroth_is_worst(self, sample):
        assert value_at_percentile(sample, 100, True) == max(sample)
        assert value_at_percentile(sample, 0, True) == min(sample)
        assert value_at_percentile(sample, 100, False) == min(sample)
        assert value_at_percentile(sample, 0, False) == max(sample)

    def test_single_value_sample(self):
        for percentile in (0, 37, 50, 100):
            assert value_at_percentile([42], percentile, True) == 42


class TestInterpolation:
    def test_exact_order_statistics(self, five_values):
        assert value_at_percentile(five_values, 25, True) == 20
        assert value_at_percentile(five_values, 50, True) == 30
        assert value_at_percentile(five_values, 75, True) == 40

    def test_between_order_statistics(self, five_values):
        # n = 0.6 * 4 + 1 = 3.4
        assert value_at_percentile(five_values, 60, True) == Decimal("34")

    def test_lower_is_better_mirrors_percentile(self, five_values):
        # 100 - 60 = 40 -> n = 2.6
        assert value_at_percentile(five_values, 60, False) == Decimal("26")
        assert value_at_percentile(five_values, 75, False) == 20

    def test_median_of_even_sample(self, four_values):
        assert value_at_percentile(four_values, 50, True) == Decimal("25")

    def test_unsorted_input(self):
        assert value_at_percentile([50, 10, 40, 20, 30], 60, True) == Decimal("34")

    def test_decimal_percentile(self, five_values):
        assert value_at_percentile(five_values, Decimal("62.5"), True) == Decimal("35")

    def test_returns_decimal(self, five_values):
        assert isinstance(value_at_percentile(five_values, 60, True), Decimal)


class TestErrors:
    def test_empty_sample(self):
        with pytest.raises(EmptySampleError) as exc_info:
            value_at_percentile([], 50, True)
        assert exc_info.value.code == "EMPTY_SAMPLE"
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.parametrize("percentile", [101, -1, Decimal("100.01")])
    def test_percentile_outside_sample(self, five_values, percentile):
        with pytest.raises(PercentileOutOfRangeError) as exc_info:
            value_at_percentile(five_values, percentile, True)
        assert exc_info.value.sample_size == 5
        assert exc_info.value.code == "PERCENTILE_OUT_OF_RANGE"

    def test_percentile_outside_sample_lower_is_better(self, five_values):
        with pytest.raises(PercentileOutOfRangeError):
            value_at_percentile(five_values, 101, False)


class TestPurity:
    def test_sample_is_not_reordered(self):
        sample = [50, 10, 40, 20, 30]
        value_at_percentile(sample, 60, True)
        assert sample == [50, 10, 40, 20, 30]

    def test_repeated_calls_agree(self, four_values):
        assert value_at_percentile(four_values, 33, False) == value_at_percentile(
            four_values, 33, False
        )
