"""Tests for RangeEstimationService."""

import math

import pytest

from pathviz.domain.metrics import RangeEstimationService
from pathviz.domain.metrics.services.range_estimation_service import (
    ceil_to_precision,
)

estimate = RangeEstimationService.estimate_range


class TestCeilToPrecision:
    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (37.0, -1, 40.0),
            (37.0, 0, 37.0),
            (3.21, 1, 3.3),
            (0.3, 1, 0.3),
            (1234.0, -2, 1300.0),
        ],
    )
    def test_rounds_up(self, value, precision, expected):
        assert ceil_to_precision(value, precision) == expected


class TestEstimateRange:
    def test_empty_is_zero_range(self):
        assert estimate([]) == (0.0, 0.0)

    def test_only_missing_values_is_zero_range(self):
        assert estimate([None, math.nan]) == (0.0, 0.0)

    def test_positive_values_start_at_zero(self):
        assert estimate([12.0, 37.0]) == (0.0, 40.0)

    def test_negative_minimum_rounded_outwards(self):
        assert estimate([-12.0, 37.0]) == (-20.0, 40.0)

    def test_small_range_keeps_one_more_digit(self):
        assert estimate([1.2, 3.7]) == (0.0, 3.7)

    def test_equal_values(self):
        assert estimate([5.0, 5.0]) == (0.0, 5.0)

    @pytest.mark.parametrize(
        "values",
        [[0.31, 0.34], [100.0, 80.0, 50.0], [-3.0, 999.9], [1e6, 1.5e6]],
    )
    def test_maximum_covers_data(self, values):
        minimum, maximum = estimate(values)

        assert maximum >= max(values)
        assert minimum <= min(0.0, min(values))

    def test_span_overflowing_to_infinity(self):
        minimum, maximum = estimate([-1e308, 1e308])

        assert math.isfinite(minimum)
        assert math.isfinite(maximum)
        assert maximum >= 1e308
        assert minimum <= -1e308

    def test_infinite_span_uses_precision_zero(self):
        assert RangeEstimationService.precision_for(math.inf) == 0
