"""Tests for the Metric value object."""

import pytest
from pydantic import ValidationError

from pathviz.domain.metrics import Metric, MetricPoint, MetricSegment


class TestMetric:
    def test_parses_camel_case_backend_keys(self):
        metric = Metric.model_validate(
            {
                "historicalValues": [{"year": 2020, "value": 1.5}],
                "forecastValues": [{"year": 2030, "value": None}],
                "baselineForecastValues": None,
            },
        )

        assert metric.historical_values == [MetricPoint(year=2020, value=1.5)]
        assert metric.forecast_values[0].value is None
        assert metric.baseline_forecast_values == []

    def test_duplicate_years_rejected(self):
        with pytest.raises(ValidationError):
            Metric(
                historical_values=[
                    MetricPoint(year=2020, value=1.0),
                    MetricPoint(year=2020, value=2.0),
                ],
            )

    def test_find_in_segment(self):
        metric = Metric(forecast_values=[MetricPoint(year=2030, value=5.0)])

        assert metric.find(MetricSegment.FORECAST, 2030).value == 5.0
        assert metric.find(MetricSegment.HISTORICAL, 2030) is None

    def test_years_union_sorted(self):
        metric = Metric(
            historical_values=[
                MetricPoint(year=2020, value=1.0),
                MetricPoint(year=1990, value=2.0),
            ],
            forecast_values=[MetricPoint(year=2020, value=1.0)],
        )

        assert metric.years == [1990, 2020]

    def test_is_immutable(self):
        metric = Metric()
        with pytest.raises(ValidationError):
            metric.name = "changed"
