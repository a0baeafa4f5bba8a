"""Metric value object: historical and forecast series of one quantity."""

from __future__ import annotations

from enum import Enum

from pydantic import field_validator

from pathviz.domain.metrics.value_objects.metric_point import MetricPoint
from pathviz.domain.shared.value_objects import BackendModel


class MetricSegment(str, Enum):
    """Named series inside a metric."""

    HISTORICAL = "historical"
    FORECAST = "forecast"
    BASELINE_FORECAST = "baseline_forecast"


def _unique_years(points: list[MetricPoint]) -> list[MetricPoint]:
    years = [p.year for p in points]
    if len(years) != len(set(years)):
        msg = "Years within a metric series must be unique"
        raise ValueError(msg)
    return points


class Metric(BackendModel):
    """Year-indexed metric values as delivered by the backend.

    Historical and forecast series may share a boundary year. No ordering
    of the points is assumed.
    """

    historical_values: list[MetricPoint] = []
    forecast_values: list[MetricPoint] = []
    baseline_forecast_values: list[MetricPoint] = []
    name: str | None = None
    unit: str | None = None

    @field_validator(
        "historical_values",
        "forecast_values",
        "baseline_forecast_values",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator(
        "historical_values",
        "forecast_values",
        "baseline_forecast_values",
    )
    @classmethod
    def _validate_unique_years(cls, v: list[MetricPoint]) -> list[MetricPoint]:
        return _unique_years(v)

    def segment(self, segment: MetricSegment) -> list[MetricPoint]:
        if segment is MetricSegment.HISTORICAL:
            return self.historical_values
        if segment is MetricSegment.FORECAST:
            return self.forecast_values
        return self.baseline_forecast_values

    def find(self, segment: MetricSegment, year: int) -> MetricPoint | None:
        """Return the point for ``year`` in one segment, if present."""
        for point in self.segment(segment):
            if point.year == year:
                return point
        return None

    @property
    def years(self) -> list[int]:
        """All years covered by historical or forecast values, ascending."""
        return sorted(
            {p.year for p in self.historical_values}
            | {p.year for p in self.forecast_values},
        )
