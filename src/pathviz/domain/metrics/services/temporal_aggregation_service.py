"""Scalar summaries of metric series over years and year windows."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from pathviz.domain.metrics.exceptions import InvalidYearRangeError
from pathviz.domain.metrics.value_objects import (
    Metric,
    MetricPoint,
    MetricSegment,
    OutcomeNode,
)

logger = logging.getLogger(__name__)


class TemporalAggregationService:
    """Point lookups, cumulative sums and change percentages.

    Forecast values take precedence over historical values for point
    lookups, while cumulative sums add every point of both series.
    """

    @staticmethod
    def point_value(metric: Metric, year: int) -> float | None:
        """Return the value for ``year``, preferring the forecast series."""
        for segment in (MetricSegment.FORECAST, MetricSegment.HISTORICAL):
            point = metric.find(segment, year)
            if point is not None and point.value is not None:
                return point.value
        return None

    @staticmethod
    def impact_point_value(metric: Metric | None, year: int) -> float:
        """Like point_value, but a missing year counts as zero impact."""
        if metric is None:
            return 0.0
        value = TemporalAggregationService.point_value(metric, year)
        return 0.0 if value is None else value

    @staticmethod
    def percent_change(
        initial: float | None,
        current: float | None,
    ) -> int | None:
        """Percent reduction from ``initial`` to ``current``.

        A decrease yields a positive percent. Returns None for a zero or
        missing baseline, and when the ratio overflows.
        """
        if initial is None or current is None or initial == 0:
            return None
        reduction = (initial - current) / initial * 100
        if not math.isfinite(reduction):
            return None
        # Halves round towards +inf
        return math.floor(reduction + 0.5)

    @staticmethod
    def sum_series_in_range(
        metric: Metric | Sequence[MetricPoint] | None,
        start_year: int,
        end_year: int,
    ) -> float:
        """Sum every historical and forecast point within the window.

        A year present in both series contributes twice. A bare point list
        is summed as a single series.
        """
        if start_year > end_year:
            raise InvalidYearRangeError(start_year, end_year)
        if metric is None:
            return 0.0

        points: Iterable[MetricPoint]
        if isinstance(metric, Metric):
            points = [*metric.historical_values, *metric.forecast_values]
        else:
            points = metric

        return math.fsum(
            p.value
            for p in points
            if p.value is not None and start_year <= p.year <= end_year
        )

    @staticmethod
    def total_across_nodes(nodes: Iterable[OutcomeNode], year: int) -> float:
        """Sum the point values of several nodes, skipping missing ones."""
        total = 0.0
        for node in nodes:
            value = TemporalAggregationService.point_value(node.metric, year)
            if value is None:
                logger.debug("Node %s has no value for %d, skipping", node.id, year)
                continue
            total += value
        return total

    @staticmethod
    def metric_to_plot(
        metric: Metric,
        segment: MetricSegment,
        start_year: int,
        end_year: int,
    ) -> tuple[list[int], list[float | None]]:
        """Return year/value arrays for one segment within the window."""
        if start_year > end_year:
            raise InvalidYearRangeError(start_year, end_year)
        points = sorted(
            (p for p in metric.segment(segment) if start_year <= p.year <= end_year),
            key=lambda p: p.year,
        )
        return [p.year for p in points], [p.value for p in points]
