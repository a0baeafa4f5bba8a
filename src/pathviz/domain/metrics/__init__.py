"""Metrics domain: year-indexed series and their aggregations."""

from pathviz.domain.metrics.exceptions import (
    InvalidYearRangeError,
    MetricNotFoundError,
)
from pathviz.domain.metrics.services import (
    RangeEstimationService,
    TemporalAggregationService,
)
from pathviz.domain.metrics.value_objects import (
    Metric,
    MetricPoint,
    MetricSegment,
    OutcomeNode,
)

__all__ = [
    "InvalidYearRangeError",
    "Metric",
    "MetricNotFoundError",
    "MetricPoint",
    "MetricSegment",
    "OutcomeNode",
    "RangeEstimationService",
    "TemporalAggregationService",
]
