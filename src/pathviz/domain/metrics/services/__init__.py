"""Metrics domain services."""

from pathviz.domain.metrics.services.range_estimation_service import (
    RangeEstimationService,
    ceil_to_precision,
)
from pathviz.domain.metrics.services.temporal_aggregation_service import (
    TemporalAggregationService,
)

__all__ = [
    "RangeEstimationService",
    "TemporalAggregationService",
    "ceil_to_precision",
]
