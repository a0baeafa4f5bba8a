"""Metric value objects."""

from pathviz.domain.metrics.value_objects.metric import Metric, MetricSegment
from pathviz.domain.metrics.value_objects.metric_point import MetricPoint
from pathviz.domain.metrics.value_objects.outcome_node import OutcomeNode

__all__ = [
    "Metric",
    "MetricPoint",
    "MetricSegment",
    "OutcomeNode",
]
