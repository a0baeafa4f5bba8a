"""Outcome node: a named metric contributing to an outcome total."""

from __future__ import annotations

from pathviz.domain.metrics.value_objects.metric import Metric
from pathviz.domain.shared.value_objects import BackendModel


class OutcomeNode(BackendModel):
    id: str
    name: str
    color: str | None = None
    metric: Metric
