"""A single year/value observation of a metric."""

from __future__ import annotations

from pathviz.domain.shared.value_objects import BackendModel


class MetricPoint(BackendModel):
    """Value of a metric in one year.

    ``value`` is ``None`` when the backend has a year without data.
    """

    year: int
    value: float | None = None
