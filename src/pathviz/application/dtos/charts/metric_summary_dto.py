"""Metric summary DTOs for line charts and headline numbers."""

from dataclasses import dataclass, field

from pathviz.domain.metrics import MetricSegment


@dataclass(frozen=True)
class MetricPlot:
    """Year/value arrays of one metric segment."""

    segment: MetricSegment
    years: list[int] = field(default_factory=list)
    values: list[float | None] = field(default_factory=list)


@dataclass(frozen=True)
class AxisRange:
    minimum: float
    maximum: float


@dataclass
class MetricSummary:
    """Headline numbers and plot series for one node over a year window."""

    node_id: str
    name: str
    unit: str
    start_year: int
    end_year: int
    start_value: float | None = None
    end_value: float | None = None
    percent_change: int | None = None
    cumulative_value: float = 0.0
    axis_range: AxisRange = field(default_factory=lambda: AxisRange(0.0, 0.0))
    plots: list[MetricPlot] = field(default_factory=list)
    # Display strings rounded to the configured significant digits
    start_label: str = ""
    end_label: str = ""
    cumulative_label: str = ""


@dataclass(frozen=True)
class OutcomeTotal:
    """Sum of several outcome nodes at one year."""

    year: int
    node_ids: list[str]
    total: float
    label: str = ""
