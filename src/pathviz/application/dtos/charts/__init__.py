"""Chart DTOs (read models)."""

from pathviz.application.dtos.charts.action_chart_dto import (
    ActionListItem,
    ActionListResult,
    ComparisonChartResult,
    MacChartResult,
)
from pathviz.application.dtos.charts.metric_summary_dto import (
    AxisRange,
    MetricPlot,
    MetricSummary,
    OutcomeTotal,
)

__all__ = [
    "ActionListItem",
    "ActionListResult",
    "AxisRange",
    "ComparisonChartResult",
    "MacChartResult",
    "MetricPlot",
    "MetricSummary",
    "OutcomeTotal",
]
