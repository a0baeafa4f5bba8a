"""Chart queries: one query per chart."""

from pathviz.application.queries.charts.action_comparison_query import (
    ActionComparisonQuery,
)
from pathviz.application.queries.charts.action_list_query import (
    ALL_ACTIONS,
    ActionListQuery,
)
from pathviz.application.queries.charts.action_mac_query import ActionMacQuery
from pathviz.application.queries.charts.metric_summary_query import (
    MetricSummaryQuery,
)
from pathviz.application.queries.charts.outcome_total_query import (
    OutcomeTotalQuery,
)
from pathviz.application.queries.charts.sankey_frame_query import (
    SankeyAnimationQuery,
    SankeyFrameQuery,
)

__all__ = [
    "ALL_ACTIONS",
    "ActionComparisonQuery",
    "ActionListQuery",
    "ActionMacQuery",
    "MetricSummaryQuery",
    "OutcomeTotalQuery",
    "SankeyAnimationQuery",
    "SankeyFrameQuery",
]
