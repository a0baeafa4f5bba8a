"""Action chart DTOs: MAC chart, comparison chart and action list."""

from dataclasses import dataclass, field

from pathviz.domain.actions import ActionSortKey, ComparisonChartData, MacChartData


@dataclass
class MacChartResult:
    """MAC chart arrays plus the overview metadata needed for axes."""

    overview_id: str
    label: str
    start_year: int
    end_year: int
    sort_by: ActionSortKey
    ascending: bool
    data: MacChartData
    indicator_unit: str = ""
    effect_unit: str = ""
    cost_unit: str = ""
    plot_limit_for_indicator: float | None = None


@dataclass
class ComparisonChartResult:
    end_year: int
    sort_by: ActionSortKey
    ascending: bool
    data: ComparisonChartData


@dataclass(frozen=True)
class ActionListItem:
    """One row of the action list."""

    action_id: str
    name: str
    color: str | None
    group_id: str | None
    group_name: str | None
    decision_level: str | None
    is_enabled: bool
    impact_on_target_year: float
    cumulative_impact: float
    impact_share: float
    cumulative_cost: float | None = None
    cumulative_efficiency: float | None = None


@dataclass
class ActionListResult:
    start_year: int
    end_year: int
    sort_by: ActionSortKey
    ascending: bool
    items: list[ActionListItem] = field(default_factory=list)
    total_cumulative_impact: float = 0.0
