"""Actions domain: actions, impact overviews and efficiency ranking."""

from pathviz.domain.actions.entities import Action, ActionGroup
from pathviz.domain.actions.exceptions import (
    ImpactOverviewNotFoundError,
    InvalidSortKeyError,
)
from pathviz.domain.actions.services import (
    ActionEfficiencyService,
    ActionRankingService,
)
from pathviz.domain.actions.value_objects import (
    ActionImpact,
    BoolParameter,
    ImpactOverview,
    NumberParameter,
    Parameter,
    StringParameter,
    find_action_enabled_param,
)
from pathviz.domain.actions.value_objects.action_efficiency import (
    ActionEfficiency,
    ActionSortKey,
)
from pathviz.domain.actions.value_objects.chart_data import (
    ComparisonChartData,
    MacChartData,
)

__all__ = [
    "Action",
    "ActionEfficiency",
    "ActionEfficiencyService",
    "ActionGroup",
    "ActionImpact",
    "ActionRankingService",
    "ActionSortKey",
    "BoolParameter",
    "ComparisonChartData",
    "ImpactOverview",
    "ImpactOverviewNotFoundError",
    "InvalidSortKeyError",
    "MacChartData",
    "NumberParameter",
    "Parameter",
    "StringParameter",
    "find_action_enabled_param",
]
