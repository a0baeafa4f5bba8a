"""Action domain services."""

from pathviz.domain.actions.services.action_efficiency_service import (
    ActionEfficiencyService,
)
from pathviz.domain.actions.services.action_ranking_service import (
    ActionRankingService,
    mac_bar_placement,
    sort_by_value,
)

__all__ = [
    "ActionEfficiencyService",
    "ActionRankingService",
    "mac_bar_placement",
    "sort_by_value",
]
