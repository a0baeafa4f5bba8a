"""Marginal abatement cost chart for the actions of an impact overview."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathviz.application.dtos.charts import MacChartResult
from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.actions import (
    ActionEfficiencyService,
    ActionRankingService,
    ActionSortKey,
    ImpactOverviewNotFoundError,
)
from pathviz.domain.shared.formatting import sanitize_html_unit

if TYPE_CHECKING:
    from pathviz.application.factories import ScenarioFactory

logger = logging.getLogger(__name__)


class ActionMacQuery:
    """Rank actions by cumulative cost efficiency over a year window."""

    def __init__(self, scenario_data_port: ScenarioDataPort):
        self._scenario = scenario_data_port

    @classmethod
    def from_factory(cls, factory: ScenarioFactory) -> ActionMacQuery:
        return cls(scenario_data_port=factory.scenario_data_port())

    async def execute(
        self,
        start_year: int,
        end_year: int,
        impact_overview_id: str | None = None,
        sort_by: ActionSortKey = ActionSortKey.STANDARD,
        ascending: bool = True,
    ) -> MacChartResult:
        overview = await self._scenario.get_impact_overview(impact_overview_id)
        if overview is None:
            raise ImpactOverviewNotFoundError(impact_overview_id)

        actions = await self._scenario.list_actions()
        derived = ActionEfficiencyService.derive(
            actions,
            overview,
            start_year,
            end_year,
        )
        data = ActionRankingService.rank(
            derived,
            sort_by=sort_by,
            sort_ascending=ascending,
            plot_limit_for_indicator=overview.plot_limit_for_indicator,
        )
        logger.debug(
            "MAC chart for overview %s: %d of %d actions ranked",
            overview.id,
            len(data),
            len(actions),
        )

        return MacChartResult(
            overview_id=overview.id,
            label=overview.label,
            start_year=start_year,
            end_year=end_year,
            sort_by=sort_by,
            ascending=ascending,
            data=data,
            indicator_unit=sanitize_html_unit(overview.indicator_unit),
            effect_unit=sanitize_html_unit(overview.effect_unit),
            cost_unit=sanitize_html_unit(overview.cost_unit),
            plot_limit_for_indicator=overview.plot_limit_for_indicator,
        )
