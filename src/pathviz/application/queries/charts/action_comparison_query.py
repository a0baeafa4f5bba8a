"""Compare action impacts at a single year."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathviz.application.dtos.charts import ComparisonChartResult
from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.actions import ActionRankingService, ActionSortKey

if TYPE_CHECKING:
    from pathviz.application.factories import ScenarioFactory


class ActionComparisonQuery:
    def __init__(self, scenario_data_port: ScenarioDataPort):
        self._scenario = scenario_data_port

    @classmethod
    def from_factory(cls, factory: ScenarioFactory) -> ActionComparisonQuery:
        return cls(scenario_data_port=factory.scenario_data_port())

    async def execute(
        self,
        end_year: int,
        sort_by: ActionSortKey = ActionSortKey.IMPACT,
        ascending: bool = False,
    ) -> ComparisonChartResult:
        actions = await self._scenario.list_actions()
        data = ActionRankingService.comparison(
            actions,
            end_year,
            sort_by=sort_by,
            sort_ascending=ascending,
        )
        return ComparisonChartResult(
            end_year=end_year,
            sort_by=sort_by,
            ascending=ascending,
            data=data,
        )
