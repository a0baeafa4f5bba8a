"""Action list with yearly and cumulative impacts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathviz.application.dtos.charts import ActionListItem, ActionListResult
from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.actions import (
    ActionEfficiency,
    ActionEfficiencyService,
    ActionSortKey,
)
from pathviz.domain.actions.services import sort_by_value
from pathviz.domain.metrics import TemporalAggregationService

if TYPE_CHECKING:
    from pathviz.application.factories import ScenarioFactory

ALL_ACTIONS = "ALL_ACTIONS"


class ActionListQuery:
    """List actions with their impact share over a year window.

    Impact shares are relative to the total cumulative impact of the
    listed actions, so they follow the active filters.
    """

    def __init__(self, scenario_data_port: ScenarioDataPort):
        self._scenario = scenario_data_port

    @classmethod
    def from_factory(cls, factory: ScenarioFactory) -> ActionListQuery:
        return cls(scenario_data_port=factory.scenario_data_port())

    async def execute(  # NOQA: PLR0913
        self,
        start_year: int,
        end_year: int,
        sort_by: ActionSortKey = ActionSortKey.STANDARD,
        ascending: bool = True,
        group_id: str | None = None,
        decision_level: str | None = None,
        impact_overview_id: str | None = None,
    ) -> ActionListResult:
        actions = await self._scenario.list_actions()
        if group_id and group_id != ALL_ACTIONS:
            actions = [a for a in actions if a.group_id == group_id]
        if decision_level:
            actions = [a for a in actions if a.decision_level == decision_level]

        overview = await self._scenario.get_impact_overview(impact_overview_id)
        derived = ActionEfficiencyService.derive(
            actions,
            overview,
            start_year,
            end_year,
        )

        cumulative = {
            item.id: self._cumulative_impact(item, start_year, end_year)
            for item in derived
        }
        total = sum(cumulative.values())

        if sort_by is ActionSortKey.CUM_IMPACT:
            ordered = sort_by_value(derived, lambda i: cumulative[i.id], ascending)
        elif sort_by is ActionSortKey.STANDARD:
            ordered = list(derived)
        else:
            ordered = sort_by_value(
                derived,
                lambda i: i.sort_value(sort_by),
                ascending,
            )

        items = [
            ActionListItem(
                action_id=item.id,
                name=item.action.name,
                color=item.action.display_color,
                group_id=item.action.group_id,
                group_name=item.action.group.name if item.action.group else None,
                decision_level=item.action.decision_level,
                is_enabled=item.action.is_enabled,
                impact_on_target_year=item.impact_on_target_year,
                cumulative_impact=cumulative[item.id],
                impact_share=(cumulative[item.id] / total * 100) if total else 0.0,
                cumulative_cost=item.cumulative_cost,
                cumulative_efficiency=item.cumulative_efficiency,
            )
            for item in ordered
        ]

        return ActionListResult(
            start_year=start_year,
            end_year=end_year,
            sort_by=sort_by,
            ascending=ascending,
            items=items,
            total_cumulative_impact=total,
        )

    @staticmethod
    def _cumulative_impact(
        item: ActionEfficiency,
        start_year: int,
        end_year: int,
    ) -> float:
        # Overview impact when available, otherwise the action's own metric
        if item.cumulative_impact is not None:
            return item.cumulative_impact
        return TemporalAggregationService.sum_series_in_range(
            item.action.impact_metric,
            start_year,
            end_year,
        )
