"""Total of several outcome nodes at one year."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathviz.application.dtos.charts import OutcomeTotal
from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.metrics import MetricNotFoundError, TemporalAggregationService
from pathviz.domain.shared.formatting import DEFAULT_SIGNIFICANT_DIGITS, beautify_value

if TYPE_CHECKING:
    from pathviz.application.factories import ScenarioFactory


class OutcomeTotalQuery:
    def __init__(self, scenario_data_port: ScenarioDataPort):
        self._scenario = scenario_data_port

    @classmethod
    def from_factory(cls, factory: ScenarioFactory) -> OutcomeTotalQuery:
        return cls(scenario_data_port=factory.scenario_data_port())

    async def execute(
        self,
        year: int,
        node_ids: list[str] | None = None,
        significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
    ) -> OutcomeTotal:
        """Sum the given nodes (all outcome nodes when none are given)."""
        nodes = await self._scenario.list_outcome_nodes()
        if node_ids:
            by_id = {node.id: node for node in nodes}
            missing = [node_id for node_id in node_ids if node_id not in by_id]
            if missing:
                raise MetricNotFoundError(missing[0])
            nodes = [by_id[node_id] for node_id in node_ids]

        total = TemporalAggregationService.total_across_nodes(nodes, year)
        return OutcomeTotal(
            year=year,
            node_ids=[node.id for node in nodes],
            total=total,
            label=beautify_value(total, significant_digits),
        )
