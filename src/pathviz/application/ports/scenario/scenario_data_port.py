"""Scenario data read port.

Supplies already-fetched scenario data (outcome nodes, actions, impact
overviews, flows) as domain models. How the data was fetched is not the
concern of the application layer.
"""

from __future__ import annotations

from typing import Protocol

from pathviz.domain.actions import Action, ImpactOverview
from pathviz.domain.flows import DimensionalFlow
from pathviz.domain.metrics import OutcomeNode


class ScenarioDataPort(Protocol):
    """Read interface over one scenario's data."""

    async def list_outcome_nodes(self) -> list[OutcomeNode]:
        """All nodes that carry an outcome metric."""
        ...

    async def get_outcome_node(self, node_id: str) -> OutcomeNode | None:
        ...

    async def list_actions(self) -> list[Action]:
        """Actions in backend order."""
        ...

    async def list_impact_overviews(self) -> list[ImpactOverview]:
        ...

    async def get_impact_overview(
        self,
        overview_id: str | None = None,
    ) -> ImpactOverview | None:
        """Overview by id, or the first one when no id is given."""
        ...

    async def get_dimensional_flow(self, flow_id: str) -> DimensionalFlow | None:
        ...
