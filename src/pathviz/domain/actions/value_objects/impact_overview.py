"""Impact overview: a cost metric paired with an impact metric."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator

from pathviz.domain.metrics.value_objects import MetricPoint
from pathviz.domain.shared.value_objects import BackendModel


class ActionImpact(BackendModel):
    """Cost and impact series of one action within an overview."""

    action_id: str = Field(
        validation_alias=AliasChoices("action", "actionId", "action_id"),
    )
    unit_adjustment_multiplier: float | None = None
    cost_values: list[MetricPoint] = []
    impact_values: list[MetricPoint] = []

    @field_validator("action_id", mode="before")
    @classmethod
    def _unwrap_action_ref(cls, v):
        # The backend nests the action as {"action": {"id": ...}}
        if isinstance(v, dict):
            return v.get("id")
        return v

    @field_validator("cost_values", "impact_values", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v


class ImpactOverview(BackendModel):
    """Efficiency pair used to rank actions by cost per unit of impact."""

    id: str
    label: str = ""
    graph_type: str | None = None
    indicator_unit: str = ""
    effect_unit: str | None = None
    cost_unit: str | None = None
    effect_node_name: str | None = None
    cost_node_name: str | None = None
    plot_limit_for_indicator: float | None = None
    invert_impact: bool = False
    actions: list[ActionImpact] = []

    def for_action(self, action_id: str) -> ActionImpact | None:
        for entry in self.actions:
            if entry.action_id == action_id:
                return entry
        return None
