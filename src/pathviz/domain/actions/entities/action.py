"""Action entity as delivered by the backend for one scenario."""

from __future__ import annotations

from pathviz.domain.actions.value_objects.parameters import (
    Parameter,
    find_action_enabled_param,
)
from pathviz.domain.metrics.value_objects import Metric
from pathviz.domain.shared.value_objects import BackendModel


class ActionGroup(BackendModel):
    id: str
    name: str
    color: str | None = None


class Action(BackendModel):
    """A climate action with its impact (and optionally cost) metric."""

    id: str
    name: str
    color: str | None = None
    group: ActionGroup | None = None
    decision_level: str | None = None
    impact_metric: Metric = Metric()
    cost_metric: Metric | None = None
    parameters: list[Parameter] = []

    @property
    def display_color(self) -> str | None:
        """Own color, falling back to the group color."""
        if self.color:
            return self.color
        return self.group.color if self.group else None

    @property
    def group_id(self) -> str | None:
        return self.group.id if self.group else None

    @property
    def is_enabled(self) -> bool:
        """Whether the action is active in the current scenario."""
        param = find_action_enabled_param(self.parameters)
        if param is None or param.value is None:
            return True
        return param.value
