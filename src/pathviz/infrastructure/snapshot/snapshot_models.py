"""Pydantic models for a scenario snapshot file."""

from __future__ import annotations

from pydantic import field_validator

from pathviz.domain.actions import Action, ImpactOverview
from pathviz.domain.flows import DimensionalFlow
from pathviz.domain.metrics import OutcomeNode
from pathviz.domain.shared.value_objects import BackendModel


class ScenarioSnapshot(BackendModel):
    """One scenario's backend response, saved as JSON.

    Keys are camelCase as delivered by the backend.
    """

    outcome_nodes: list[OutcomeNode] = []
    actions: list[Action] = []
    impact_overviews: list[ImpactOverview] = []
    flows: list[DimensionalFlow] = []

    @field_validator(
        "outcome_nodes",
        "actions",
        "impact_overviews",
        "flows",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v
