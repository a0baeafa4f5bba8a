"""Cumulative values derived for an action over a year window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pathviz.domain.actions.entities import Action
from pathviz.domain.actions.exceptions import InvalidSortKeyError


class ActionSortKey(str, Enum):
    """Orderings offered for action lists and charts."""

    STANDARD = "STANDARD"
    CUM_EFFICIENCY = "CUM_EFFICIENCY"
    CUM_COST = "CUM_COST"
    CUM_IMPACT = "CUM_IMPACT"
    IMPACT = "IMPACT"

    @classmethod
    def parse(cls, value: str) -> ActionSortKey:
        """Parse a case-insensitive sort key name."""
        try:
            return cls(value.strip().upper())
        except ValueError as e:
            raise InvalidSortKeyError(value) from e


@dataclass(frozen=True)
class ActionEfficiency:
    """An action with the scalars derived for one computation.

    Recomputed whenever the year window or scenario changes.
    """

    action: Action
    impact_on_target_year: float = 0.0
    cumulative_impact: float | None = None
    cumulative_cost: float | None = None
    cumulative_efficiency: float | None = None
    unit_adjustment_multiplier: float | None = None

    @property
    def id(self) -> str:
        return self.action.id

    @property
    def has_negative_impact(self) -> bool:
        return self.cumulative_impact is not None and self.cumulative_impact < 0

    def sort_value(self, sort_by: ActionSortKey) -> float:
        """Numeric value used for ordering; missing values count as zero."""
        value: float | None
        if sort_by is ActionSortKey.CUM_EFFICIENCY:
            value = self.cumulative_efficiency
        elif sort_by is ActionSortKey.CUM_COST:
            value = self.cumulative_cost
        elif sort_by is ActionSortKey.CUM_IMPACT:
            value = self.cumulative_impact
        elif sort_by is ActionSortKey.IMPACT:
            value = self.impact_on_target_year
        else:
            value = None
        return 0.0 if value is None else value
