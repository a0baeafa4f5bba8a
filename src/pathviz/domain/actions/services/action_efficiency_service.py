"""Derive cumulative cost, impact and efficiency per action."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pathviz.domain.actions.entities import Action
from pathviz.domain.actions.value_objects import ImpactOverview
from pathviz.domain.actions.value_objects.action_efficiency import ActionEfficiency
from pathviz.domain.metrics.exceptions import InvalidYearRangeError
from pathviz.domain.metrics.services import TemporalAggregationService

logger = logging.getLogger(__name__)


class ActionEfficiencyService:
    """Turns actions and an impact overview into ActionEfficiency records."""

    @staticmethod
    def derive(
        actions: Sequence[Action],
        overview: ImpactOverview | None,
        start_year: int,
        end_year: int,
    ) -> list[ActionEfficiency]:
        """Compute the per-action scalars for the ``[start_year, end_year]`` window.

        Actions missing from the overview keep only their target-year impact.
        Efficiency is ``cost / |impact| * multiplier`` and is left unset when
        there is no multiplier or the cumulative impact is zero.
        """
        if start_year > end_year:
            raise InvalidYearRangeError(start_year, end_year)

        derived: list[ActionEfficiency] = []
        for action in actions:
            impact_on_target_year = TemporalAggregationService.impact_point_value(
                action.impact_metric,
                end_year,
            )

            entry = overview.for_action(action.id) if overview else None
            if entry is None:
                derived.append(
                    ActionEfficiency(
                        action=action,
                        impact_on_target_year=impact_on_target_year,
                    ),
                )
                continue

            cumulative_impact = TemporalAggregationService.sum_series_in_range(
                entry.impact_values,
                start_year,
                end_year,
            )
            cumulative_cost = TemporalAggregationService.sum_series_in_range(
                entry.cost_values,
                start_year,
                end_year,
            )

            multiplier = entry.unit_adjustment_multiplier
            cumulative_efficiency: float | None = None
            if multiplier is not None:
                if cumulative_impact == 0:
                    logger.debug(
                        "Action %s has zero cumulative impact, no efficiency",
                        action.id,
                    )
                else:
                    cumulative_efficiency = (
                        cumulative_cost / abs(cumulative_impact) * multiplier
                    )

            derived.append(
                ActionEfficiency(
                    action=action,
                    impact_on_target_year=impact_on_target_year,
                    cumulative_impact=cumulative_impact,
                    cumulative_cost=cumulative_cost,
                    cumulative_efficiency=cumulative_efficiency,
                    unit_adjustment_multiplier=multiplier,
                ),
            )
        return derived
