"""Filter, order and project actions for efficiency charts."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from typing import TypeVar

from pathviz.domain.actions.entities import Action
from pathviz.domain.actions.value_objects.action_efficiency import (
    ActionEfficiency,
    ActionSortKey,
)
from pathviz.domain.actions.value_objects.chart_data import (
    ComparisonChartData,
    MacChartData,
)
from pathviz.domain.metrics.services import TemporalAggregationService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sort_by_value(
    items: Sequence[T],
    value_of: Callable[[T], float | None],
    ascending: bool,
) -> list[T]:
    """Stable numeric sort; missing values count as zero."""

    def key(item: T) -> float:
        value = value_of(item)
        value = 0.0 if value is None else value
        return value if ascending else -value

    return sorted(items, key=key)


def mac_bar_placement(impacts: Sequence[float | None]) -> tuple[list[float], float]:
    """Return bar centres and the total width left of zero."""
    x_placement: list[float] = []
    negative_side_width = 0.0
    total_saving = 0.0
    for impact in impacts:
        bar = impact or 0.0
        width = abs(bar)
        if bar < 0:
            negative_side_width += width
            x_placement.append(-negative_side_width + width / 2)
        else:
            total_saving += width
            x_placement.append(total_saving - width / 2)
    return x_placement, negative_side_width


class ActionRankingService:
    """Cost-efficiency ranking of actions."""

    @staticmethod
    def filter_efficient(
        items: Sequence[ActionEfficiency],
        plot_limit_for_indicator: float | None = None,
    ) -> list[ActionEfficiency]:
        """Keep items with a finite efficiency within the optional cutoff."""
        kept = []
        for item in items:
            efficiency = item.cumulative_efficiency
            if efficiency is None or not math.isfinite(efficiency):
                continue
            if (
                plot_limit_for_indicator is not None
                and abs(efficiency) > plot_limit_for_indicator
            ):
                logger.debug(
                    "Action %s efficiency %s exceeds plot limit %s",
                    item.id,
                    efficiency,
                    plot_limit_for_indicator,
                )
                continue
            kept.append(item)
        return kept

    @staticmethod
    def sort(
        items: Sequence[ActionEfficiency],
        sort_by: ActionSortKey,
        sort_ascending: bool,
    ) -> list[ActionEfficiency]:
        """Order items, always placing negative cumulative impacts first."""

        def key(item: ActionEfficiency) -> tuple[int, float]:
            value = item.sort_value(sort_by)
            return (
                0 if item.has_negative_impact else 1,
                value if sort_ascending else -value,
            )

        return sorted(items, key=key)

    @staticmethod
    def rank(
        items: Sequence[ActionEfficiency],
        sort_by: ActionSortKey = ActionSortKey.STANDARD,
        sort_ascending: bool = True,
        plot_limit_for_indicator: float | None = None,
    ) -> MacChartData:
        """Filter, sort and project items into MAC chart arrays."""
        kept = ActionRankingService.filter_efficient(items, plot_limit_for_indicator)
        ranked = ActionRankingService.sort(kept, sort_by, sort_ascending)

        impacts = [item.cumulative_impact for item in ranked]
        x_placement, negative_side_width = mac_bar_placement(impacts)

        return MacChartData(
            ids=[item.action.id for item in ranked],
            actions=[item.action.name for item in ranked],
            colors=[item.action.display_color for item in ranked],
            groups=[item.action.group_id for item in ranked],
            cost=[item.cumulative_cost for item in ranked],
            efficiency=[item.cumulative_efficiency or 0.0 for item in ranked],
            impact=impacts,
            x_placement=x_placement,
            negative_side_width=negative_side_width,
        )

    @staticmethod
    def comparison(
        actions: Sequence[Action],
        end_year: int,
        sort_by: ActionSortKey = ActionSortKey.IMPACT,
        sort_ascending: bool = False,
    ) -> ComparisonChartData:
        """Project action impacts at ``end_year`` into bar chart arrays.

        Only ``STANDARD`` and ``IMPACT`` apply here; other keys fall back
        to the impact value.
        """
        impacts = {
            action.id: TemporalAggregationService.impact_point_value(
                action.impact_metric,
                end_year,
            )
            for action in actions
        }

        ordered: list[Action]
        if sort_by is ActionSortKey.STANDARD:
            ordered = list(actions)
        else:
            ordered = sort_by_value(actions, lambda a: impacts[a.id], sort_ascending)

        return ComparisonChartData(
            ids=[a.id for a in ordered],
            actions=[a.name for a in ordered],
            colors=[a.display_color for a in ordered],
            groups=[a.group_id for a in ordered],
            impact=[impacts[a.id] for a in ordered],
        )
