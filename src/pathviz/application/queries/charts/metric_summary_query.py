"""Summarize one outcome node's metric over a year window."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathviz.application.dtos.charts import AxisRange, MetricPlot, MetricSummary
from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.metrics import (
    InvalidYearRangeError,
    MetricNotFoundError,
    MetricSegment,
    RangeEstimationService,
    TemporalAggregationService,
)
from pathviz.domain.shared.formatting import (
    DEFAULT_SIGNIFICANT_DIGITS,
    beautify_value,
    sanitize_html_unit,
)

if TYPE_CHECKING:
    from pathviz.application.factories import ScenarioFactory


class MetricSummaryQuery:
    """Headline values, percent change, cumulative sum and plot series."""

    def __init__(self, scenario_data_port: ScenarioDataPort):
        self._scenario = scenario_data_port

    @classmethod
    def from_factory(cls, factory: ScenarioFactory) -> MetricSummaryQuery:
        return cls(scenario_data_port=factory.scenario_data_port())

    async def execute(
        self,
        node_id: str,
        start_year: int,
        end_year: int,
        significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
    ) -> MetricSummary:
        if start_year > end_year:
            raise InvalidYearRangeError(start_year, end_year)

        node = await self._scenario.get_outcome_node(node_id)
        if node is None:
            raise MetricNotFoundError(node_id)
        metric = node.metric

        start_value = TemporalAggregationService.point_value(metric, start_year)
        end_value = TemporalAggregationService.point_value(metric, end_year)
        cumulative = TemporalAggregationService.sum_series_in_range(
            metric,
            start_year,
            end_year,
        )

        plots = []
        plotted_values: list[float | None] = []
        for segment in MetricSegment:
            years, values = TemporalAggregationService.metric_to_plot(
                metric,
                segment,
                start_year,
                end_year,
            )
            if not years:
                continue
            plots.append(MetricPlot(segment=segment, years=years, values=values))
            plotted_values.extend(values)

        minimum, maximum = RangeEstimationService.estimate_range(plotted_values)

        return MetricSummary(
            node_id=node.id,
            name=metric.name or node.name,
            unit=sanitize_html_unit(metric.unit),
            start_year=start_year,
            end_year=end_year,
            start_value=start_value,
            end_value=end_value,
            percent_change=TemporalAggregationService.percent_change(
                start_value,
                end_value,
            ),
            cumulative_value=cumulative,
            axis_range=AxisRange(minimum=minimum, maximum=maximum),
            plots=plots,
            start_label=beautify_value(start_value, significant_digits),
            end_label=beautify_value(end_value, significant_digits),
            cumulative_label=beautify_value(cumulative, significant_digits),
        )
