"""Charts router: chart-ready data derived from scenario data.

All endpoints return parallel arrays or traces that can be handed to a
charting library without further computation.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from pathviz.application.queries.charts import (
    ActionComparisonQuery,
    ActionListQuery,
    ActionMacQuery,
    MetricSummaryQuery,
    OutcomeTotalQuery,
    SankeyAnimationQuery,
    SankeyFrameQuery,
)
from pathviz.domain.actions import ActionSortKey
from pathviz.domain.flows import SankeyFrame
from pathviz.presentation.api.dependencies import ChartFactory, SignificantDigits
from pathviz.presentation.api.schemas.charts import (
    ActionListItemResponse,
    ActionListResponse,
    AxisRangeResponse,
    ComparisonChartResponse,
    MacChartResponse,
    MetricPlotResponse,
    MetricSummaryResponse,
    OutcomeTotalResponse,
    SankeyAnimationResponse,
    SankeyFrameResponse,
    SankeyLinkTraceResponse,
    SankeyNodeTraceResponse,
    SliderStepResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

StartYearParam = Annotated[
    int,
    Query(ge=1800, le=2200, description="First year of the window (inclusive)"),
]
EndYearParam = Annotated[
    int,
    Query(ge=1800, le=2200, description="Last year of the window (inclusive)"),
]
SortByParam = Annotated[
    ActionSortKey,
    Query(description="Sort key for actions"),
]
AscendingParam = Annotated[
    bool,
    Query(description="Sort ascending (negative impacts always come first)"),
]


def _sankey_frame_response(frame: SankeyFrame) -> SankeyFrameResponse:
    return SankeyFrameResponse(
        year=frame.year,
        start_year=frame.start_year,
        node=SankeyNodeTraceResponse(
            label=frame.node.label,
            color=frame.node.color,
        ),
        link=SankeyLinkTraceResponse(
            source=frame.link.source,
            target=frame.link.target,
            value=frame.link.value,
            color=frame.link.color,
            kind=[kind.value for kind in frame.link.kind],
        ),
        ids=frame.ids,
    )


@router.get(
    "/metrics/{node_id}/summary",
    summary="Get a metric summary for an outcome node",
    responses={
        200: {"description": "Headline values and plot series"},
        404: {"description": "Node not found"},
    },
)
async def get_metric_summary(
    node_id: str,
    factory: ChartFactory,
    significant_digits: SignificantDigits,
    start_year: StartYearParam,
    end_year: EndYearParam,
) -> MetricSummaryResponse:
    """
    Summarize a node's metric over `[start_year, end_year]`.

    - `start_value`/`end_value` prefer forecast over historical values
    - `percent_change` is positive for a decrease
    - `cumulative_value` sums every historical and forecast point
    - `axis_range` is a rounded range for the chart's y axis
    """
    query = MetricSummaryQuery.from_factory(factory)
    result = await query.execute(
        node_id=node_id,
        start_year=start_year,
        end_year=end_year,
        significant_digits=significant_digits,
    )

    return MetricSummaryResponse(
        node_id=result.node_id,
        name=result.name,
        unit=result.unit,
        start_year=result.start_year,
        end_year=result.end_year,
        start_value=result.start_value,
        end_value=result.end_value,
        percent_change=result.percent_change,
        cumulative_value=result.cumulative_value,
        axis_range=AxisRangeResponse(
            minimum=result.axis_range.minimum,
            maximum=result.axis_range.maximum,
        ),
        plots=[
            MetricPlotResponse(
                segment=plot.segment.value,
                years=plot.years,
                values=plot.values,
            )
            for plot in result.plots
        ],
        start_label=result.start_label,
        end_label=result.end_label,
        cumulative_label=result.cumulative_label,
    )


@router.get(
    "/outcome/total",
    summary="Get the total of outcome nodes at a year",
)
async def get_outcome_total(
    factory: ChartFactory,
    significant_digits: SignificantDigits,
    year: Annotated[int, Query(ge=1800, le=2200, description="Year to total")],
    node_ids: Annotated[
        list[str] | None,
        Query(description="Nodes to include (default: all outcome nodes)"),
    ] = None,
) -> OutcomeTotalResponse:
    """Sum node values at `year`, skipping nodes without a value."""
    query = OutcomeTotalQuery.from_factory(factory)
    result = await query.execute(
        year=year,
        node_ids=node_ids,
        significant_digits=significant_digits,
    )
    return OutcomeTotalResponse(
        year=result.year,
        node_ids=result.node_ids,
        total=result.total,
        label=result.label,
    )


@router.get(
    "/actions/mac",
    summary="Get marginal abatement cost chart data",
    responses={
        200: {"description": "Ranked actions as parallel arrays"},
        404: {"description": "Impact overview not found"},
    },
)
async def get_mac_chart(  # NOQA: PLR0913
    factory: ChartFactory,
    start_year: StartYearParam,
    end_year: EndYearParam,
    impact_overview_id: Annotated[
        str | None,
        Query(description="Impact overview (default: first)"),
    ] = None,
    sort_by: SortByParam = ActionSortKey.STANDARD,
    ascending: AscendingParam = True,
) -> MacChartResponse:
    """
    Rank actions by cumulative cost efficiency.

    Actions without an efficiency, or beyond the overview's plot limit,
    are left out.
    """
    query = ActionMacQuery.from_factory(factory)
    result = await query.execute(
        start_year=start_year,
        end_year=end_year,
        impact_overview_id=impact_overview_id,
        sort_by=sort_by,
        ascending=ascending,
    )
    data = result.data

    return MacChartResponse(
        overview_id=result.overview_id,
        label=result.label,
        start_year=result.start_year,
        end_year=result.end_year,
        sort_by=result.sort_by.value,
        ascending=result.ascending,
        indicator_unit=result.indicator_unit,
        effect_unit=result.effect_unit,
        cost_unit=result.cost_unit,
        plot_limit_for_indicator=result.plot_limit_for_indicator,
        ids=data.ids,
        actions=data.actions,
        colors=data.colors,
        groups=data.groups,
        cost=data.cost,
        efficiency=data.efficiency,
        impact=data.impact,
        x_placement=data.x_placement,
        negative_side_width=data.negative_side_width,
    )


@router.get(
    "/actions/comparison",
    summary="Compare action impacts at a year",
)
async def get_action_comparison(
    factory: ChartFactory,
    end_year: EndYearParam,
    sort_by: SortByParam = ActionSortKey.IMPACT,
    ascending: AscendingParam = False,
) -> ComparisonChartResponse:
    """Impact of every action at `end_year`, missing values as 0."""
    query = ActionComparisonQuery.from_factory(factory)
    result = await query.execute(
        end_year=end_year,
        sort_by=sort_by,
        ascending=ascending,
    )
    data = result.data
    return ComparisonChartResponse(
        end_year=result.end_year,
        sort_by=result.sort_by.value,
        ascending=result.ascending,
        ids=data.ids,
        actions=data.actions,
        colors=data.colors,
        groups=data.groups,
        impact=data.impact,
    )


@router.get(
    "/actions/list",
    summary="List actions with yearly and cumulative impacts",
)
async def get_action_list(  # NOQA: PLR0913
    factory: ChartFactory,
    start_year: StartYearParam,
    end_year: EndYearParam,
    sort_by: SortByParam = ActionSortKey.STANDARD,
    ascending: AscendingParam = True,
    group_id: Annotated[
        str | None,
        Query(description="Only actions of this group ('ALL_ACTIONS' = all)"),
    ] = None,
    decision_level: Annotated[
        str | None,
        Query(description="Only actions at this decision level"),
    ] = None,
    impact_overview_id: Annotated[
        str | None,
        Query(description="Impact overview for cost and efficiency"),
    ] = None,
) -> ActionListResponse:
    """
    List actions with impact at `end_year` and over the window.

    `impact_share` is the percentage of the listed actions' total
    cumulative impact (0 when the total is 0).
    """
    query = ActionListQuery.from_factory(factory)
    result = await query.execute(
        start_year=start_year,
        end_year=end_year,
        sort_by=sort_by,
        ascending=ascending,
        group_id=group_id,
        decision_level=decision_level,
        impact_overview_id=impact_overview_id,
    )

    return ActionListResponse(
        start_year=result.start_year,
        end_year=result.end_year,
        sort_by=result.sort_by.value,
        ascending=result.ascending,
        total_cumulative_impact=result.total_cumulative_impact,
        items=[
            ActionListItemResponse(
                action_id=item.action_id,
                name=item.name,
                color=item.color,
                group_id=item.group_id,
                group_name=item.group_name,
                decision_level=item.decision_level,
                is_enabled=item.is_enabled,
                impact_on_target_year=item.impact_on_target_year,
                cumulative_impact=item.cumulative_impact,
                impact_share=item.impact_share,
                cumulative_cost=item.cumulative_cost,
                cumulative_efficiency=item.cumulative_efficiency,
            )
            for item in result.items
        ],
    )


@router.get(
    "/flows/{flow_id}/sankey",
    summary="Get a Sankey frame for a dimensional flow",
    responses={
        200: {"description": "Sankey trace with integer node indices"},
        404: {"description": "Flow not found"},
        502: {"description": "Flow data is malformed"},
    },
)
async def get_sankey_frame(
    flow_id: str,
    factory: ChartFactory,
    end_year: EndYearParam,
) -> SankeyFrameResponse:
    """
    Compare the flow's first year with `end_year`.

    If no link exists for `end_year`, the nearest later link is used,
    then the last one. Each flow source is threaded from a "start" node
    through its current node to a "remaining" node.
    """
    query = SankeyFrameQuery.from_factory(factory)
    frame = await query.execute(flow_id=flow_id, end_year=end_year)
    return _sankey_frame_response(frame)


@router.get(
    "/flows/{flow_id}/animation",
    summary="Get animated Sankey frames for a dimensional flow",
)
async def get_sankey_animation(
    flow_id: str,
    factory: ChartFactory,
) -> SankeyAnimationResponse:
    """One frame per link year after the first, with slider steps."""
    query = SankeyAnimationQuery.from_factory(factory)
    animation = await query.execute(flow_id=flow_id)
    return SankeyAnimationResponse(
        flow_id=animation.flow_id,
        unit=animation.unit,
        frames=[_sankey_frame_response(frame) for frame in animation.frames],
        steps=[
            SliderStepResponse(label=step.label, year=step.year)
            for step in animation.steps
        ],
    )
