"""Sankey frames for a dimensional flow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.flows import (
    ChartTheme,
    ColorAssignmentService,
    DimensionalFlow,
    FlowNotFoundError,
    SankeyAnimation,
    SankeyFrame,
    SankeyFrameService,
)

if TYPE_CHECKING:
    from pathviz.application.factories import ScenarioFactory

logger = logging.getLogger(__name__)


class _FlowQuery:
    def __init__(
        self,
        scenario_data_port: ScenarioDataPort,
        theme: ChartTheme | None = None,
    ):
        self._scenario = scenario_data_port
        self._theme = theme or ChartTheme()

    async def _load_flow(self, flow_id: str) -> DimensionalFlow:
        flow = await self._scenario.get_dimensional_flow(flow_id)
        if flow is None:
            raise FlowNotFoundError(flow_id)
        return flow


class SankeyFrameQuery(_FlowQuery):
    """Single frame comparing the first link year with ``end_year``."""

    @classmethod
    def from_factory(cls, factory: ScenarioFactory) -> SankeyFrameQuery:
        return cls(
            scenario_data_port=factory.scenario_data_port(),
            theme=factory.chart_theme(),
        )

    async def execute(self, flow_id: str, end_year: int) -> SankeyFrame:
        flow = await self._load_flow(flow_id)
        current = SankeyFrameService.select_current_link(flow, end_year)
        node_colors = ColorAssignmentService.node_color_map(flow.nodes, self._theme)
        logger.debug(
            "Sankey frame for flow %s: %d -> %d",
            flow.id,
            flow.links[0].year,
            current.year,
        )
        return SankeyFrameService.build_frame(
            flow,
            flow.links[0],
            current,
            node_colors,
            segment_tint=self._theme.segment_tint,
            default_color=self._theme.default_color,
        )


class SankeyAnimationQuery(_FlowQuery):
    """Frames for every link year, for an animated Sankey with a slider."""

    @classmethod
    def from_factory(cls, factory: ScenarioFactory) -> SankeyAnimationQuery:
        return cls(
            scenario_data_port=factory.scenario_data_port(),
            theme=factory.chart_theme(),
        )

    async def execute(self, flow_id: str) -> SankeyAnimation:
        flow = await self._load_flow(flow_id)
        node_colors = ColorAssignmentService.node_color_map(flow.nodes, self._theme)
        return SankeyFrameService.build_animation(
            flow,
            node_colors,
            segment_tint=self._theme.segment_tint,
            default_color=self._theme.default_color,
        )
