"""Build Sankey frames comparing a flow's first year with a later year."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence

from pathviz.domain.flows.exceptions import EmptyFlowError, MalformedFlowLinkError
from pathviz.domain.flows.services.color_assignment_service import (
    ColorAssignmentService,
)
from pathviz.domain.flows.value_objects import (
    DimensionalFlow,
    FlowLink,
    NodeColor,
    SankeyAnimation,
    SankeyFrame,
    SankeyLinkKind,
    SliderStep,
)
from pathviz.domain.flows.value_objects.theme import DEFAULT_COLOR

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_TINT = 0.5


def _finite(value: float | None, *, year: int, field: str, index: int) -> float:
    if value is None:
        return 0.0
    if not math.isfinite(value):
        logger.warning("Non-finite %s[%d] in flow link %d", field, index, year)
        raise MalformedFlowLinkError(
            f"Non-finite value in {field} at index {index}",
            year=year,
            details={"field": field, "index": index},
        )
    return float(value)


def _check_parallel(link: FlowLink) -> None:
    lengths = {
        "sources": len(link.sources),
        "targets": len(link.targets),
        "values": len(link.values),
    }
    if len(set(lengths.values())) > 1:
        logger.warning("Mismatched link arrays for year %d: %s", link.year, lengths)
        raise MalformedFlowLinkError(
            "Flow link arrays have different lengths",
            year=link.year,
            details=lengths,
        )


def _check_absolute_values(link: FlowLink, expected: int) -> None:
    if len(link.absolute_source_values) < expected:
        logger.warning(
            "Link %d has %d absolute source values for %d sources",
            link.year,
            len(link.absolute_source_values),
            expected,
        )
        raise MalformedFlowLinkError(
            "Too few absolute source values",
            year=link.year,
            details={
                "expected": expected,
                "actual": len(link.absolute_source_values),
            },
        )


class SankeyFrameService:
    """Frame construction and link selection for dimensional flows."""

    @staticmethod
    def select_current_link(flow: DimensionalFlow, end_year: int) -> FlowLink:
        """Pick the link to compare against the first one.

        The target year is never earlier than one year after the first
        link. An exact match wins, then the nearest later link, then the
        last link.
        """
        if not flow.links:
            raise EmptyFlowError(flow.id)

        year = max(flow.links[0].year + 1, end_year)
        later: FlowLink | None = None
        for link in flow.links:
            if link.year == year:
                return link
            if link.year > year and (later is None or link.year < later.year):
                later = link
        if later is not None:
            logger.debug(
                "No link for %d in flow %s, using %d",
                year,
                flow.id,
                later.year,
            )
            return later

        last = max(flow.links, key=lambda link: link.year)
        logger.debug("No link at or after %d in flow %s, using last", year, flow.id)
        return last

    @staticmethod
    def build_frame(
        flow: DimensionalFlow,
        start: FlowLink,
        current: FlowLink,
        node_colors: Mapping[str, NodeColor],
        segment_tint: float = DEFAULT_SEGMENT_TINT,
        default_color: str = DEFAULT_COLOR,
    ) -> SankeyFrame:
        """Build the trace for ``current``, threading each source from ``start``.

        Every flow source gets a start and a remaining node. The start
        value splits into remaining, impact and other, so the three edges
        add up to the source's absolute value in the start year.
        Nodes missing from ``node_colors`` use ``default_color``.
        """
        node_index = flow.node_index()
        _check_parallel(current)
        _check_absolute_values(start, len(flow.sources))
        _check_absolute_values(current, len(flow.sources))

        def index_of(node_id: str, field: str) -> int:
            idx = node_index.get(node_id)
            if idx is None:
                logger.warning("Unknown node %r in flow %s", node_id, flow.id)
                raise MalformedFlowLinkError(
                    f"Unknown node '{node_id}' in {field}",
                    year=current.year,
                    details={"node_id": node_id, "field": field},
                )
            return idx

        def color_of(node_id: str) -> NodeColor:
            return node_colors.get(node_id) or NodeColor(default_color, default_color)

        def tinted(node_id: str) -> str:
            link_color = color_of(node_id).link_color
            return ColorAssignmentService.tint(link_color, segment_tint)

        frame = SankeyFrame(year=current.year, start_year=start.year)
        for node in flow.nodes:
            frame.node.append(node.label, color_of(node.id).color)

        impact_sum: dict[str, float] = {}
        for i, (src, tgt) in enumerate(zip(current.sources, current.targets)):
            value = _finite(
                current.values[i],
                year=current.year,
                field="values",
                index=i,
            )
            frame.link.append(
                index_of(src, "sources"),
                index_of(tgt, "targets"),
                value,
                color_of(src).link_color,
                SankeyLinkKind.FLOW,
            )
            frame.ids.append(f"{src}/{tgt}")
            impact_sum[src] = impact_sum.get(src, 0.0) + value

        for i, src in enumerate(flow.sources):
            current_idx = index_of(src, "flow sources")
            label = flow.nodes[current_idx].label

            start_value = _finite(
                start.absolute_source_values[i],
                year=start.year,
                field="absolute_source_values",
                index=i,
            )
            remaining = _finite(
                current.absolute_source_values[i],
                year=current.year,
                field="absolute_source_values",
                index=i,
            )
            impact = impact_sum.get(src, 0.0)
            other = start_value - impact - remaining

            start_idx = frame.node.append(f"{label} start", color_of(src).color)
            remaining_idx = frame.node.append(f"{label} remaining", tinted(src))

            for kind, value, color in (
                (SankeyLinkKind.REMAINING, remaining, tinted(src)),
                (SankeyLinkKind.IMPACT, impact, color_of(src).link_color),
                (SankeyLinkKind.OTHER, other, tinted(src)),
            ):
                frame.link.append(start_idx, current_idx, value, color, kind)
                frame.ids.append(f"{src}:start/{src}:{kind.value}")

            frame.link.append(
                current_idx,
                remaining_idx,
                remaining,
                tinted(src),
                SankeyLinkKind.CARRY,
            )
            frame.ids.append(f"{src}/{src}:remaining")

        return frame

    @staticmethod
    def build_animation(
        flow: DimensionalFlow,
        node_colors: Mapping[str, NodeColor],
        segment_tint: float = DEFAULT_SEGMENT_TINT,
        default_color: str = DEFAULT_COLOR,
    ) -> SankeyAnimation:
        """One frame per link after the first, with a slider step each."""
        if not flow.links:
            raise EmptyFlowError(flow.id)

        start = flow.links[0]
        targets: Sequence[FlowLink] = flow.links[1:] or flow.links[:1]

        animation = SankeyAnimation(flow_id=flow.id, unit=flow.unit)
        for link in targets:
            animation.frames.append(
                SankeyFrameService.build_frame(
                    flow,
                    start,
                    link,
                    node_colors,
                    segment_tint,
                    default_color,
                ),
            )
            animation.steps.append(SliderStep(label=str(link.year), year=link.year))
        return animation
