"""Flows domain: dimensional flows, node colors and Sankey frames."""

from pathviz.domain.flows.exceptions import (
    EmptyFlowError,
    FlowNotFoundError,
    MalformedFlowLinkError,
)
from pathviz.domain.flows.services import ColorAssignmentService, SankeyFrameService
from pathviz.domain.flows.value_objects import (
    ChartTheme,
    DimensionalFlow,
    FlowLink,
    FlowNode,
    NodeColor,
    SankeyAnimation,
    SankeyFrame,
    SankeyLinkKind,
    SliderStep,
)

__all__ = [
    "ChartTheme",
    "ColorAssignmentService",
    "DimensionalFlow",
    "EmptyFlowError",
    "FlowLink",
    "FlowNode",
    "FlowNotFoundError",
    "MalformedFlowLinkError",
    "NodeColor",
    "SankeyAnimation",
    "SankeyFrame",
    "SankeyFrameService",
    "SankeyLinkKind",
    "SliderStep",
]
