"""Flow value objects."""

from pathviz.domain.flows.value_objects.flow import (
    DimensionalFlow,
    FlowLink,
    FlowNode,
)
from pathviz.domain.flows.value_objects.sankey import (
    SankeyAnimation,
    SankeyFrame,
    SankeyLinkKind,
    SankeyLinks,
    SankeyNodes,
    SliderStep,
)
from pathviz.domain.flows.value_objects.theme import ChartTheme, NodeColor

__all__ = [
    "ChartTheme",
    "DimensionalFlow",
    "FlowLink",
    "FlowNode",
    "NodeColor",
    "SankeyAnimation",
    "SankeyFrame",
    "SankeyLinkKind",
    "SankeyLinks",
    "SankeyNodes",
    "SliderStep",
]
