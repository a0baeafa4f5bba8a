"""Flow domain services."""

from pathviz.domain.flows.services.color_assignment_service import (
    ColorAssignmentService,
    parse_color,
)
from pathviz.domain.flows.services.sankey_frame_service import SankeyFrameService

__all__ = ["ColorAssignmentService", "SankeyFrameService", "parse_color"]
