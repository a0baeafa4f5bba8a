"""API request/response schemas."""

from pathviz.presentation.api.schemas.charts import (
    ActionListItemResponse,
    ActionListResponse,
    AxisRangeResponse,
    ComparisonChartResponse,
    HealthResponse,
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

__all__ = [
    "ActionListItemResponse",
    "ActionListResponse",
    "AxisRangeResponse",
    "ComparisonChartResponse",
    "HealthResponse",
    "MacChartResponse",
    "MetricPlotResponse",
    "MetricSummaryResponse",
    "OutcomeTotalResponse",
    "SankeyAnimationResponse",
    "SankeyFrameResponse",
    "SankeyLinkTraceResponse",
    "SankeyNodeTraceResponse",
    "SliderStepResponse",
]
