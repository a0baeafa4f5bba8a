"""Pydantic schemas for chart endpoints.

All array fields of one response are parallel: element ``i`` of every
array describes the same action, node or link.
"""

from pydantic import BaseModel, ConfigDict, Field


class MetricPlotResponse(BaseModel):
    """Year/value series of one metric segment."""

    segment: str = Field(
        description="'historical', 'forecast' or 'baseline_forecast'",
    )
    years: list[int] = Field(description="Years in ascending order")
    values: list[float | None] = Field(description="Value per year (null = missing)")


class AxisRangeResponse(BaseModel):
    minimum: float = Field(description="Rounded lower axis bound (0 unless data < 0)")
    maximum: float = Field(description="Rounded upper axis bound (>= max value)")


class MetricSummaryResponse(BaseModel):
    """Headline numbers and plot series for one outcome node.

    **Chart types:**
    - Line/area chart from `plots`
    - Summary card from the labels and `percent_change`
    """

    node_id: str = Field(description="Outcome node identifier")
    name: str = Field(description="Display name of the metric")
    unit: str = Field(description="Plain-text unit (HTML tags converted)")
    start_year: int
    end_year: int
    start_value: float | None = Field(description="Value at start year")
    end_value: float | None = Field(description="Value at end year")
    percent_change: int | None = Field(
        description="Reduction from start to end in percent (positive = decrease)",
    )
    cumulative_value: float = Field(description="Sum of all points in the window")
    axis_range: AxisRangeResponse
    plots: list[MetricPlotResponse]
    start_label: str = Field(description="Start value rounded for display")
    end_label: str = Field(description="End value rounded for display")
    cumulative_label: str = Field(description="Cumulative value rounded for display")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "node_id": "net_emissions",
                "name": "Net emissions",
                "unit": "kt CO₂e/a",
                "start_year": 1990,
                "end_year": 2030,
                "start_value": 100.0,
                "end_value": 50.0,
                "percent_change": 50,
                "cumulative_value": 310.0,
                "axis_range": {"minimum": 0.0, "maximum": 100.0},
                "plots": [
                    {
                        "segment": "historical",
                        "years": [1990, 2020],
                        "values": [100.0, 80.0],
                    },
                    {
                        "segment": "forecast",
                        "years": [2020, 2030],
                        "values": [80.0, 50.0],
                    },
                ],
                "start_label": "100",
                "end_label": "50",
                "cumulative_label": "310",
            }
        }
    )


class OutcomeTotalResponse(BaseModel):
    year: int
    node_ids: list[str] = Field(description="Nodes included in the total")
    total: float = Field(description="Sum of node values at the year")
    label: str = Field(description="Total rounded for display")


class MacChartResponse(BaseModel):
    """Marginal abatement cost chart data.

    Bars are `|impact|` wide and `efficiency` high, centred at
    `x_placement`. Negative-impact actions come first and extend left of
    zero over `negative_side_width`.
    """

    overview_id: str
    label: str = Field(description="Impact overview label")
    start_year: int
    end_year: int
    sort_by: str = Field(description="Sort key used")
    ascending: bool
    indicator_unit: str = Field(description="Unit of the efficiency values")
    effect_unit: str = Field(description="Unit of the impact values")
    cost_unit: str = Field(description="Unit of the cost values")
    plot_limit_for_indicator: float | None = Field(
        description="Efficiency cutoff applied (null = none)",
    )
    ids: list[str]
    actions: list[str] = Field(description="Action names")
    colors: list[str | None] = Field(description="Action color, else group color")
    groups: list[str | None] = Field(description="Action group ids")
    cost: list[float | None] = Field(description="Cumulative cost")
    efficiency: list[float] = Field(description="Cumulative cost efficiency")
    impact: list[float | None] = Field(description="Cumulative impact")
    x_placement: list[float] = Field(description="Bar centres on the x axis")
    negative_side_width: float = Field(description="Total width left of zero")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "overview_id": "abatement",
                "label": "Cost efficiency",
                "start_year": 2023,
                "end_year": 2030,
                "sort_by": "STANDARD",
                "ascending": True,
                "indicator_unit": "EUR/t",
                "effect_unit": "t",
                "cost_unit": "EUR",
                "plot_limit_for_indicator": None,
                "ids": ["a", "b"],
                "actions": ["Heat pumps", "Solar"],
                "colors": ["#1f5f9e", None],
                "groups": ["energy", None],
                "cost": [100.0, 50.0],
                "efficiency": [20.0, 5.0],
                "impact": [-5.0, 10.0],
                "x_placement": [-2.5, 5.0],
                "negative_side_width": 5.0,
            }
        }
    )


class ComparisonChartResponse(BaseModel):
    """Bar chart comparing action impacts at one year."""

    end_year: int
    sort_by: str
    ascending: bool
    ids: list[str]
    actions: list[str] = Field(description="Action names")
    colors: list[str | None]
    groups: list[str | None]
    impact: list[float] = Field(description="Impact at end year (0 when missing)")


class ActionListItemResponse(BaseModel):
    action_id: str
    name: str
    color: str | None = None
    group_id: str | None = None
    group_name: str | None = None
    decision_level: str | None = None
    is_enabled: bool
    impact_on_target_year: float = Field(description="Impact at the end year")
    cumulative_impact: float = Field(description="Impact summed over the window")
    impact_share: float = Field(description="Percent of the total cumulative impact")
    cumulative_cost: float | None = None
    cumulative_efficiency: float | None = None


class ActionListResponse(BaseModel):
    start_year: int
    end_year: int
    sort_by: str
    ascending: bool
    total_cumulative_impact: float
    items: list[ActionListItemResponse]


class SankeyNodeTraceResponse(BaseModel):
    label: list[str] = Field(description="Node labels; position is the node index")
    color: list[str] = Field(description="Hex color per node")


class SankeyLinkTraceResponse(BaseModel):
    source: list[int] = Field(description="Source node index")
    target: list[int] = Field(description="Target node index")
    value: list[float] = Field(description="Link value (may be negative)")
    color: list[str] = Field(description="Hex color per link")
    kind: list[str] = Field(
        description="'flow', 'remaining', 'impact', 'other' or 'carry'",
    )


class SankeyFrameResponse(BaseModel):
    """One Sankey trace comparing the first link year with a later year.

    **Chart libraries:**
    - plotly.js (`type: 'sankey'`, pass `node` and `link` as is)
    """

    year: int = Field(description="Year of the compared link")
    start_year: int = Field(description="Year of the first link")
    node: SankeyNodeTraceResponse
    link: SankeyLinkTraceResponse
    ids: list[str] = Field(description="Stable link ids for animation")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "year": 2030,
                "start_year": 2020,
                "node": {
                    "label": ["Oil", "Heat", "Oil start", "Oil remaining"],
                    "color": ["#1f5f9e", "#d64c3a", "#1f5f9e", "#a8c0d9"],
                },
                "link": {
                    "source": [0, 2, 2, 2, 0],
                    "target": [1, 0, 0, 0, 3],
                    "value": [30.0, 60.0, 30.0, 10.0, 60.0],
                    "color": ["#5787b6", "#abc3db", "#5787b6", "#abc3db", "#abc3db"],
                    "kind": ["flow", "remaining", "impact", "other", "carry"],
                },
                "ids": [
                    "oil/heat",
                    "oil:start/oil:remaining",
                    "oil:start/oil:impact",
                    "oil:start/oil:other",
                    "oil/oil:remaining",
                ],
            }
        }
    )


class SliderStepResponse(BaseModel):
    label: str
    year: int


class SankeyAnimationResponse(BaseModel):
    """Frames for every link year plus matching slider steps."""

    flow_id: str
    unit: str | None = None
    frames: list[SankeyFrameResponse]
    steps: list[SliderStepResponse]


class HealthResponse(BaseModel):
    status: str
    version: str
    api_versions: list[str]
