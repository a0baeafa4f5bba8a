"""Unit tests for the chart queries with a mocked scenario data port."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pathviz.application.queries.charts import (
    ALL_ACTIONS,
    ActionComparisonQuery,
    ActionListQuery,
    ActionMacQuery,
    MetricSummaryQuery,
    OutcomeTotalQuery,
    SankeyAnimationQuery,
    SankeyFrameQuery,
)
from pathviz.domain.actions import ActionSortKey, ImpactOverviewNotFoundError
from pathviz.domain.flows import (
    ChartTheme,
    DimensionalFlow,
    EmptyFlowError,
    FlowNotFoundError,
)
from pathviz.domain.metrics import (
    InvalidYearRangeError,
    MetricNotFoundError,
    MetricSegment,
)
from tests.shared.fixtures.factories import (
    TestActionFactory,
    TestFlowFactory,
    TestMetricFactory,
)


@pytest.fixture
def mock_port():
    """Scenario data port serving the shared test scenario."""
    port = AsyncMock()
    outcome = TestMetricFactory.outcome_node()
    buildings = TestMetricFactory.buildings_node()
    actions, overview = TestActionFactory.mixed_impact_actions()

    port.list_outcome_nodes.return_value = [outcome, buildings]
    port.get_outcome_node.side_effect = lambda node_id: {
        outcome.id: outcome,
        buildings.id: buildings,
    }.get(node_id)
    port.list_actions.return_value = actions
    port.get_impact_overview.return_value = overview
    port.get_dimensional_flow.return_value = TestFlowFactory.heating()
    return port


class TestMetricSummaryQuery:
    @pytest.mark.asyncio
    async def test_summary_values(self, mock_port):
        query = MetricSummaryQuery(mock_port)

        result = await query.execute("net_emissions", 2020, 2030)

        assert result.start_value == 80.0
        assert result.end_value == 50.0
        assert result.percent_change == 38
        assert result.cumulative_value == 210.0
        assert result.unit == "kt CO₂e/a"
        assert result.start_label == "80"
        assert result.cumulative_label == "210"

    @pytest.mark.asyncio
    async def test_plots_only_non_empty_segments(self, mock_port):
        query = MetricSummaryQuery(mock_port)

        result = await query.execute("net_emissions", 2020, 2030)

        assert [plot.segment for plot in result.plots] == [
            MetricSegment.HISTORICAL,
            MetricSegment.FORECAST,
        ]
        assert result.plots[1].years == [2020, 2030]
        assert result.axis_range.minimum <= 50.0
        assert result.axis_range.maximum >= 80.0

    @pytest.mark.asyncio
    async def test_unknown_node_raises(self, mock_port):
        query = MetricSummaryQuery(mock_port)

        with pytest.raises(MetricNotFoundError):
            await query.execute("unknown", 2020, 2030)

    @pytest.mark.asyncio
    async def test_reversed_window_raises_before_lookup(self, mock_port):
        query = MetricSummaryQuery(mock_port)

        with pytest.raises(InvalidYearRangeError):
            await query.execute("net_emissions", 2030, 2020)

        mock_port.get_outcome_node.assert_not_called()

    def test_from_factory(self, mock_port):
        factory = MagicMock()
        factory.scenario_data_port.return_value = mock_port

        query = MetricSummaryQuery.from_factory(factory)

        assert query._scenario is mock_port


class TestOutcomeTotalQuery:
    @pytest.mark.asyncio
    async def test_all_nodes_by_default(self, mock_port):
        result = await OutcomeTotalQuery(mock_port).execute(2030)

        assert result.total == 70.0
        assert result.label == "70"
        assert result.node_ids == ["net_emissions", "building_emissions"]

    @pytest.mark.asyncio
    async def test_selected_nodes(self, mock_port):
        result = await OutcomeTotalQuery(mock_port).execute(
            2030,
            node_ids=["building_emissions"],
        )

        assert result.total == 20.0

    @pytest.mark.asyncio
    async def test_missing_year_contributes_nothing(self, mock_port):
        result = await OutcomeTotalQuery(mock_port).execute(1990)

        assert result.total == 100.0

    @pytest.mark.asyncio
    async def test_unknown_node_raises(self, mock_port):
        with pytest.raises(MetricNotFoundError):
            await OutcomeTotalQuery(mock_port).execute(2030, node_ids=["nope"])


class TestActionMacQuery:
    @pytest.mark.asyncio
    async def test_ranks_actions(self, mock_port):
        query = ActionMacQuery(mock_port)

        result = await query.execute(
            2020,
            2030,
            sort_by=ActionSortKey.CUM_EFFICIENCY,
            ascending=False,
        )

        assert result.overview_id == "abatement"
        assert result.data.ids == ["a", "b"]
        assert result.data.negative_side_width == 5.0
        assert result.indicator_unit == "EUR/t"

    @pytest.mark.asyncio
    async def test_passes_overview_id_to_port(self, mock_port):
        await ActionMacQuery(mock_port).execute(2020, 2030, "abatement")

        mock_port.get_impact_overview.assert_awaited_once_with("abatement")

    @pytest.mark.asyncio
    async def test_missing_overview_raises(self, mock_port):
        mock_port.get_impact_overview.return_value = None

        with pytest.raises(ImpactOverviewNotFoundError):
            await ActionMacQuery(mock_port).execute(2020, 2030, "other")

    @pytest.mark.asyncio
    async def test_plot_limit_applied(self, mock_port):
        mock_port.get_impact_overview.return_value = TestActionFactory.overview(
            [
                TestActionFactory.overview_entry("a", {2030: -5.0}, {2030: 50.0}),
                TestActionFactory.overview_entry("b", {2030: 10.0}, {2030: 20.0}),
            ],
            plot_limit=5.0,
        )

        result = await ActionMacQuery(mock_port).execute(2020, 2030)

        assert result.data.ids == ["b"]
        assert result.plot_limit_for_indicator == 5.0


class TestActionComparisonQuery:
    @pytest.mark.asyncio
    async def test_default_sort_is_descending_impact(self, mock_port):
        result = await ActionComparisonQuery(mock_port).execute(2030)

        assert result.data.ids == ["b", "a"]
        assert result.data.impact == [10.0, -5.0]


class TestActionListQuery:
    @pytest.mark.asyncio
    async def test_shares_of_filtered_total(self, mock_port):
        result = await ActionListQuery(mock_port).execute(2020, 2030)

        assert result.total_cumulative_impact == 5.0
        assert [item.action_id for item in result.items] == ["a", "b"]
        assert [item.impact_share for item in result.items] == [-100.0, 200.0]

    @pytest.mark.asyncio
    async def test_group_filter(self, mock_port):
        result = await ActionListQuery(mock_port).execute(
            2020,
            2030,
            group_id="energy",
        )

        assert [item.action_id for item in result.items] == ["a"]
        assert result.items[0].impact_share == 100.0
        assert result.items[0].group_name == "Energy"

    @pytest.mark.asyncio
    async def test_all_actions_group_keeps_everything(self, mock_port):
        result = await ActionListQuery(mock_port).execute(
            2020,
            2030,
            group_id=ALL_ACTIONS,
        )

        assert len(result.items) == 2

    @pytest.mark.asyncio
    async def test_sort_by_cumulative_impact(self, mock_port):
        result = await ActionListQuery(mock_port).execute(
            2020,
            2030,
            sort_by=ActionSortKey.CUM_IMPACT,
            ascending=False,
        )

        assert [item.action_id for item in result.items] == ["b", "a"]

    @pytest.mark.asyncio
    async def test_falls_back_to_action_metric(self, mock_port):
        mock_port.get_impact_overview.return_value = None

        result = await ActionListQuery(mock_port).execute(2020, 2030)

        assert [item.cumulative_impact for item in result.items] == [-5.0, 10.0]
        assert all(item.cumulative_efficiency is None for item in result.items)

    @pytest.mark.asyncio
    async def test_zero_total_gives_zero_share(self, mock_port):
        result = await ActionListQuery(mock_port).execute(2020, 2025)

        assert result.total_cumulative_impact == 0.0
        assert all(item.impact_share == 0.0 for item in result.items)


class TestSankeyQueries:
    @pytest.mark.asyncio
    async def test_frame(self, mock_port):
        frame = await SankeyFrameQuery(mock_port).execute("heating", 2027)

        assert frame.year == 2030
        assert frame.start_year == 2020
        mock_port.get_dimensional_flow.assert_awaited_once_with("heating")

    @pytest.mark.asyncio
    async def test_theme_colors_applied(self, mock_port):
        theme = ChartTheme(palette=("#000000", "#ffffff"))

        frame = await SankeyFrameQuery(mock_port, theme).execute("heating", 2030)

        assert frame.node.color[0] == "#000000"

    @pytest.mark.asyncio
    async def test_animation(self, mock_port):
        animation = await SankeyAnimationQuery(mock_port).execute("heating")

        assert [step.year for step in animation.steps] == [2025, 2030]

    @pytest.mark.asyncio
    async def test_unknown_flow_raises(self, mock_port):
        mock_port.get_dimensional_flow.return_value = None

        with pytest.raises(FlowNotFoundError):
            await SankeyFrameQuery(mock_port).execute("nope", 2030)

    @pytest.mark.asyncio
    async def test_flow_without_links_raises(self, mock_port):
        payload = TestFlowFactory.heating_payload()
        payload["links"] = []
        mock_port.get_dimensional_flow.return_value = DimensionalFlow.model_validate(
            payload,
        )

        with pytest.raises(EmptyFlowError):
            await SankeyAnimationQuery(mock_port).execute("heating")

    def test_from_factory_uses_factory_theme(self, mock_port):
        theme = ChartTheme(link_tint=0.1)
        factory = MagicMock()
        factory.scenario_data_port.return_value = mock_port
        factory.chart_theme.return_value = theme

        query = SankeyFrameQuery.from_factory(factory)

        assert query._theme is theme
