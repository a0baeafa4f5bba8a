"""Tests for SankeyFrameService."""

import pytest

from pathviz.domain.flows import (
    ChartTheme,
    ColorAssignmentService,
    DimensionalFlow,
    EmptyFlowError,
    MalformedFlowLinkError,
    SankeyFrameService,
    SankeyLinkKind,
)
from pathviz.domain.shared.exceptions import ErrorCode
from tests.shared.fixtures.factories import TestFlowFactory

EPSILON = 1e-9


def _colors(flow: DimensionalFlow):
    return ColorAssignmentService.node_color_map(flow.nodes, ChartTheme())


def _frame(flow: DimensionalFlow, end_year: int = 2030):
    current = SankeyFrameService.select_current_link(flow, end_year)
    return SankeyFrameService.build_frame(
        flow,
        flow.links[0],
        current,
        _colors(flow),
    )


def _edges(frame, kind: SankeyLinkKind) -> list[float]:
    return [
        value
        for value, edge_kind in zip(frame.link.value, frame.link.kind)
        if edge_kind is kind
    ]


def _flow_with_last_link(**changes) -> DimensionalFlow:
    payload = TestFlowFactory.heating_payload()
    payload["links"][-1].update(changes)
    return DimensionalFlow.model_validate(payload)


class TestSelectCurrentLink:
    @pytest.mark.parametrize(
        ("end_year", "expected"),
        [(2030, 2030), (2027, 2030), (2040, 2030), (2020, 2025), (2010, 2025)],
    )
    def test_selection(self, end_year, expected):
        flow = TestFlowFactory.heating()

        link = SankeyFrameService.select_current_link(flow, end_year)

        assert link.year == expected

    def test_empty_flow_raises(self):
        flow = DimensionalFlow(id="empty")

        with pytest.raises(EmptyFlowError) as exc_info:
            SankeyFrameService.select_current_link(flow, 2030)

        assert exc_info.value.code == ErrorCode.EMPTY_FLOW


class TestBuildFrame:
    def test_node_labels(self):
        frame = _frame(TestFlowFactory.heating())

        assert frame.node.label == [
            "Oil",
            "Gas",
            "Heat",
            "Oil start",
            "Oil remaining",
            "Gas start",
            "Gas remaining",
        ]
        assert len(frame.node.color) == len(frame.node.label)

    def test_years(self):
        frame = _frame(TestFlowFactory.heating())

        assert frame.year == 2030
        assert frame.start_year == 2020

    def test_flow_edges_use_current_values(self):
        frame = _frame(TestFlowFactory.heating())

        flow_edges = [
            (s, t, v)
            for s, t, v, k in zip(
                frame.link.source,
                frame.link.target,
                frame.link.value,
                frame.link.kind,
            )
            if k is SankeyLinkKind.FLOW
        ]

        assert flow_edges == [(0, 2, 30.0), (1, 2, 0.0)]

    def test_segments_per_source(self):
        frame = _frame(TestFlowFactory.heating())

        assert _edges(frame, SankeyLinkKind.REMAINING) == [30.0, 100.0]
        assert _edges(frame, SankeyLinkKind.IMPACT) == [30.0, 0.0]
        assert _edges(frame, SankeyLinkKind.OTHER) == [40.0, 100.0]
        assert _edges(frame, SankeyLinkKind.CARRY) == [30.0, 100.0]

    @pytest.mark.parametrize("end_year", [2025, 2030])
    def test_segments_add_up_to_start_value(self, end_year):
        flow = TestFlowFactory.heating()
        frame = _frame(flow, end_year)

        remaining = _edges(frame, SankeyLinkKind.REMAINING)
        impact = _edges(frame, SankeyLinkKind.IMPACT)
        other = _edges(frame, SankeyLinkKind.OTHER)

        for i, start_value in enumerate(flow.links[0].absolute_source_values):
            assert abs(remaining[i] + impact[i] + other[i] - start_value) < EPSILON

    def test_parallel_arrays_and_ids(self):
        frame = _frame(TestFlowFactory.heating())

        assert len(frame.link) == 10
        assert len(frame.link.color) == 10
        assert len(frame.ids) == 10
        assert len(set(frame.ids)) == 10
        assert frame.ids[0] == "oil/heat"
        assert "gas:start/gas:other" in frame.ids
        assert "oil/oil:remaining" in frame.ids

    def test_indices_within_node_range(self):
        frame = _frame(TestFlowFactory.heating())
        node_count = len(frame.node.label)

        assert all(0 <= i < node_count for i in frame.link.source)
        assert all(0 <= i < node_count for i in frame.link.target)

    def test_missing_node_color_falls_back(self):
        flow = TestFlowFactory.heating()

        frame = SankeyFrameService.build_frame(flow, flow.links[0], flow.links[-1], {})

        assert frame.node.color[0] == "#1f5f9e"

    def test_missing_node_color_uses_default_color(self):
        flow = TestFlowFactory.heating()

        frame = SankeyFrameService.build_frame(
            flow,
            flow.links[0],
            flow.links[-1],
            {},
            default_color="#123456",
        )

        assert frame.node.color[: len(flow.nodes)] == ["#123456"] * len(flow.nodes)

    def test_mismatched_arrays_raise(self):
        flow = _flow_with_last_link(values=[30.0])

        with pytest.raises(MalformedFlowLinkError) as exc_info:
            _frame(flow)

        assert exc_info.value.code == ErrorCode.MALFORMED_FLOW_LINK
        assert exc_info.value.details["year"] == 2030

    def test_unknown_node_raises(self):
        flow = _flow_with_last_link(targets=["heat", "nowhere"])

        with pytest.raises(MalformedFlowLinkError):
            _frame(flow)

    def test_non_finite_value_raises(self):
        flow = _flow_with_last_link(values=[float("nan"), 1.0])

        with pytest.raises(MalformedFlowLinkError):
            _frame(flow)

    def test_too_few_absolute_values_raise(self):
        flow = _flow_with_last_link(absoluteSourceValues=[30.0])

        with pytest.raises(MalformedFlowLinkError):
            _frame(flow)


class TestBuildAnimation:
    def test_one_frame_per_later_link(self):
        flow = TestFlowFactory.heating()

        animation = SankeyFrameService.build_animation(flow, _colors(flow))

        assert [frame.year for frame in animation.frames] == [2025, 2030]
        assert [step.label for step in animation.steps] == ["2025", "2030"]
        assert all(frame.start_year == 2020 for frame in animation.frames)
        assert animation.unit == "GWh/a"

    def test_single_link_flow(self):
        payload = TestFlowFactory.heating_payload()
        payload["links"] = payload["links"][:1]
        flow = DimensionalFlow.model_validate(payload)

        animation = SankeyFrameService.build_animation(flow, _colors(flow))

        assert [frame.year for frame in animation.frames] == [2020]

    def test_empty_flow_raises(self):
        with pytest.raises(EmptyFlowError):
            SankeyFrameService.build_animation(DimensionalFlow(id="empty"), {})
