"""Tests for ColorAssignmentService."""

import pytest

from pathviz.domain.flows import ChartTheme, ColorAssignmentService, FlowNode
from pathviz.domain.flows.services import parse_color
from tests.shared.fixtures.factories import TestFlowFactory


class TestParseColor:
    @pytest.mark.parametrize(
        ("color", "expected"),
        [
            ("#1F5F9E", "#1f5f9e"),
            ("#abc", "#aabbcc"),
            ("#112233ff", "#112233"),
            ("rgb(10, 20, 30)", "#0a141e"),
            ("rgba(10,20,30,0.5)", "#0a141e"),
            (" rgb(255,0,0) ", "#ff0000"),
        ],
    )
    def test_readable_colors(self, color, expected):
        assert parse_color(color) == expected

    @pytest.mark.parametrize("color", [None, "", "red", "#12", "rgb()", "hsl(0,0,0)"])
    def test_unreadable_colors(self, color):
        assert parse_color(color) is None


class TestTint:
    def test_half_tint_of_black_is_grey(self):
        assert ColorAssignmentService.tint("#000000", 0.5) == "#808080"

    def test_zero_keeps_color(self):
        assert ColorAssignmentService.tint("#1F5F9E", 0.0) == "#1f5f9e"

    def test_one_is_white(self):
        assert ColorAssignmentService.tint("#1f5f9e", 1.0) == "#ffffff"

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(-0.5, "#1f5f9e"), (3.0, "#ffffff")],
    )
    def test_amount_is_clamped(self, amount, expected):
        assert ColorAssignmentService.tint("#1f5f9e", amount) == expected

    def test_rgb_color(self):
        assert ColorAssignmentService.tint("rgb(0, 0, 0)", 0.5) == "#808080"

    def test_unreadable_color_raises(self):
        with pytest.raises(ValueError, match="Unsupported color"):
            ColorAssignmentService.tint("red", 0.5)


class TestAssignColors:
    def _nodes(self, count: int) -> list[FlowNode]:
        return [FlowNode(id=f"n{i}", label=f"N{i}") for i in range(count)]

    def test_endpoints_match_palette(self):
        theme = ChartTheme(palette=("#1f5f9e", "#d64c3a", "#2f8a4e"))

        colors = ColorAssignmentService.assign_colors(self._nodes(5), theme)

        assert len(colors) == 5
        assert colors[0] == "#1f5f9e"
        assert colors[-1] == "#2f8a4e"

    def test_single_node_gets_first_color(self):
        colors = ColorAssignmentService.assign_colors(self._nodes(1), ChartTheme())

        assert colors == ["#1f5f9e"]

    def test_deterministic(self):
        nodes = self._nodes(4)

        first = ColorAssignmentService.assign_colors(nodes, ChartTheme())
        second = ColorAssignmentService.assign_colors(nodes, ChartTheme())

        assert first == second

    @pytest.mark.parametrize("count", [0, -2])
    def test_non_positive_count_is_empty(self, count):
        assert ColorAssignmentService.assign_colors([], ChartTheme(), count) == []

    def test_single_color_palette_repeats(self):
        theme = ChartTheme(palette=("#ABCDEF",))

        colors = ColorAssignmentService.assign_colors(self._nodes(3), theme)

        assert colors == ["#abcdef"] * 3


class TestNodeColorMap:
    def test_explicit_colors_kept(self):
        flow = TestFlowFactory.heating()

        registry = ColorAssignmentService.node_color_map(flow.nodes, ChartTheme())

        assert registry["gas"].color == "#d64c3a"

    def test_uncolored_nodes_take_palette_in_order(self):
        flow = TestFlowFactory.heating()

        registry = ColorAssignmentService.node_color_map(flow.nodes, ChartTheme())

        assert registry["oil"].color == "#1f5f9e"
        assert registry["heat"].color == "#2f8a4e"

    def test_link_color_is_tinted(self):
        flow = TestFlowFactory.heating()
        theme = ChartTheme(link_tint=0.25)

        registry = ColorAssignmentService.node_color_map(flow.nodes, theme)

        assert registry["gas"].link_color == ColorAssignmentService.tint(
            "#d64c3a",
            0.25,
        )

    def test_rgb_node_color_is_kept(self):
        nodes = [FlowNode(id="n", label="N", color="rgb(10,20,30)")]

        registry = ColorAssignmentService.node_color_map(nodes, ChartTheme())

        assert registry["n"].color == "#0a141e"

    def test_named_node_color_gets_palette_color(self):
        nodes = [
            FlowNode(id="named", label="Named", color="red"),
            FlowNode(id="hex", label="Hex", color="#D64C3A"),
        ]

        registry = ColorAssignmentService.node_color_map(nodes, ChartTheme())

        assert registry["named"].color == "#1f5f9e"
        assert registry["hex"].color == "#d64c3a"
