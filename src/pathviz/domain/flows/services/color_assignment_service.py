"""Deterministic node colors sampled from the theme palette."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from plotly.colors import hex_to_rgb, make_colorscale, sample_colorscale, unlabel_rgb

from pathviz.domain.flows.value_objects import ChartTheme, FlowNode, NodeColor

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _to_hex(rgb: Sequence[float]) -> str:
    r, g, b = (max(0, min(255, int(round(c)))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_color(color: str | None) -> str | None:
    """Return ``color`` as lowercase ``#rrggbb``, or None if it is unreadable.

    Accepts ``#rgb``, ``#rrggbb``, ``#rrggbbaa`` and ``rgb(...)``/``rgba(...)``.
    Alpha is dropped.
    """
    if not color:
        return None
    text = color.strip()

    if _HEX_COLOR.match(text):
        digits = text[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return _to_hex(hex_to_rgb(f"#{digits[:6]}"))

    if text.lower().startswith("rgb"):
        try:
            return _to_hex(unlabel_rgb(text)[:3])
        except (ValueError, IndexError):
            return None
    return None


class ColorAssignmentService:
    """Colors for chart nodes that lack an explicit one."""

    @staticmethod
    def tint(color: str, amount: float) -> str:
        """Mix a color with white; ``amount`` is clamped to [0, 1]."""
        normalized = parse_color(color)
        if normalized is None:
            msg = f"Unsupported color {color!r}"
            raise ValueError(msg)
        r, g, b = hex_to_rgb(normalized)
        f = max(0.0, min(1.0, amount))
        return _to_hex([c * (1 - f) + 255 * f for c in (r, g, b)])

    @staticmethod
    def assign_colors(
        nodes: Sequence[FlowNode],
        theme: ChartTheme,
        count: int | None = None,
    ) -> list[str]:
        """Sample ``count`` evenly spaced colors from the palette.

        ``count`` defaults to the number of nodes.
        """
        if count is None:
            count = len(nodes)
        if count <= 0:
            return []

        palette = list(theme.palette) or [theme.default_color]
        if len(palette) == 1:
            return [palette[0].lower()] * count

        if count == 1:
            points = [0.0]
        else:
            points = [i / (count - 1) for i in range(count)]

        colorscale = make_colorscale(palette)
        sampled = sample_colorscale(colorscale, points, colortype="rgb")
        return [_to_hex(unlabel_rgb(c)) for c in sampled]

    @staticmethod
    def node_color_map(
        nodes: Sequence[FlowNode],
        theme: ChartTheme,
    ) -> dict[str, NodeColor]:
        """Color registry keyed by node id.

        Readable explicit node colors are kept; the rest receive assigned
        colors in node order.
        """
        explicit: dict[str, str] = {}
        for node in nodes:
            color = parse_color(node.color)
            if color is not None:
                explicit[node.id] = color
            elif node.color:
                logger.debug(
                    "Node %s has unreadable color %r, assigning one",
                    node.id,
                    node.color,
                )

        uncolored = [node for node in nodes if node.id not in explicit]
        generated = iter(
            ColorAssignmentService.assign_colors(uncolored, theme, len(uncolored)),
        )
        if uncolored:
            logger.debug("Assigning palette colors to %d nodes", len(uncolored))

        registry: dict[str, NodeColor] = {}
        for node in nodes:
            color = explicit.get(node.id) or next(generated)
            registry[node.id] = NodeColor(
                color=color,
                link_color=ColorAssignmentService.tint(color, theme.link_tint),
            )
        return registry
