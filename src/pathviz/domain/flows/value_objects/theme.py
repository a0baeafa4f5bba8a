"""Chart colors: theme configuration and per-node color entries."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PALETTE = ("#1f5f9e", "#d64c3a", "#2f8a4e")
DEFAULT_COLOR = "#1f5f9e"


@dataclass(frozen=True)
class ChartTheme:
    """Palette and tint amounts used when coloring chart elements."""

    palette: tuple[str, ...] = DEFAULT_PALETTE
    default_color: str = DEFAULT_COLOR
    link_tint: float = 0.25
    segment_tint: float = 0.5


@dataclass(frozen=True)
class NodeColor:
    color: str
    link_color: str
