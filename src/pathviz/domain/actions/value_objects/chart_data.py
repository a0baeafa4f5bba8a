"""Parallel-array projections consumed by bar and MAC charts."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MacChartData:
    """Marginal abatement cost chart arrays, one element per action.

    Bars have width ``|impact|``. Negative-impact bars extend leftwards from
    zero and positive ones rightwards; ``x_placement`` holds the bar centres.
    """

    ids: list[str] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    colors: list[str | None] = field(default_factory=list)
    groups: list[str | None] = field(default_factory=list)
    cost: list[float | None] = field(default_factory=list)
    efficiency: list[float] = field(default_factory=list)
    impact: list[float | None] = field(default_factory=list)
    x_placement: list[float] = field(default_factory=list)
    negative_side_width: float = 0.0

    def __len__(self) -> int:
        return len(self.ids)


@dataclass(frozen=True)
class ComparisonChartData:
    """Bar chart arrays comparing action impacts at one year."""

    ids: list[str] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    colors: list[str | None] = field(default_factory=list)
    groups: list[str | None] = field(default_factory=list)
    impact: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ids)
