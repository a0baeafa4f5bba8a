"""Renderable Sankey frames with integer node indices."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SankeyLinkKind(str, Enum):
    """Role of an edge within a frame."""

    FLOW = "flow"
    REMAINING = "remaining"
    IMPACT = "impact"
    OTHER = "other"
    CARRY = "carry"


@dataclass
class SankeyNodes:
    label: list[str] = field(default_factory=list)
    color: list[str] = field(default_factory=list)

    def append(self, label: str, color: str) -> int:
        """Add a node and return its index."""
        self.label.append(label)
        self.color.append(color)
        return len(self.label) - 1


@dataclass
class SankeyLinks:
    source: list[int] = field(default_factory=list)
    target: list[int] = field(default_factory=list)
    value: list[float] = field(default_factory=list)
    color: list[str] = field(default_factory=list)
    kind: list[SankeyLinkKind] = field(default_factory=list)

    def append(
        self,
        source: int,
        target: int,
        value: float,
        color: str,
        kind: SankeyLinkKind,
    ) -> None:
        self.source.append(source)
        self.target.append(target)
        self.value.append(value)
        self.color.append(color)
        self.kind.append(kind)

    def __len__(self) -> int:
        return len(self.source)


@dataclass
class SankeyFrame:
    """One Sankey trace comparing the start link with a later link."""

    year: int
    start_year: int
    node: SankeyNodes = field(default_factory=SankeyNodes)
    link: SankeyLinks = field(default_factory=SankeyLinks)
    ids: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SliderStep:
    label: str
    year: int


@dataclass
class SankeyAnimation:
    """Frames for every year after the first, with matching slider steps."""

    flow_id: str
    frames: list[SankeyFrame] = field(default_factory=list)
    steps: list[SliderStep] = field(default_factory=list)
    unit: str | None = None
