"""Dimensional flow: per-year source/target breakdowns of one quantity."""

from __future__ import annotations

from pydantic import field_validator

from pathviz.domain.shared.value_objects import BackendModel


class FlowNode(BackendModel):
    id: str
    label: str
    color: str | None = None


class FlowLink(BackendModel):
    """Edges of one year as parallel arrays.

    Array lengths are checked when a frame is built, not on load.
    """

    year: int
    sources: list[str] = []
    targets: list[str] = []
    values: list[float | None] = []
    absolute_source_values: list[float | None] = []

    @field_validator(
        "sources",
        "targets",
        "values",
        "absolute_source_values",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v


class DimensionalFlow(BackendModel):
    """A flow with its node set and yearly links ordered by year."""

    id: str
    unit: str | None = None
    nodes: list[FlowNode] = []
    sources: list[str] = []
    links: list[FlowLink] = []

    @field_validator("unit", mode="before")
    @classmethod
    def _unwrap_unit(cls, v):
        # Backend sends {"htmlShort": ..., "htmlLong": ...}
        if isinstance(v, dict):
            return v.get("htmlShort") or v.get("htmlLong")
        return v

    @property
    def years(self) -> list[int]:
        return [link.year for link in self.links]

    def node_index(self) -> dict[str, int]:
        """Map node id to its position in ``nodes``."""
        return {node.id: idx for idx, node in enumerate(self.nodes)}
