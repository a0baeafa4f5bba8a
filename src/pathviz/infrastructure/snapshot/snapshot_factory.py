"""Factory wiring the snapshot adapter and chart theme from settings."""

from __future__ import annotations

from pathlib import Path

from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.flows import ChartTheme
from pathviz.infrastructure.snapshot.json_snapshot_adapter import JsonSnapshotAdapter
from pathviz_config import Settings, get_settings


def chart_theme_from_settings(settings: Settings) -> ChartTheme:
    return ChartTheme(
        palette=tuple(settings.palette),
        default_color=settings.chart_default_color,
        link_tint=settings.chart_link_tint,
        segment_tint=settings.chart_segment_tint,
    )


class SnapshotFactory:
    """Creates ports backed by a single snapshot file."""

    def __init__(
        self,
        snapshot_path: Path | None = None,
        settings: Settings | None = None,
    ):
        self._settings = settings or get_settings()
        path = snapshot_path or self._settings.snapshot_path
        if path is None:
            msg = "No snapshot path configured (set SNAPSHOT_PATH)"
            raise ValueError(msg)
        self._adapter = JsonSnapshotAdapter(Path(path))

    def scenario_data_port(self) -> ScenarioDataPort:
        return self._adapter

    def chart_theme(self) -> ChartTheme:
        return chart_theme_from_settings(self._settings)
