"""JSON snapshot adapter for scenario data."""

from pathviz.infrastructure.snapshot.json_snapshot_adapter import (
    JsonSnapshotAdapter,
    SnapshotLoadError,
)
from pathviz.infrastructure.snapshot.snapshot_factory import (
    SnapshotFactory,
    chart_theme_from_settings,
)
from pathviz.infrastructure.snapshot.snapshot_models import ScenarioSnapshot

__all__ = [
    "JsonSnapshotAdapter",
    "ScenarioSnapshot",
    "SnapshotFactory",
    "SnapshotLoadError",
    "chart_theme_from_settings",
]
