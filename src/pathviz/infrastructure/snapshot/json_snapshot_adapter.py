"""Scenario data read port backed by a JSON snapshot file."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pathviz.domain.actions import Action, ImpactOverview
from pathviz.domain.flows import DimensionalFlow
from pathviz.domain.metrics import OutcomeNode
from pathviz.domain.shared.exceptions import DataContractError, ErrorCode
from pathviz.infrastructure.snapshot.snapshot_models import ScenarioSnapshot

logger = logging.getLogger(__name__)


class SnapshotLoadError(DataContractError):
    """Raised when a snapshot file cannot be read or does not validate."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            message=f"Failed to load scenario snapshot {path.name}",
            code=ErrorCode.SNAPSHOT_LOAD_FAILED,
            details={"path": str(path), "reason": reason},
        )


def _unwrap(payload: Any) -> Any:
    # GraphQL responses wrap the result in {"data": {...}}
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload


class JsonSnapshotAdapter:
    """Serves scenario data from a JSON file.

    The file is parsed on first access and kept for the lifetime of the
    adapter.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._snapshot: ScenarioSnapshot | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> JsonSnapshotAdapter:
        """Build an adapter from an already-decoded response."""
        adapter = cls(Path("<memory>"))
        try:
            adapter._snapshot = ScenarioSnapshot.model_validate(_unwrap(payload))
        except PydanticValidationError as e:
            raise SnapshotLoadError(adapter.path, str(e)) from e
        return adapter

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def load(self) -> ScenarioSnapshot:
        if self._snapshot is not None:
            return self._snapshot

        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            logger.warning("Snapshot file not found: %s", self._path)
            raise SnapshotLoadError(self._path, "file not found") from e
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read snapshot %s: %s", self._path, e)
            raise SnapshotLoadError(self._path, str(e)) from e

        try:
            snapshot = ScenarioSnapshot.model_validate(_unwrap(payload))
        except PydanticValidationError as e:
            logger.warning(
                "Snapshot %s failed validation with %d errors",
                self._path,
                e.error_count(),
            )
            raise SnapshotLoadError(self._path, str(e)) from e

        logger.info(
            "Loaded snapshot %s: %d outcome nodes, %d actions, %d flows",
            self._path,
            len(snapshot.outcome_nodes),
            len(snapshot.actions),
            len(snapshot.flows),
        )
        self._snapshot = snapshot
        return snapshot

    async def _loaded(self) -> ScenarioSnapshot:
        # First access parses off the event loop
        if self._snapshot is not None:
            return self._snapshot
        return await asyncio.to_thread(self.load)

    async def list_outcome_nodes(self) -> list[OutcomeNode]:
        return list((await self._loaded()).outcome_nodes)

    async def get_outcome_node(self, node_id: str) -> OutcomeNode | None:
        for node in (await self._loaded()).outcome_nodes:
            if node.id == node_id:
                return node
        return None

    async def list_actions(self) -> list[Action]:
        return list((await self._loaded()).actions)

    async def list_impact_overviews(self) -> list[ImpactOverview]:
        return list((await self._loaded()).impact_overviews)

    async def get_impact_overview(
        self,
        overview_id: str | None = None,
    ) -> ImpactOverview | None:
        overviews = (await self._loaded()).impact_overviews
        if overview_id is None:
            return overviews[0] if overviews else None
        for overview in overviews:
            if overview.id == overview_id:
                return overview
        return None

    async def get_dimensional_flow(self, flow_id: str) -> DimensionalFlow | None:
        for flow in (await self._loaded()).flows:
            if flow.id == flow_id:
                return flow
        return None
