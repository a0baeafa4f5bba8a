"""FastAPI dependency injection for the pathviz API.

Provides dependencies for:
- The scenario factory (snapshot-backed ports and chart theme)
- Number formatting settings
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status

from pathviz.application.factories import ScenarioFactory
from pathviz.infrastructure.snapshot import SnapshotFactory
from pathviz_config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _snapshot_factory() -> SnapshotFactory:
    """Shared factory so the snapshot file is parsed once per process."""
    return SnapshotFactory(settings=get_settings())


def get_scenario_factory() -> ScenarioFactory:
    """
    Get the scenario factory.

    Raises
    ------
    HTTPException
        503 if no snapshot path is configured.
    """
    if get_settings().snapshot_path is None:
        logger.warning("Chart request without SNAPSHOT_PATH configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No scenario data configured",
        )
    return _snapshot_factory()


def get_significant_digits() -> int:
    return get_settings().significant_digits


def clear_dependency_cache() -> None:
    """Drop the cached factory (useful for tests)."""
    _snapshot_factory.cache_clear()


ChartFactory = Annotated[ScenarioFactory, Depends(get_scenario_factory)]
SignificantDigits = Annotated[int, Depends(get_significant_digits)]


# -----------------------------------------------------------------------------
# Application Queries
# -----------------------------------------------------------------------------
# Queries have from_factory() classmethods that encapsulate their dependency
# knowledge. Use them directly in routers:
#
#   async def get_mac_chart(factory: ChartFactory, ...):
#       query = ActionMacQuery.from_factory(factory)  # NOQA: ERA001
