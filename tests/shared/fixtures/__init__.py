"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.factories import (
    TestActionFactory,
    TestFlowFactory,
    TestMetricFactory,
    snapshot_payload,
)

__all__ = [
    "TestActionFactory",
    "TestFlowFactory",
    "TestMetricFactory",
    "snapshot_payload",
]
