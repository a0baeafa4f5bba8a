"""Application factories."""

from pathviz.application.factories.scenario_factory import ScenarioFactory

__all__ = ["ScenarioFactory"]
