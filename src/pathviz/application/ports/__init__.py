"""Application ports (read side)."""

from pathviz.application.ports.scenario import ScenarioDataPort

__all__ = ["ScenarioDataPort"]
