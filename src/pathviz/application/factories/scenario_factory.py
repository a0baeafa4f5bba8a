"""Factory protocol for application layer queries."""

from __future__ import annotations

from typing import Protocol

from pathviz.application.ports.scenario import ScenarioDataPort
from pathviz.domain.flows import ChartTheme


class ScenarioFactory(Protocol):
    """Protocol for creating the ports chart queries depend on."""

    def scenario_data_port(self) -> ScenarioDataPort:
        """Get the scenario data read port."""
        ...

    def chart_theme(self) -> ChartTheme:
        """Get the theme used to color charts."""
        ...
