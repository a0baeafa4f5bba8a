from pathviz.application.ports.scenario.scenario_data_port import ScenarioDataPort

__all__ = ["ScenarioDataPort"]
