"""Action value objects."""

from pathviz.domain.actions.value_objects.impact_overview import (
    ActionImpact,
    ImpactOverview,
)
from pathviz.domain.actions.value_objects.parameters import (
    BoolParameter,
    NumberParameter,
    Parameter,
    ParameterNode,
    StringParameter,
    find_action_enabled_param,
)

__all__ = [
    "ActionImpact",
    "BoolParameter",
    "ImpactOverview",
    "NumberParameter",
    "Parameter",
    "ParameterNode",
    "StringParameter",
    "find_action_enabled_param",
]
