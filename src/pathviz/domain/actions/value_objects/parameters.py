"""Action parameters as a tagged variant keyed on the backend type name."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from pathviz.domain.shared.value_objects import BackendModel

ENABLED_PARAMETER_ID = "enabled"


class ParameterNode(BackendModel):
    """Reference to the node a parameter belongs to."""

    id: str


class _ParameterBase(BackendModel):
    id: str
    label: str | None = None
    node_relative_id: str | None = None
    is_customized: bool = False
    is_customizable: bool = True
    node: ParameterNode | None = None


class NumberParameter(_ParameterBase):
    typename: Literal["NumberParameterType"] = Field(
        default="NumberParameterType",
        alias="__typename",
    )
    value: float | None = None
    default_value: float | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    unit: str | None = None


class BoolParameter(_ParameterBase):
    typename: Literal["BoolParameterType"] = Field(
        default="BoolParameterType",
        alias="__typename",
    )
    value: bool | None = None
    default_value: bool | None = None


class StringParameter(_ParameterBase):
    typename: Literal["StringParameterType"] = Field(
        default="StringParameterType",
        alias="__typename",
    )
    value: str | None = None
    default_value: str | None = None


Parameter = Annotated[
    Union[NumberParameter, BoolParameter, StringParameter],
    Field(discriminator="typename"),
]


def find_action_enabled_param(
    parameters: list[NumberParameter | BoolParameter | StringParameter],
) -> BoolParameter | None:
    """Return the node-bound boolean parameter that toggles an action."""
    for param in parameters:
        if param.node is None:
            continue
        if param.node_relative_id != ENABLED_PARAMETER_ID:
            continue
        if isinstance(param, BoolParameter):
            return param
    return None
