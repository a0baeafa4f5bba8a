"""Base class for immutable models parsed from backend responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BackendModel(BaseModel):
    """Immutable value object accepting the backend's camelCase keys.

    Attributes are snake_case in Python; both spellings validate.
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
