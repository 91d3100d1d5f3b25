"""Strict base model for configuration objects."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Fields accept their snake_case names or camelCase aliases, so the same
    model loads from Python keyword arguments and from JSON/YAML documents
    written in the camelCase convention.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
