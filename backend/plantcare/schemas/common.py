"""Base classes for request and response schemas.

JSON bodies use camelCase keys; Python code keeps snake_case attributes.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def reject_null(value, field_name: str):
    """Partial updates may omit a required field but never null it out."""
    if value is None:
        raise ValueError(f"{to_camel(field_name)} must not be null")
    return value
