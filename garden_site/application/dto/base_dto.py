"""
Base DTO
========

Shared pydantic configuration: snake_case attributes in Python,
camelCase keys on the wire.
"""
from typing import Any, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Wire form of an entity identifier: int (in-memory) or ObjectId hex (MongoDB)
IdType = Union[int, str]


class ApiModel(BaseModel):
    """Base for every request and response body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(ApiModel):
    """DTO for plain message responses."""
    message: str


class DeleteResponse(ApiModel):
    """DTO for deletions."""
    success: bool
    message: str


def reject_null(value: Any) -> Any:
    """
    Refuse an explicit null for an attribute the entity always has.

    Partial update DTOs default every field to None so that omitted
    fields stay untouched; a client-sent null must not clear a required
    attribute.
    """
    if value is None:
        raise ValueError("may not be null")
    return value
