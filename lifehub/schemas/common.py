"""
Common Schemas
==============

Shared Pydantic schemas used across the application.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base for request/response bodies.

    Serialized with camelCase keys; accepts either camelCase or
    snake_case on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BaseResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


class DeleteResult(CamelModel):
    """Payload returned by delete endpoints."""

    id: str
    deleted: bool = True
