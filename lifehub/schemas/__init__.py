"""
Pydantic Schemas
================

Request/response schemas for API validation.
"""

from lifehub.schemas.common import (
    BaseResponse,
    CamelModel,
    DeleteResult,
)

__all__ = [
    "BaseResponse",
    "CamelModel",
    "DeleteResult",
]
