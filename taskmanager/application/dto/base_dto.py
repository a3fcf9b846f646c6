"""
Shared DTO bases and the response envelope.
"""

from typing import Generic, Optional, TypeVar
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseDTO(BaseModel):
    """Enums serialize as their values; assignments are validated."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, validate_assignment=True)


class RequestDTO(BaseDTO):
    """
    Base class for request DTOs.
    Unknown fields (such as a client-supplied ``user_id``) are dropped, never trusted.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class ResponseDTO(BaseDTO):
    """Entity representations returned to clients."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


T = TypeVar("T")


class EnvelopeDTO(BaseModel, Generic[T]):
    """Success envelope shared by every endpoint: ``{message, data}``."""

    message: str = Field(description="Human readable outcome")
    data: Optional[T] = Field(default=None, description="Payload")
