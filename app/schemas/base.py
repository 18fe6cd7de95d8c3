"""Base schemas for the application."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema class with common configuration."""
    model_config = ConfigDict(from_attributes=True)


class BaseModelSchema(BaseSchema):
    """Base schema for database models."""
    id: int
    created_at: datetime
    updated_at: datetime


class ErrorEnvelope(BaseSchema):
    """Body of every error response."""
    statusCode: int
    statusMessage: str
    message: str
    data: Optional[Any] = None
    error_code: str
    timestamp: str
    request_id: Optional[str] = None
