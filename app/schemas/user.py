"""User-related Pydantic schemas."""

from typing import Optional

from .base import BaseModelSchema


class UserFileResponse(BaseModelSchema):
    """Schema for a file owned by a user."""

    user_id: int
    title: Optional[str] = None
    text: str
    language: str
    extension: str
