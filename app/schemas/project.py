"""Project-related Pydantic schemas."""

from typing import Any, Optional

from .base import BaseSchema


class ProjectContextResponse(BaseSchema):
    """Prompt context of a project."""

    project_id: int
    name: str
    description: Optional[str] = None
    context: Any
