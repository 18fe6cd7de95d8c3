"""Template and template collection schemas."""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from .base import BaseModelSchema, BaseSchema


class TemplateCollectionCreate(BaseSchema):
    """Schema for creating a template collection."""

    name: str = Field(..., min_length=1, max_length=255, description="Collection name")
    description: Optional[str] = Field(None, description="Collection description")
    is_shared: bool = Field(default=False, description="List the collection publicly")


class TemplateCollectionUpdate(BaseSchema):
    """Schema for updating a template collection; omitted fields stay as they are."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    is_shared: Optional[bool] = None


class TemplateCreate(BaseSchema):
    """Schema for creating a template inside a collection."""

    file_name: str = Field(..., min_length=1, max_length=255, description="Template file name")
    description: Optional[str] = Field(None, description="Template description")
    text: str = Field(..., description="Template content")
    language: str = Field(default="text", max_length=50)
    extension: str = Field(default="txt", max_length=20)


class TemplateUpdate(BaseSchema):
    """Schema for updating a template."""

    file_name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    text: Optional[str] = None
    language: Optional[str] = Field(None, max_length=50)
    extension: Optional[str] = Field(None, max_length=20)


class TemplateResponse(BaseModelSchema):
    """Schema for template response data."""

    user_id: int
    collection_id: int
    file_name: str
    description: Optional[str] = None
    text: str
    language: str
    extension: str


class TemplateCollectionResponse(BaseModelSchema):
    """Schema for a collection with its templates."""

    user_id: int
    name: str
    description: Optional[str] = None
    is_shared: bool
    share_uuid: UUID
    templates: List[TemplateResponse] = []


class SharedCollectionsResponse(BaseSchema):
    """Listing of shared collections."""

    collections: List[TemplateCollectionResponse]
    total: int
