"""Code-hosting installation schemas."""

from typing import Optional

from .base import BaseModelSchema, BaseSchema


class InstallationResponse(BaseModelSchema):
    """Schema for an installation linked to a user."""

    github_account_id: int
    github_account_name: Optional[str] = None
    github_account_type: str
    github_account_avatar_url: str


class ImportResponse(BaseSchema):
    """Read-only projection of a repository that can be imported."""

    installation_id: int
    github_repository_id: int
    name: str
    description: Optional[str] = None
    size: Optional[int] = None
    language: Optional[str] = None
    license: Optional[str] = None
    url: str
    website_url: Optional[str] = None
    default_branch: Optional[str] = None
    is_private: bool
    is_fork: Optional[bool] = None
    is_template: Optional[bool] = None
    is_archived: bool
