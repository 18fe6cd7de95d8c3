"""
Code-hosting installation models.

An installation links a user to an external account; its repository rows
are snapshots offered as import candidates and are never edited locally.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class GithubAppInstallation(BaseModel):
    """
    Represents an app installation on an external account.
    """

    __tablename__ = "github_app_installations"

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    github_account_id = Column(Integer, nullable=False)
    github_account_name = Column(String(255), nullable=True)
    github_account_type = Column(String(50), nullable=False)
    github_account_avatar_url = Column(String(500), nullable=False)

    # Relationships
    user = relationship("User", back_populates="installations")
    repositories = relationship(
        "GithubAppInstallationRepository", back_populates="installation", passive_deletes=True
    )


class GithubAppInstallationRepository(BaseModel):
    """
    Snapshot of a repository reachable through an installation.
    """

    __tablename__ = "github_app_installation_repositories"

    installation_id = Column(
        Integer,
        ForeignKey("github_app_installations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    github_repository_id = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    size = Column(Integer, nullable=True)
    language = Column(String(100), nullable=True)
    license = Column(String(100), nullable=True)
    url = Column(String(500), nullable=False)
    website_url = Column(String(500), nullable=True)
    default_branch = Column(String(255), nullable=True)
    is_private = Column(Boolean, nullable=False, default=False)
    is_fork = Column(Boolean, nullable=True)
    is_template = Column(Boolean, nullable=True)
    is_archived = Column(Boolean, nullable=False, default=False)

    # Relationships
    installation = relationship("GithubAppInstallation", back_populates="repositories")
