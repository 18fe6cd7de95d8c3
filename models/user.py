"""
Provides the User model for the application's database schema.

A user owns chat conversations, template collections, uploaded files,
code-hosting installations and projects. Every owned table references
``users.id`` with ``ON DELETE CASCADE`` so removing a user removes the rows
it owns.

Attributes
----------
primary_email : sqlalchemy.Column
    The primary email address of the user, which must be unique.

Relationships
-------------
oauth_accounts : sqlalchemy.orm.relationship
    External identities linked to the user.
chat_conversations : sqlalchemy.orm.relationship
    Conversations owned by the user.
template_collections : sqlalchemy.orm.relationship
    Template collections owned by the user.
"""

import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class OAuthProvider(str, enum.Enum):
    """Supported external identity providers."""

    GITHUB = "github"
    GOOGLE = "google"


class User(BaseModel):
    """
    Represents a user entity in the application.

    :ivar primary_email: Email address of the user. It must be unique.
    :type primary_email: str
    """

    __tablename__ = "users"

    primary_email = Column(String(255), nullable=False, unique=True)

    # Relationships
    oauth_accounts = relationship("OAuthAccount", back_populates="user", passive_deletes=True)
    chat_conversations = relationship(
        "ChatConversation", back_populates="user", passive_deletes=True
    )
    files = relationship("UserFile", back_populates="user", passive_deletes=True)
    template_collections = relationship(
        "UserTemplateCollection", back_populates="user", passive_deletes=True
    )
    installations = relationship(
        "GithubAppInstallation", back_populates="user", passive_deletes=True
    )
    projects = relationship("UserProject", back_populates="user", passive_deletes=True)


class OAuthAccount(BaseModel):
    """An identity from an external provider linked to a user."""

    __tablename__ = "oauth_accounts"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    provider = Column(Enum(OAuthProvider), nullable=False)
    oauth_user_id = Column(String(255), nullable=False)
    oauth_email = Column(String(255), nullable=False)

    user = relationship("User", back_populates="oauth_accounts")
