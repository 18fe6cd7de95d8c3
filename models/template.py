"""
Template collection and template models.

A collection is an aggregate root: deleting it deletes its templates.
"""

import uuid

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class UserTemplateCollection(BaseModel):
    """
    A named group of templates. ``share_uuid`` identifies the collection in
    request paths; shared collections are listed publicly.
    """

    __tablename__ = "user_template_collections"

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    is_shared = Column(Boolean, nullable=False, default=False)
    share_uuid = Column(UUID(), nullable=False, unique=True, default=uuid.uuid4)

    # Relationships
    user = relationship("User", back_populates="template_collections")
    templates = relationship(
        "UserTemplate",
        back_populates="collection",
        passive_deletes=True,
        order_by="UserTemplate.id",
    )


class UserTemplate(BaseModel):
    """
    A reusable text template stored inside a collection.
    """

    __tablename__ = "user_templates"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    collection_id = Column(
        Integer,
        ForeignKey("user_template_collections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    file_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    text = Column(Text, nullable=False)
    language = Column(String(50), nullable=False, default="text")
    extension = Column(String(20), nullable=False, default="txt")

    # Relationships
    collection = relationship("UserTemplateCollection", back_populates="templates")
