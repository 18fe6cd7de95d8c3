"""
User project model.
"""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class UserProject(BaseModel):
    """
    Represents a project owned by a user.

    ``context`` holds the prompt context assembled for the project; it stays
    empty until something writes it.
    """

    __tablename__ = "user_projects"

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    context = Column(JSON, nullable=True)

    # Relationships
    user = relationship("User", back_populates="projects")
