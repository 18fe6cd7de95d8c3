"""
User file model.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class UserFile(BaseModel):
    """
    Represents a text file owned by a user.
    """

    __tablename__ = "user_files"

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255))
    text = Column(Text, nullable=False)
    language = Column(String(50), nullable=False, default="text")
    extension = Column(String(20), nullable=False, default="txt")

    # Relationships
    user = relationship("User", back_populates="files")
