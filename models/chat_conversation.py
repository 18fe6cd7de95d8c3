"""
Chat conversation model.

A conversation is an aggregate root: its messages, attached files and share
record are removed together with it.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class ChatConversation(BaseModel):
    """
    Represents a chat conversation entity in the application.
    """

    __tablename__ = "chat_conversations"

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    model = Column(String(255), nullable=False)

    # Relationships
    user = relationship("User", back_populates="chat_conversations")
    messages = relationship(
        "ChatMessage",
        back_populates="conversation",
        passive_deletes=True,
        order_by="ChatMessage.created_at",
    )
    files = relationship("ChatConversationFile", back_populates="conversation", passive_deletes=True)
    share = relationship(
        "ChatConversationShare", back_populates="conversation", uselist=False, passive_deletes=True
    )
