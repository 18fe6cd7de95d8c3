"""
Chat message model.
"""

import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class MessageActor(str, enum.Enum):
    """Message author enumeration."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """
    Represents a chat message entity in the application.

    Messages are append-only: nothing updates a message after it is created.
    """

    __tablename__ = "chat_messages"

    chat_id = Column(
        Integer, ForeignKey("chat_conversations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    actor = Column(Enum(MessageActor), nullable=False, default=MessageActor.USER)
    message = Column(Text, nullable=False)

    # Relationships
    conversation = relationship("ChatConversation", back_populates="messages")
