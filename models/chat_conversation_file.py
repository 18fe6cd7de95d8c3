"""
File attached to a chat conversation.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class ChatConversationFile(BaseModel):
    """
    Represents a file attached to a conversation, optionally to one of its messages.
    """

    __tablename__ = "chat_conversation_files"

    chat_id = Column(
        Integer, ForeignKey("chat_conversations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    message_id = Column(Integer, ForeignKey("chat_messages.id", ondelete="CASCADE"), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255))
    text = Column(Text, nullable=False)
    language = Column(String(50), nullable=False, default="text")
    extension = Column(String(20), nullable=False, default="txt")

    # Relationships
    conversation = relationship("ChatConversation", back_populates="files")
