"""
Public share record of a chat conversation.
"""

import uuid

from sqlalchemy import Boolean, Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class ChatConversationShare(BaseModel):
    """
    One-to-one share of a conversation. ``share_uuid`` is the public token;
    a conversation without a row is not shared.
    """

    __tablename__ = "chat_conversation_shares"

    chat_id = Column(
        Integer,
        ForeignKey("chat_conversations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    share_uuid = Column(UUID(), nullable=False, unique=True, default=uuid.uuid4)
    is_shared = Column(Boolean, nullable=False, default=True)
    is_protected = Column(Boolean, nullable=False, default=False)

    # Relationships
    conversation = relationship("ChatConversation", back_populates="share")
