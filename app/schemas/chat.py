"""Chat-related Pydantic schemas."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from models.chat_message import MessageActor

from .base import BaseModelSchema, BaseSchema


class ChatConversationCreate(BaseSchema):
    """Schema for creating a conversation."""

    title: str = Field(..., min_length=1, max_length=255, description="Conversation title")
    model: str = Field(..., min_length=1, max_length=255, description="AI model of the conversation")


class ChatConversationUpdate(BaseSchema):
    """Schema for renaming a conversation or switching its model."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    model: Optional[str] = Field(None, min_length=1, max_length=255)


class ChatConversationResponse(BaseModelSchema):
    """Schema for conversation response data."""

    user_id: int
    title: str
    model: str


class ChatMessageCreate(BaseSchema):
    """Schema for appending a message to a conversation."""

    message: str = Field(..., min_length=1, description="Message content")
    actor: MessageActor = Field(default=MessageActor.USER, description="Message author")


class ChatMessageResponse(BaseModelSchema):
    """Schema for message response data."""

    chat_id: int
    user_id: int
    actor: MessageActor
    message: str


class SharedChatMessageResponse(BaseModelSchema):
    """Message as shown through a public share link; omits the owner."""

    actor: MessageActor
    message: str


class ChatFileResponse(BaseModelSchema):
    """Schema for a file attached to a conversation."""

    chat_id: int
    message_id: Optional[int] = None
    user_id: int
    title: Optional[str] = None
    text: str
    language: str
    extension: str


class ChatShareResponse(BaseModelSchema):
    """Schema for a conversation's share record."""

    chat_id: int
    share_uuid: UUID
    is_shared: bool
    is_protected: bool
