"""Chat service: conversations, their messages, files and share records."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, asc, delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions.base import ConflictError, NotFoundError
from app.schemas.chat import ChatConversationUpdate
from app.shared.ordering import OrderBy
from models import (
    ChatConversation,
    ChatConversationFile,
    ChatConversationShare,
    ChatMessage,
    MessageActor,
)

logger = logging.getLogger(__name__)

DEFAULT_CONVERSATION_ORDER = [
    OrderBy(column="updated_at", direction="desc"),
    OrderBy(column="title", direction="desc"),
]


class ChatService:
    """Service class for conversation persistence.

    Callers resolve ownership with the ownership guard first; methods here
    take ids that are already known to belong to the requester.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # ---- conversations ----

    async def create_conversation(self, user_id: int, title: str, model: str) -> ChatConversation:
        """Create a conversation owned by ``user_id``."""
        conversation = ChatConversation(user_id=user_id, title=title, model=model)

        try:
            self.db.add(conversation)
            await self.db.commit()
            await self.db.refresh(conversation)
            return conversation
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def list_conversations(
        self, user_id: int, order_by: Optional[List[OrderBy]] = None
    ) -> List[ChatConversation]:
        """List a user's conversations.

        Args:
            user_id: Owner of the conversations
            order_by: Sort keys in order of precedence; columns must already
                be validated against the sortable fields

        Returns:
            Conversations sorted by ``order_by`` (default: most recently updated first)
        """
        orders = order_by or DEFAULT_CONVERSATION_ORDER
        order_clauses = [
            asc(getattr(ChatConversation, order.column))
            if order.direction == "asc"
            else desc(getattr(ChatConversation, order.column))
            for order in orders
        ]

        stmt = (
            select(ChatConversation)
            .where(ChatConversation.user_id == user_id)
            .order_by(*order_clauses)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update_conversation(
        self, conversation: ChatConversation, conversation_data: ChatConversationUpdate
    ) -> ChatConversation:
        """Rename a conversation or change its model; fields left out are kept."""
        chat_id = conversation.id
        update_data = conversation_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(conversation, field, value)

        try:
            await self.db.commit()
            await self.db.refresh(conversation)
            return conversation
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update chat conversation %s: %s", chat_id, str(e))
            raise

    async def delete_conversation(self, chat_id: int) -> bool:
        """Delete a conversation with its messages, files and share record.

        All four deletes run in one transaction, so either every dependent is
        removed together with the conversation or nothing is.
        """
        try:
            await self.db.execute(
                delete(ChatConversationShare).where(ChatConversationShare.chat_id == chat_id)
            )
            await self.db.execute(
                delete(ChatConversationFile).where(ChatConversationFile.chat_id == chat_id)
            )
            await self.db.execute(delete(ChatMessage).where(ChatMessage.chat_id == chat_id))
            await self.db.execute(delete(ChatConversation).where(ChatConversation.id == chat_id))
            await self.db.commit()
            return True
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete chat conversation %s: %s", chat_id, str(e))
            raise

    # ---- messages ----

    async def list_messages(self, chat_id: int) -> List[ChatMessage]:
        """Messages of a conversation in creation order; empty if there are none."""
        stmt = (
            select(ChatMessage)
            .where(ChatMessage.chat_id == chat_id)
            .order_by(asc(ChatMessage.created_at), asc(ChatMessage.id))
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def append_message(
        self, chat_id: int, user_id: int, message: str, actor: MessageActor = MessageActor.USER
    ) -> ChatMessage:
        """Append a message. Messages are never edited afterwards."""
        chat_message = ChatMessage(chat_id=chat_id, user_id=user_id, actor=actor, message=message)

        try:
            self.db.add(chat_message)
            await self.db.commit()
            await self.db.refresh(chat_message)
            return chat_message
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    # ---- files ----

    async def list_files(self, chat_id: int) -> List[ChatConversationFile]:
        stmt = (
            select(ChatConversationFile)
            .where(ChatConversationFile.chat_id == chat_id)
            .order_by(asc(ChatConversationFile.id))
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    # ---- shares ----

    async def get_share(self, chat_id: int) -> Optional[ChatConversationShare]:
        """Share record of a conversation, or None when it is not shared."""
        stmt = select(ChatConversationShare).where(ChatConversationShare.chat_id == chat_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_share(self, chat_id: int) -> ChatConversationShare:
        """Share a conversation under a fresh random token."""
        if await self.get_share(chat_id):
            raise ConflictError("Chat conversation is already shared")

        share = ChatConversationShare(chat_id=chat_id)
        try:
            self.db.add(share)
            await self.db.commit()
            await self.db.refresh(share)
            return share
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def get_shared_messages(self, share_uuid: UUID) -> List[ChatMessage]:
        """Messages of the conversation shared under ``share_uuid``.

        Raises:
            NotFoundError: If no active share has this token
        """
        stmt = select(ChatConversationShare).where(
            and_(
                ChatConversationShare.share_uuid == share_uuid,
                ChatConversationShare.is_shared.is_(True),
            )
        )
        result = await self.db.execute(stmt)
        share = result.scalar_one_or_none()
        if share is None:
            raise NotFoundError("Share not found")

        return await self.list_messages(share.chat_id)
