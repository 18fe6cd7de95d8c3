"""Chat API controller with FastAPI endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, get_ownership_guard
from app.core.ownership import OwnershipGuard
from app.core.validation import (
    ChatIdParams,
    ShareUuidParams,
    UserIdParams,
    chat_id_params,
    order_by_query,
    share_uuid_params,
    user_id_params,
)
from app.domains.chat.service import ChatService
from app.exceptions.base import InternalServerError
from app.schemas.chat import (
    ChatConversationCreate,
    ChatConversationResponse,
    ChatConversationUpdate,
    ChatFileResponse,
    ChatMessageCreate,
    ChatMessageResponse,
    ChatShareResponse,
    SharedChatMessageResponse,
)
from app.shared.ordering import OrderBy
from models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}/chats", tags=["chats"])
shared_router = APIRouter(prefix="/api/shared/chats", tags=["shared"])


@router.get("")
async def get_chats(
    params: UserIdParams = Depends(user_id_params),
    order_by: Optional[List[OrderBy]] = Depends(order_by_query),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the user's conversations, ordered by ``order_by`` when given."""
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    logger.info("fetching all chats of user %s with order_by(%s)...", params.user_id, order_by)
    chats = await ChatService(db).list_conversations(params.user_id, order_by)
    return {"chats": [ChatConversationResponse.model_validate(chat) for chat in chats]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_chat(
    params: UserIdParams = Depends(user_id_params),
    chat_data: ChatConversationCreate = Body(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a conversation for the user."""
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    try:
        chat = await ChatService(db).create_conversation(
            user_id=params.user_id, title=chat_data.title, model=chat_data.model
        )
    except SQLAlchemyError as e:
        logger.error(f"Error creating chat conversation: {str(e)}")
        raise InternalServerError("Failed to create chat conversation", data={"error": str(e)}) from e

    return {"chat": ChatConversationResponse.model_validate(chat)}


@router.patch("/{chat_id}")
async def update_chat(
    params: ChatIdParams = Depends(chat_id_params),
    chat_data: ChatConversationUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Rename a conversation or switch its model."""
    guard.ensure_same_user(params.user_id, current_user.id)
    chat = await guard.owned_chat(params.user_id, params.chat_id)

    logger.info("updating chat %s with %s", params.chat_id, chat_data.model_dump(exclude_unset=True))
    try:
        chat = await ChatService(db).update_conversation(chat, chat_data)
    except SQLAlchemyError as e:
        logger.error(f"Error updating chat conversation: {str(e)}")
        raise InternalServerError("Failed to update chat conversation", data={"error": str(e)}) from e

    return {"chat": ChatConversationResponse.model_validate(chat)}


@router.delete("/{chat_id}")
async def delete_chat(
    params: ChatIdParams = Depends(chat_id_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Delete a conversation together with its messages, files and share."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_chat(params.user_id, params.chat_id)

    try:
        return await ChatService(db).delete_conversation(params.chat_id)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting chat conversation: {str(e)}")
        raise InternalServerError(data={"error": str(e)}) from e


@router.get("/{chat_id}/messages")
async def get_chat_messages(
    params: ChatIdParams = Depends(chat_id_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Read all messages of a conversation."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_chat(params.user_id, params.chat_id)

    messages = await ChatService(db).list_messages(params.chat_id)
    return {"chatMessages": [ChatMessageResponse.model_validate(m) for m in messages]}


@router.post("/{chat_id}/messages", status_code=status.HTTP_201_CREATED)
async def create_chat_message(
    params: ChatIdParams = Depends(chat_id_params),
    message_data: ChatMessageCreate = Body(...),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Append a message to a conversation."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_chat(params.user_id, params.chat_id)

    try:
        message = await ChatService(db).append_message(
            chat_id=params.chat_id,
            user_id=params.user_id,
            message=message_data.message,
            actor=message_data.actor,
        )
    except SQLAlchemyError as e:
        logger.error(f"Error appending chat message: {str(e)}")
        raise InternalServerError("Failed to create chat message", data={"error": str(e)}) from e

    return {"chatMessage": ChatMessageResponse.model_validate(message)}


@router.get("/{chat_id}/files")
async def get_chat_files(
    params: ChatIdParams = Depends(chat_id_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Read all files attached to a conversation."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_chat(params.user_id, params.chat_id)

    files = await ChatService(db).list_files(params.chat_id)
    return {"chatFiles": [ChatFileResponse.model_validate(f) for f in files]}


@router.get("/{chat_id}/shares")
async def get_chat_share(
    params: ChatIdParams = Depends(chat_id_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Share record of a conversation, or null when it is not shared."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_chat(params.user_id, params.chat_id)

    share = await ChatService(db).get_share(params.chat_id)
    return ChatShareResponse.model_validate(share) if share else None


@router.post("/{chat_id}/shares", status_code=status.HTTP_201_CREATED)
async def create_chat_share(
    params: ChatIdParams = Depends(chat_id_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Share a conversation publicly under a new token."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_chat(params.user_id, params.chat_id)

    try:
        share = await ChatService(db).create_share(params.chat_id)
    except SQLAlchemyError as e:
        logger.error(f"Error sharing chat conversation: {str(e)}")
        raise InternalServerError("Failed to share chat conversation", data={"error": str(e)}) from e

    return ChatShareResponse.model_validate(share)


@shared_router.get("/{uuid}")
async def get_shared_chat(
    params: ShareUuidParams = Depends(share_uuid_params),
    db: AsyncSession = Depends(get_db),
):
    """Messages of a shared conversation; no session required."""
    messages = await ChatService(db).get_shared_messages(params.uuid)
    return {"chatMessages": [SharedChatMessageResponse.model_validate(m) for m in messages]}
