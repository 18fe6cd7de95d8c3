"""User account controller endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_session
from app.core.ownership import OwnershipGuard
from app.core.session import SessionCoordinator
from app.core.storage import get_storage
from app.core.validation import UserIdParams, user_id_params
from app.database import get_db
from app.domains.template.service import TemplateService
from app.domains.user.service import UserService
from app.schemas.user import UserFileResponse
from models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}", tags=["users"])


@router.get("/files", response_model=List[UserFileResponse])
async def get_user_files(
    params: UserIdParams = Depends(user_id_params),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Files owned by the user."""
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    files = await UserService(db).list_user_files(params.user_id)
    return [UserFileResponse.model_validate(f) for f in files]


@router.delete("")
async def delete_user(
    params: UserIdParams = Depends(user_id_params),
    current_user: User = Depends(get_current_user),
    session: SessionCoordinator = Depends(get_session),
    db: AsyncSession = Depends(get_db),
) -> bool:
    """Delete the user with everything they own.

    The session is cleared only when the delete went through; a failed
    delete answers ``false`` and leaves the session in place. The user's
    shared collections go with them, so the shared listing is dropped too.
    """
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    logger.info("deleting user %s...", params.user_id)
    deleted = await session.delete_user(UserService(db), params.user_id)
    if deleted:
        await TemplateService(db, get_storage()).invalidate_shared_listing()
    return deleted
