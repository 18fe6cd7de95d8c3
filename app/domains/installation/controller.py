"""Installation controller endpoints."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_ownership_guard
from app.core.ownership import OwnershipGuard
from app.core.validation import (
    InstallationIdParams,
    UserIdParams,
    installation_id_params,
    user_id_params,
)
from app.database import get_db
from app.domains.installation.service import InstallationService
from app.schemas.installation import ImportResponse, InstallationResponse
from models.user import User

router = APIRouter(prefix="/api/users/{user_id}/installations", tags=["installations"])


@router.get("", response_model=List[InstallationResponse])
async def get_installations(
    params: UserIdParams = Depends(user_id_params),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Code-hosting installations linked by the user."""
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    installations = await InstallationService(db).list_installations(params.user_id)
    return [InstallationResponse.model_validate(i) for i in installations]


@router.get("/{installation_id}/imports", response_model=List[ImportResponse])
async def get_installation_imports(
    params: InstallationIdParams = Depends(installation_id_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    db: AsyncSession = Depends(get_db),
):
    """Repositories of an installation that can be imported."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_installation(params.user_id, params.installation_id)

    return await InstallationService(db).list_imports(params.installation_id)
