"""Project controller endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user
from app.core.ownership import OwnershipGuard
from app.core.validation import ProjectIdParams, project_id_params
from app.database import get_db
from app.domains.project.service import ProjectService
from models.user import User

router = APIRouter(prefix="/api/users/{user_id}/projects", tags=["projects"])


@router.get("/{project_id}/context")
async def get_project_context(
    params: ProjectIdParams = Depends(project_id_params),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Prompt context of one of the user's projects."""
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    context = await ProjectService(db).get_project_context(params.user_id, params.project_id)
    return {"context": context}
