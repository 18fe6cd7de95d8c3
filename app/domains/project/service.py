"""Project service layer."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.ownership import OwnershipGuard
from app.exceptions.base import NotFoundError
from app.exceptions.resource import ProjectContextNotFoundError
from app.schemas.project import ProjectContextResponse


class ProjectService:
    """Service class for project lookups."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_project_context(self, user_id: int, project_id: int) -> ProjectContextResponse:
        """Prompt context of a user's project.

        Raises:
            ProjectContextNotFoundError: If the project is absent, owned by
                someone else, or has no context yet
        """
        try:
            project = await OwnershipGuard(self.db).owned_project(user_id, project_id)
        except NotFoundError as e:
            raise ProjectContextNotFoundError() from e

        if project.context is None:
            raise ProjectContextNotFoundError()

        return ProjectContextResponse(
            project_id=project.id,
            name=project.name,
            description=project.description,
            context=project.context,
        )
