"""Installation service: linked code-hosting accounts and their import candidates."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.installation import ImportResponse
from models import GithubAppInstallation, GithubAppInstallationRepository


class InstallationService:
    """Read-only access to installations; nothing here writes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_installations(self, user_id: int) -> List[GithubAppInstallation]:
        """Installations of a user; empty when the user linked none."""
        stmt = (
            select(GithubAppInstallation)
            .where(GithubAppInstallation.user_id == user_id)
            .order_by(GithubAppInstallation.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_imports(self, installation_id: int) -> List[ImportResponse]:
        """Repositories of an installation projected as import candidates."""
        stmt = (
            select(GithubAppInstallationRepository)
            .where(GithubAppInstallationRepository.installation_id == installation_id)
            .order_by(GithubAppInstallationRepository.name)
        )
        result = await self.db.execute(stmt)
        return [ImportResponse.model_validate(repository) for repository in result.scalars().all()]
