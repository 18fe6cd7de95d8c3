"""Ownership checks for user-scoped resources.

A resource that does not exist and a resource that belongs to someone else
are reported the same way, as a 404, so that callers cannot probe for ids
they do not own. Every mutating handler resolves its target through this
guard before calling a service.
"""

from typing import TypeVar
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions.base import NotFoundError
from app.exceptions.resource import (
    ChatNotFoundError,
    CollectionNotFoundError,
    TemplateNotFoundError,
)
from models import (
    ChatConversation,
    GithubAppInstallation,
    UserProject,
    UserTemplate,
    UserTemplateCollection,
)

M = TypeVar("M")


class OwnershipGuard:
    """Resolves ids to rows reachable by a given owner."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def ensure_same_user(path_user_id: int, current_user_id: int) -> None:
        """A path naming another user is treated as a missing resource."""
        if path_user_id != current_user_id:
            raise NotFoundError("User not found")

    async def resolve_owned_resource(
        self,
        model: type[M],
        resource_id: int,
        owner_id: int,
        error: NotFoundError | None = None,
    ) -> M:
        """Return the row of ``model`` with ``resource_id`` owned by ``owner_id``.

        Raises:
            NotFoundError: If the row is absent or has another owner
        """
        stmt = select(model).where(and_(model.id == resource_id, model.user_id == owner_id))
        result = await self.db.execute(stmt)
        resource = result.scalar_one_or_none()
        if resource is None:
            raise error or NotFoundError()
        return resource

    async def owned_chat(self, user_id: int, chat_id: int) -> ChatConversation:
        return await self.resolve_owned_resource(
            ChatConversation, chat_id, user_id, ChatNotFoundError()
        )

    async def owned_installation(self, user_id: int, installation_id: int) -> GithubAppInstallation:
        return await self.resolve_owned_resource(
            GithubAppInstallation, installation_id, user_id, NotFoundError("Installation not found")
        )

    async def owned_project(self, user_id: int, project_id: int) -> UserProject:
        return await self.resolve_owned_resource(
            UserProject, project_id, user_id, NotFoundError("Project not found")
        )

    async def owned_collection(self, user_id: int, collection_uuid: UUID) -> UserTemplateCollection:
        stmt = select(UserTemplateCollection).where(
            and_(
                UserTemplateCollection.share_uuid == collection_uuid,
                UserTemplateCollection.user_id == user_id,
            )
        )
        result = await self.db.execute(stmt)
        collection = result.scalar_one_or_none()
        if collection is None:
            raise CollectionNotFoundError()
        return collection

    async def owned_template(
        self, user_id: int, collection_uuid: UUID, template_id: int
    ) -> UserTemplate:
        """Template ``template_id`` inside the collection ``collection_uuid`` of ``user_id``."""
        stmt = (
            select(UserTemplate)
            .join(UserTemplateCollection, UserTemplate.collection_id == UserTemplateCollection.id)
            .where(
                and_(
                    UserTemplate.id == template_id,
                    UserTemplateCollection.share_uuid == collection_uuid,
                    UserTemplateCollection.user_id == user_id,
                )
            )
        )
        result = await self.db.execute(stmt)
        template = result.scalar_one_or_none()
        if template is None:
            raise TemplateNotFoundError()
        return template

    async def shared_template(self, collection_uuid: UUID, template_id: int) -> UserTemplate:
        """Template readable without a session: it must sit in the named shared collection."""
        stmt = (
            select(UserTemplate)
            .join(UserTemplateCollection, UserTemplate.collection_id == UserTemplateCollection.id)
            .where(
                and_(
                    UserTemplate.id == template_id,
                    UserTemplateCollection.share_uuid == collection_uuid,
                    UserTemplateCollection.is_shared.is_(True),
                )
            )
        )
        result = await self.db.execute(stmt)
        template = result.scalar_one_or_none()
        if template is None:
            raise TemplateNotFoundError()
        return template
