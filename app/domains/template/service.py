"""Template service layer: collections and the templates inside them."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from redis.exceptions import RedisError
from sqlalchemy import and_, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.config import settings
from app.core.storage import TemporaryStorage
from app.schemas.template import (
    SharedCollectionsResponse,
    TemplateCollectionCreate,
    TemplateCollectionResponse,
    TemplateCollectionUpdate,
    TemplateCreate,
    TemplateUpdate,
)
from models import UserTemplate, UserTemplateCollection

logger = logging.getLogger(__name__)

SHARED_COLLECTIONS_TOPIC = "shared-collections"


class TemplateService:
    """Service class for template collections and templates.

    The shared collections listing is cached in temporary storage. Every
    write in this class drops that entry so the next listing is rebuilt from
    the database.
    """

    def __init__(self, db: AsyncSession, storage: TemporaryStorage):
        self.db = db
        self.storage = storage

    # ---- collections ----

    async def list_shared_collections(self) -> Dict[str, Any]:
        """All shared collections with their templates, plus a total count."""
        cached = await self.storage.get_json(SHARED_COLLECTIONS_TOPIC)
        if cached is not None:
            return cached

        collections = await self._read_collections(UserTemplateCollection.is_shared.is_(True))
        listing = SharedCollectionsResponse(
            collections=[TemplateCollectionResponse.model_validate(c) for c in collections],
            total=len(collections),
        ).model_dump(mode="json")

        await self.storage.set_json(
            SHARED_COLLECTIONS_TOPIC, listing, ttl=settings.collections_cache_ttl
        )
        return listing

    async def list_user_collections(self, user_id: int) -> List[UserTemplateCollection]:
        return await self._read_collections(UserTemplateCollection.user_id == user_id)

    async def get_shared_collection(self, collection_uuid: UUID) -> Optional[UserTemplateCollection]:
        """A shared collection with its templates, or None if absent or private."""
        collections = await self._read_collections(
            and_(
                UserTemplateCollection.share_uuid == collection_uuid,
                UserTemplateCollection.is_shared.is_(True),
            )
        )
        return collections[0] if collections else None

    async def create_collection(
        self, user_id: int, collection_data: TemplateCollectionCreate
    ) -> UserTemplateCollection:
        collection = UserTemplateCollection(
            user_id=user_id,
            name=collection_data.name,
            description=collection_data.description,
            is_shared=collection_data.is_shared,
        )

        try:
            self.db.add(collection)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        await self.invalidate_shared_listing()
        return await self._get_collection_with_templates(collection.id)

    async def update_collection(
        self, collection: UserTemplateCollection, collection_data: TemplateCollectionUpdate
    ) -> UserTemplateCollection:
        """Apply the fields given in ``collection_data``; unset or null fields are kept."""
        collection_id = collection.id
        update_data = collection_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(collection, field, value)

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update template collection %s: %s", collection_id, str(e))
            raise

        await self.invalidate_shared_listing()
        return await self._get_collection_with_templates(collection_id)

    async def delete_collection(self, collection_id: int) -> bool:
        """Delete a collection and every template in it within one transaction."""
        try:
            await self.db.execute(
                delete(UserTemplate).where(UserTemplate.collection_id == collection_id)
            )
            await self.db.execute(
                delete(UserTemplateCollection).where(UserTemplateCollection.id == collection_id)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete template collection %s: %s", collection_id, str(e))
            raise

        await self.invalidate_shared_listing()
        return True

    # ---- templates ----

    async def create_template(
        self, user_id: int, collection_id: int, template_data: TemplateCreate
    ) -> UserTemplate:
        template = UserTemplate(
            user_id=user_id,
            collection_id=collection_id,
            file_name=template_data.file_name,
            description=template_data.description,
            text=template_data.text,
            language=template_data.language,
            extension=template_data.extension,
        )

        try:
            self.db.add(template)
            await self.db.commit()
            await self.db.refresh(template)
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        await self.invalidate_shared_listing()
        return template

    async def update_template(
        self, template: UserTemplate, template_data: TemplateUpdate
    ) -> UserTemplate:
        template_id = template.id
        update_data = template_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(template, field, value)

        try:
            await self.db.commit()
            await self.db.refresh(template)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update template %s: %s", template_id, str(e))
            raise

        await self.invalidate_shared_listing()
        return template

    async def delete_template(self, template_id: int) -> bool:
        """Single delete primitive behind both the shared and the user-scoped routes."""
        try:
            await self.db.execute(delete(UserTemplate).where(UserTemplate.id == template_id))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete template %s: %s", template_id, str(e))
            raise

        await self.invalidate_shared_listing()
        return True

    async def invalidate_shared_listing(self) -> None:
        """Drop the cached shared listing.

        Runs after a committed write, so a storage failure is logged and the
        write still stands; the entry then lapses with its TTL.
        """
        try:
            await self.storage.delete(SHARED_COLLECTIONS_TOPIC)
        except RedisError as e:
            logger.error("Failed to invalidate shared collections listing: %s", str(e))

    # Private helper methods
    async def _read_collections(self, condition) -> List[UserTemplateCollection]:
        stmt = (
            select(UserTemplateCollection)
            .options(selectinload(UserTemplateCollection.templates))
            .where(condition)
            .order_by(UserTemplateCollection.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def _get_collection_with_templates(self, collection_id: int) -> UserTemplateCollection:
        stmt = (
            select(UserTemplateCollection)
            .options(selectinload(UserTemplateCollection.templates))
            .where(UserTemplateCollection.id == collection_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()
