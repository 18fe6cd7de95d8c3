"""Unit tests for Template Service and the shared listing cache."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import RedisError
from sqlalchemy import func, select

from app.core.storage import TemporaryStorage, get_storage
from app.domains.template.service import SHARED_COLLECTIONS_TOPIC, TemplateService
from app.schemas.template import (
    TemplateCollectionCreate,
    TemplateCollectionUpdate,
    TemplateCreate,
    TemplateUpdate,
)
from models import UserTemplate, UserTemplateCollection


@pytest.fixture
def template_service(test_db):
    return TemplateService(test_db, get_storage())


@pytest.mark.asyncio
class TestTemplateService:
    """Test cases for TemplateService."""

    async def test_shared_listing_contains_only_shared(
        self, template_service, test_collection, private_collection
    ):
        listing = await template_service.list_shared_collections()

        assert listing["total"] == 1
        assert listing["collections"][0]["name"] == "Snippets"
        assert listing["collections"][0]["templates"][0]["file_name"] == "Dockerfile"

    async def test_shared_listing_served_from_cache(
        self, test_db, template_service, test_user, test_collection
    ):
        first = await template_service.list_shared_collections()

        # written behind the service's back, so the cache is not dropped
        test_db.add(UserTemplateCollection(user_id=test_user.id, name="Sneaky", is_shared=True))
        await test_db.commit()

        assert await template_service.list_shared_collections() == first
        assert await get_storage().get_json(SHARED_COLLECTIONS_TOPIC) == first

    async def test_writes_invalidate_cached_listing(
        self, template_service, test_user, test_collection
    ):
        await template_service.list_shared_collections()

        await template_service.create_collection(
            test_user.id, TemplateCollectionCreate(name="Fresh", is_shared=True)
        )

        assert await get_storage().get(SHARED_COLLECTIONS_TOPIC) is None
        listing = await template_service.list_shared_collections()
        assert sorted(c["name"] for c in listing["collections"]) == ["Fresh", "Snippets"]

    async def test_create_template_invalidates(
        self, template_service, test_user, test_collection
    ):
        await template_service.list_shared_collections()

        template = await template_service.create_template(
            test_user.id,
            test_collection.id,
            TemplateCreate(file_name="Makefile", text="all:", language="make", extension=""),
        )

        assert template.collection_id == test_collection.id
        assert await get_storage().get(SHARED_COLLECTIONS_TOPIC) is None

    async def test_delete_collection_removes_templates(
        self, test_db, template_service, test_collection
    ):
        collection_id = test_collection.id
        await template_service.list_shared_collections()

        assert await template_service.delete_collection(collection_id) is True

        remaining = await test_db.execute(
            select(func.count())
            .select_from(UserTemplate)
            .where(UserTemplate.collection_id == collection_id)
        )
        assert remaining.scalar_one() == 0
        assert (await template_service.list_shared_collections())["total"] == 0

    async def test_delete_template(self, test_db, template_service, test_template):
        template_id = test_template.id

        assert await template_service.delete_template(template_id) is True
        remaining = await test_db.execute(
            select(func.count()).select_from(UserTemplate).where(UserTemplate.id == template_id)
        )
        assert remaining.scalar_one() == 0

    async def test_user_collections_include_private(
        self, template_service, test_user, test_collection, private_collection
    ):
        collections = await template_service.list_user_collections(test_user.id)

        assert [c.name for c in collections] == ["Snippets", "Private"]

    async def test_get_shared_collection(
        self, template_service, test_collection, private_collection
    ):
        collection = await template_service.get_shared_collection(test_collection.share_uuid)

        assert collection.name == "Snippets"
        assert [t.file_name for t in collection.templates] == ["Dockerfile"]
        assert await template_service.get_shared_collection(private_collection.share_uuid) is None

    async def test_update_collection_invalidates(self, template_service, private_collection):
        await template_service.list_shared_collections()

        collection = await template_service.update_collection(
            private_collection, TemplateCollectionUpdate(name="Now public", is_shared=True)
        )

        assert collection.name == "Now public"
        assert collection.is_shared is True
        assert collection.description is None
        listing = await template_service.list_shared_collections()
        assert "Now public" in [c["name"] for c in listing["collections"]]

    async def test_update_template_keeps_omitted_fields(
        self, template_service, test_collection, test_template
    ):
        await template_service.list_shared_collections()

        template = await template_service.update_template(
            test_template, TemplateUpdate(text="FROM python:3.12")
        )

        assert template.text == "FROM python:3.12"
        assert template.file_name == "Dockerfile"
        assert await get_storage().get(SHARED_COLLECTIONS_TOPIC) is None

    async def test_failed_invalidation_keeps_committed_delete(self, test_db, test_template):
        client = AsyncMock()
        client.delete.side_effect = RedisError("connection refused")
        service = TemplateService(test_db, TemporaryStorage("workspace-test", client=client))

        assert await service.delete_template(test_template.id) is True
        client.delete.assert_awaited_once_with("workspace-test/shared-collections")
