"""Unit tests for the ownership guard."""

import uuid

import pytest

from app.core.ownership import OwnershipGuard
from app.exceptions.base import NotFoundError
from app.exceptions.resource import (
    ChatNotFoundError,
    CollectionNotFoundError,
    TemplateNotFoundError,
)


@pytest.mark.asyncio
class TestOwnershipGuard:
    """Absent and foreign resources must be indistinguishable."""

    async def test_owned_chat_found(self, test_db, test_user, test_chat):
        chat = await OwnershipGuard(test_db).owned_chat(test_user.id, test_chat.id)

        assert chat.id == test_chat.id

    async def test_foreign_chat_reported_as_missing(self, test_db, test_user, other_user_chat):
        with pytest.raises(ChatNotFoundError) as foreign:
            await OwnershipGuard(test_db).owned_chat(test_user.id, other_user_chat.id)
        with pytest.raises(ChatNotFoundError) as absent:
            await OwnershipGuard(test_db).owned_chat(test_user.id, 999999)

        assert foreign.value.status_code == absent.value.status_code == 404
        assert foreign.value.detail == absent.value.detail

    async def test_ensure_same_user(self):
        OwnershipGuard.ensure_same_user(1, 1)

        with pytest.raises(NotFoundError):
            OwnershipGuard.ensure_same_user(1, 2)

    async def test_owned_collection_by_share_uuid(self, test_db, test_user, test_user_2, test_collection):
        guard = OwnershipGuard(test_db)

        collection = await guard.owned_collection(test_user.id, test_collection.share_uuid)
        assert collection.id == test_collection.id

        with pytest.raises(CollectionNotFoundError):
            await guard.owned_collection(test_user_2.id, test_collection.share_uuid)

    async def test_owned_template_must_sit_in_named_collection(
        self, test_db, test_user, test_collection, test_template, private_collection
    ):
        guard = OwnershipGuard(test_db)

        template = await guard.owned_template(
            test_user.id, test_collection.share_uuid, test_template.id
        )
        assert template.id == test_template.id

        with pytest.raises(TemplateNotFoundError):
            await guard.owned_template(
                test_user.id, private_collection.share_uuid, test_template.id
            )

    async def test_shared_template_requires_shared_collection(
        self, test_db, test_collection, test_template
    ):
        guard = OwnershipGuard(test_db)

        template = await guard.shared_template(test_collection.share_uuid, test_template.id)
        assert template.file_name == "Dockerfile"

        test_collection.is_shared = False
        await test_db.commit()

        with pytest.raises(TemplateNotFoundError):
            await guard.shared_template(test_collection.share_uuid, test_template.id)

    async def test_unknown_collection_uuid(self, test_db, test_user):
        with pytest.raises(CollectionNotFoundError):
            await OwnershipGuard(test_db).owned_collection(test_user.id, uuid.uuid4())

    async def test_owned_installation_and_project(
        self, test_db, test_user, test_user_2, test_installation, test_project
    ):
        guard = OwnershipGuard(test_db)

        assert (await guard.owned_installation(test_user.id, test_installation.id)).id == (
            test_installation.id
        )
        assert (await guard.owned_project(test_user.id, test_project.id)).id == test_project.id

        with pytest.raises(NotFoundError):
            await guard.owned_installation(test_user_2.id, test_installation.id)
        with pytest.raises(NotFoundError):
            await guard.owned_project(test_user_2.id, test_project.id)
