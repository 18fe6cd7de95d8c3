"""Unit tests for Project and Installation services."""

import pytest

from app.domains.installation.service import InstallationService
from app.domains.project.service import ProjectService
from app.exceptions.resource import ProjectContextNotFoundError


@pytest.mark.asyncio
class TestProjectService:
    async def test_context_of_own_project(self, test_db, test_user, test_project):
        context = await ProjectService(test_db).get_project_context(test_user.id, test_project.id)

        assert context.project_id == test_project.id
        assert context.context["stack"] == ["fastapi", "sqlalchemy"]

    async def test_foreign_project_has_no_context(self, test_db, test_user_2, test_project):
        with pytest.raises(ProjectContextNotFoundError):
            await ProjectService(test_db).get_project_context(test_user_2.id, test_project.id)


@pytest.mark.asyncio
class TestInstallationService:
    async def test_imports_sorted_by_name(self, test_db, test_installation):
        imports = await InstallationService(test_db).list_imports(test_installation.id)

        assert [i.name for i in imports] == ["alpha-lib", "zeta-service"]
        assert imports[0].default_branch == "main"
        assert imports[1].is_private is True

    async def test_installations_of_user_without_any(self, test_db, test_user_2):
        assert await InstallationService(test_db).list_installations(test_user_2.id) == []
