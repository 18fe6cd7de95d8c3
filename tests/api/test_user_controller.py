"""
API tests for user, session, installation and project endpoints.
"""

import pytest
from fastapi import status
from httpx import AsyncClient


class TestAuthController:
    """Test cases for session handling."""

    @pytest.mark.asyncio
    async def test_logout_without_session(self, client: AsyncClient):
        response = await client.post("/api/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is False

    @pytest.mark.asyncio
    async def test_token_login_then_logout_twice(
        self, client: AsyncClient, test_user, token_auth
    ):
        headers = {"Authorization": f"Bearer {token_auth.create_token(test_user.id)}"}
        response = await client.get(f"/api/users/{test_user.id}/files", headers=headers)
        assert response.status_code == status.HTTP_200_OK

        # the session cookie alone now identifies the user
        response = await client.get(f"/api/users/{test_user.id}/files")
        assert response.status_code == status.HTTP_200_OK

        assert (await client.post("/api/auth/logout")).json() is True
        assert (await client.post("/api/auth/logout")).json() is False

        response = await client.get(f"/api/users/{test_user.id}/files")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_invalid_token(self, client: AsyncClient, test_user):
        response = await client.get(
            f"/api/users/{test_user.id}/files", headers={"Authorization": "Bearer not.a.jwt"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, client: AsyncClient, token_auth):
        headers = {"Authorization": f"Bearer {token_auth.create_token(424242)}"}
        response = await client.get("/api/users/424242/files", headers=headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestUserController:
    """Test cases for user endpoints."""

    @pytest.mark.asyncio
    async def test_list_files(self, authenticated_client: AsyncClient, test_user, test_user_file):
        response = await authenticated_client.get(f"/api/users/{test_user.id}/files")

        assert response.status_code == status.HTTP_200_OK
        assert [f["title"] for f in response.json()] == ["notes.md"]

    @pytest.mark.asyncio
    async def test_list_files_bad_user_id(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/api/users/me/files")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_delete_user(
        self, client: AsyncClient, test_user, test_chat, test_collection, token_auth
    ):
        headers = {"Authorization": f"Bearer {token_auth.create_token(test_user.id)}"}
        url = f"/api/users/{test_user.id}"

        response = await client.delete(url, headers=headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() is True

        # session is gone and so is the user
        assert (await client.post("/api/auth/logout")).json() is False
        response = await client.get(f"{url}/files", headers=headers)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_delete_user_drops_shared_listing(
        self, client: AsyncClient, test_user, test_collection, token_auth
    ):
        headers = {"Authorization": f"Bearer {token_auth.create_token(test_user.id)}"}
        assert (await client.get("/api/shared/collections")).json()["total"] == 1

        response = await client.delete(f"/api/users/{test_user.id}", headers=headers)
        assert response.json() is True

        listing = (await client.get("/api/shared/collections")).json()
        assert listing == {"collections": [], "total": 0}

    @pytest.mark.asyncio
    async def test_delete_other_user(self, authenticated_client: AsyncClient, test_user_2):
        response = await authenticated_client.delete(f"/api/users/{test_user_2.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestInstallationController:
    """Test cases for installation endpoints."""

    @pytest.mark.asyncio
    async def test_list_installations(
        self, authenticated_client: AsyncClient, test_user, test_installation
    ):
        response = await authenticated_client.get(f"/api/users/{test_user.id}/installations")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[0]["github_account_name"] == "octo-org"

    @pytest.mark.asyncio
    async def test_list_imports(
        self, authenticated_client: AsyncClient, test_user, test_installation
    ):
        response = await authenticated_client.get(
            f"/api/users/{test_user.id}/installations/{test_installation.id}/imports"
        )

        assert response.status_code == status.HTTP_200_OK
        assert [r["name"] for r in response.json()] == ["alpha-lib", "zeta-service"]

    @pytest.mark.asyncio
    async def test_imports_of_foreign_installation(
        self, client: AsyncClient, test_user_2, test_installation, token_auth
    ):
        headers = {"Authorization": f"Bearer {token_auth.create_token(test_user_2.id)}"}
        response = await client.get(
            f"/api/users/{test_user_2.id}/installations/{test_installation.id}/imports",
            headers=headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_bad_installation_id(self, authenticated_client: AsyncClient, test_user):
        response = await authenticated_client.get(
            f"/api/users/{test_user.id}/installations/x/imports"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid installation_id"


class TestProjectController:
    """Test cases for project context."""

    @pytest.mark.asyncio
    async def test_get_context(self, authenticated_client: AsyncClient, test_user, test_project):
        response = await authenticated_client.get(
            f"/api/users/{test_user.id}/projects/{test_project.id}/context"
        )

        assert response.status_code == status.HTTP_200_OK
        context = response.json()["context"]
        assert context["name"] == "Workspace"
        assert context["context"]["notes"] == "prefer async"

    @pytest.mark.asyncio
    async def test_missing_context(
        self, test_db, authenticated_client: AsyncClient, test_user, test_project
    ):
        test_project.context = None
        await test_db.commit()

        response = await authenticated_client.get(
            f"/api/users/{test_user.id}/projects/{test_project.id}/context"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Project context not found"

    @pytest.mark.asyncio
    async def test_unknown_project(self, authenticated_client: AsyncClient, test_user):
        response = await authenticated_client.get(
            f"/api/users/{test_user.id}/projects/999/context"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        first = (await client.get("/health")).json()
        second = (await client.get("/health")).json()

        assert first["status"] == "healthy"
        assert "timestamp" in first
        assert second["uptime"] >= first["uptime"] >= 0

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_envelope(self, client: AsyncClient):
        response = await client.get("/api/nothing-here")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        data = response.json()
        assert data["statusCode"] == 404
        assert data["statusMessage"] == "Not Found"
        assert data["request_id"] == response.headers["X-Request-ID"]
