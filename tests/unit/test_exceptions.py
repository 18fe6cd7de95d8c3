"""
Unit tests for Exception classes.
"""

from fastapi import HTTPException, status

from app.exceptions.base import (
    AuthRequiredError,
    BadRequestError,
    BaseAppException,
    ConflictError,
    InternalServerError,
    NotFoundError,
)
from app.exceptions.resource import ChatNotFoundError, ProjectContextNotFoundError


class TestBaseAppException:
    def test_defaults(self):
        exc = BaseAppException("Test error")

        assert isinstance(exc, HTTPException)
        assert exc.status_code == 500
        assert exc.status_message == "Internal Server Error"
        assert exc.detail == {"message": "Test error", "error_code": "INTERNAL_ERROR", "data": None}

    def test_data_is_carried(self):
        exc = InternalServerError(data={"error": "disk full"})

        assert exc.detail["data"] == {"error": "disk full"}


class TestStatusCodes:
    def test_status_codes(self):
        assert BadRequestError().status_code == status.HTTP_400_BAD_REQUEST
        assert AuthRequiredError().status_code == status.HTTP_401_UNAUTHORIZED
        assert NotFoundError().status_code == status.HTTP_404_NOT_FOUND
        assert ConflictError().status_code == status.HTTP_409_CONFLICT

    def test_auth_required_challenges_bearer(self):
        assert AuthRequiredError().headers == {"WWW-Authenticate": "Bearer"}

    def test_resource_errors_are_not_found(self):
        assert isinstance(ChatNotFoundError(), NotFoundError)
        assert ProjectContextNotFoundError().message == "Project context not found"
