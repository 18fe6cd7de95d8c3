# ruff: noqa: D107
"""Base exception classes."""

from http import HTTPStatus
from typing import Any

from fastapi import HTTPException


class BaseAppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        data: Any = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.data = data

        super().__init__(
            status_code=status_code,
            detail={"message": message, "error_code": error_code, "data": data},
            headers=headers,
        )

    @property
    def status_message(self) -> str:
        return HTTPStatus(self.status_code).phrase


class BadRequestError(BaseAppException):
    """Exception raised when a path or query identifier is malformed."""

    def __init__(
        self,
        message: str = "Bad Request",
        data: Any = None,
    ):
        super().__init__(message=message, status_code=400, error_code="BAD_REQUEST", data=data)


class AuthRequiredError(BaseAppException):
    """Exception raised when a protected route is called without a valid session."""

    def __init__(self, message: str = "You must be logged in to access this endpoint."):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTH_REQUIRED",
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(BaseAppException):
    """Exception raised when a resource is not found or is not owned by the caller."""

    def __init__(
        self,
        message: str = "Resource not found",
        data: Any = None,
    ):
        super().__init__(message=message, status_code=404, error_code="NOT_FOUND", data=data)


class ConflictError(BaseAppException):
    """Exception raised when a create would violate a uniqueness rule."""

    def __init__(
        self,
        message: str = "Resource already exists",
        data: Any = None,
    ):
        super().__init__(message=message, status_code=409, error_code="CONFLICT", data=data)


class InternalServerError(BaseAppException):
    """Exception raised when the persistence layer fails during a request."""

    def __init__(
        self,
        message: str = "Internal Server Error",
        data: Any = None,
    ):
        super().__init__(message=message, status_code=500, error_code="INTERNAL_ERROR", data=data)
