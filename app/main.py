"""Workspace API - Main Application Module.

This module initializes the FastAPI application with configuration,
middleware, routing, and lifecycle management for the chat and template
workspace backend.
"""

import logging
import sys
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from http import HTTPStatus
from pathlib import Path

# Add the project root to Python path if running directly
if __name__ == "__main__":
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from app.core.config import get_config_summary, settings
from app.core.logging import setup_logging
from app.core.storage import close_storage, init_storage
from app.database import engine
from app.schemas.base import ErrorEnvelope
from models import Base

logger = logging.getLogger(__name__)

PROCESS_STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifecycle events."""
    # Startup
    setup_logging()
    logger.info("Starting %s with %s", settings.app_name, get_config_summary())

    storage = init_storage(settings.redis_url, settings.storage_namespace)
    logger.info("Temporary storage backend: %s", storage.backend)

    # Development mode: Auto-create tables if they don't exist
    # Production: Use Alembic migrations (alembic upgrade head)
    if settings.is_development:
        logger.info("Development mode: creating/updating database tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    else:
        logger.info("Use 'alembic upgrade head' to manage the database schema")

    yield

    # Shutdown
    logger.info("Shutting down %s...", settings.app_name)
    await close_storage()
    await engine.dispose()
    logger.info("Database connections closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Chat conversations, template collections and project context for a workspace",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Add middleware
    setup_middleware(app)

    # Add exception handlers
    setup_exception_handlers(app)

    # Include routers
    setup_routers(app)

    return app


def setup_middleware(app: FastAPI):
    """Configure application middleware."""
    # Session cookie carrying the logged-in identity
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.is_production,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def error_envelope(
    request: Request,
    status_code: int,
    message: str,
    error_code: str,
    data=None,
) -> dict:
    return ErrorEnvelope(
        statusCode=status_code,
        statusMessage=HTTPStatus(status_code).phrase,
        message=message,
        data=data,
        error_code=error_code,
        timestamp=datetime.utcnow().isoformat(),
        request_id=getattr(request.state, "request_id", None),
    ).model_dump(mode="json")


def setup_exception_handlers(app: FastAPI):
    """Configure global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Handle custom exceptions that have structured detail
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            message = exc.detail["message"]
            error_code = exc.detail.get("error_code", "HTTP_ERROR")
            data = exc.detail.get("data")
        else:
            message = str(exc.detail) if exc.detail else "An error occurred"
            error_code = "HTTP_ERROR"
            data = None

        if exc.status_code >= 500:
            logger.error("%s %s failed: %s (%s)", request.method, request.url.path, message, data)

        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(request, exc.status_code, message, error_code, data),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Convert errors to JSON-serializable format
        errors = []
        for error in exc.errors():
            error_dict = {
                "loc": list(error.get("loc", [])),
                "msg": str(error.get("msg", "Validation error")),
                "type": error.get("type", "value_error"),
            }
            if "input" in error:
                error_dict["input"] = str(error["input"])
            errors.append(error_dict)

        return JSONResponse(
            status_code=422,
            content=error_envelope(request, 422, "Validation error", "VALIDATION_ERROR", errors),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_envelope(
                request, 500, "Internal Server Error", "INTERNAL_ERROR", {"error": str(exc)}
            ),
        )


def setup_routers(app: FastAPI):
    """Configure application routers."""
    # Import routers
    from app.domains.auth.controller import router as auth_router
    from app.domains.chat.controller import router as chat_router
    from app.domains.chat.controller import shared_router as shared_chat_router
    from app.domains.installation.controller import router as installation_router
    from app.domains.project.controller import router as project_router
    from app.domains.template.controller import router as collection_router
    from app.domains.template.controller import shared_router as shared_collection_router
    from app.domains.user.controller import router as user_router

    @app.get("/health")
    async def health_check():
        """Liveness probe; never touches the database or temporary storage."""
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.monotonic() - PROCESS_STARTED_AT,
        }

    # Include domain routers
    app.include_router(auth_router)
    app.include_router(shared_collection_router)
    app.include_router(shared_chat_router)
    app.include_router(chat_router)
    app.include_router(collection_router)
    app.include_router(installation_router)
    app.include_router(project_router)
    app.include_router(user_router)


# Create the application instance
app = create_app()


def main():
    """Entry point for running the application directly."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
