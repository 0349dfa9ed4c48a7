"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.database import reset_client_cache
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ProSocialError,
    ValidationError,
)
from shared.logging_config import configure_logging

from .dependencies import get_container, reset_container
from .routes import health
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.connections.routes import router as connections_router
from modules.posts.routes import router as posts_router
from modules.comments.routes import router as comments_router, post_comments_router
from modules.feed.routes import router as feed_router
from modules.messaging.routes import router as conversations_router

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[ProSocialError], int]] = [
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ConflictError, 409),
]


def status_for(exc: ProSocialError) -> int:
    """HTTP status for an error; anything unrecognised is a server error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def prosocial_error_handler(request: Request, exc: ProSocialError) -> JSONResponse:
    """Render backend exceptions that escaped a route."""
    status_code = status_for(exc)
    if isinstance(exc, ExternalServiceError):
        logger.error(
            "%s failure on %s %s",
            exc.service,
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status_code,
            content={
                "error": "SERVICE_UNAVAILABLE",
                "message": "An internal error occurred",
                "details": {},
            },
        )
    if status_code == 500:
        logger.error("Unhandled %s: %s", exc.code, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    get_container().ensure_indexes()
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)
    reset_container()
    reset_client_cache()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Professional social network API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(ProSocialError, prosocial_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(connections_router, prefix="/api/connections", tags=["connections"])
    app.include_router(posts_router, prefix="/api/posts", tags=["posts"])
    app.include_router(post_comments_router, prefix="/api/posts", tags=["comments"])
    app.include_router(comments_router, prefix="/api/comments", tags=["comments"])
    app.include_router(feed_router, prefix="/api/feed", tags=["feed"])
    app.include_router(conversations_router, prefix="/api/conversations", tags=["conversations"])

    return app


# Application instance for uvicorn
app = create_app()
