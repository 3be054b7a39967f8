"""
FastAPI application factory.

Creates and configures the FastAPI application instance. One codebase
serves both the identity service and the posting service; ``service_role``
decides which routers a process mounts.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.exceptions import ChirperError
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.tweets.routes import router as tweets_router

from .dependencies import ServiceContainer
from .errors import chirper_error_handler
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = app.state.settings
    logger.info(
        "Starting %s (%s) on %s:%s",
        settings.app_name,
        settings.service_role,
        settings.host,
        settings.port,
    )
    yield
    await app.state.container.aclose()
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the process-wide settings

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Identity and posting services for Chirper",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = ServiceContainer(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(ChirperError, chirper_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    if settings.service_role in ("identity", "all"):
        app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
        app.include_router(users_router, prefix="/api/users", tags=["users"])
    if settings.service_role in ("posting", "all"):
        app.include_router(tweets_router, prefix="/api/tweets", tags=["tweets"])

    return app


# Application instance for uvicorn
app = create_app()
