"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings as get_app_settings

from .config import get_settings
from .errors import register_exception_handlers
from .routes import health
from modules.auth.routes import router as auth_router

logger = logging.getLogger(__name__)

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def configure_logging(level: str) -> None:
    """Configure root logging once; later calls leave existing handlers alone."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    app_settings = get_app_settings()
    configure_logging(settings.log_level)
    app.state.started_at = time.monotonic()
    if not app_settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; token endpoints will reject requests")
    logger.info(
        "Starting %s on %s:%s (%s)",
        app_settings.app_name,
        settings.host,
        settings.port,
        app_settings.environment,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", app_settings.app_name)


async def route_not_found(path: str) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"message": "Route not found", "status": "error"},
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.app_name,
        description="Authentication and onboarding API for the iMall app",
        version=app_settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.started_at = time.monotonic()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])

    # Must stay last: anything that reaches it matched no other route
    app.add_api_route(
        "/{path:path}",
        route_not_found,
        methods=_ALL_METHODS,
        include_in_schema=False,
    )

    return app


# Application instance for uvicorn
app = create_app()
