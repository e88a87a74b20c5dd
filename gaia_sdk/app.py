"""FastAPI application exposing the plugin service."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request

from . import __version__
from .api import health_router, jobs_router
from .config.settings import PluginConfig
from .core.exceptions import ServiceError, service_error_handler
from .services.plugin_service import PluginService

logger = structlog.get_logger(__name__)


def create_app(plugin_service: PluginService, config: Optional[PluginConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        plugin_service: Service backed by an already-built registry
        config: Plugin configuration, stored on app.state

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Plugin service started", version=__version__, jobs=len(plugin_service.registry))
        yield
        logger.info("Plugin service stopped")

    app = FastAPI(
        title="Gaia Plugin",
        version=__version__,
        description="Lists and executes the jobs declared by this plugin",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.state.plugin_service = plugin_service
    app.state.config = config

    # Register exception handlers
    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError):
        return service_error_handler(exc)

    app.include_router(health_router)
    app.include_router(jobs_router)

    return app
