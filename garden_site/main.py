"""
FastAPI Application
===================

Main FastAPI app setup with all routes, middleware and lifecycle hooks.
Startup: storage preparation (indexes) → optional demo seed.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from garden_site.api.errors import register_exception_handlers
from garden_site.api.v1 import ROUTES
from garden_site.application.services.system_service import SystemService
from garden_site.application.use_cases.seed_demo_data import SeedDemoDataUseCase
from garden_site.core.config import get_settings
from garden_site.core.logging_config import setup_logging
from garden_site.di.container import get_container

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration and JSON error handlers
    - Startup/shutdown event handlers for storage

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    application = FastAPI(
        title=settings.app_name,
        description="Public site and admin back-office API for a garden services business",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router, prefix in ROUTES:
        application.include_router(router, prefix=prefix)

    register_exception_handlers(application)

    @application.on_event("startup")
    async def startup_event():
        """Prepare storage and seed demo data when enabled."""
        settings = get_settings()
        container = get_container()

        logger.info("Starting %s with %s storage", settings.app_name, settings.storage_backend)
        await container.get(SystemService).prepare_storage()

        if settings.seed_demo_data:
            await container.get(SeedDemoDataUseCase).execute()

        if not settings.admin_api_token:
            logger.warning("ADMIN_API_TOKEN is not set, /api/admin routes are unauthenticated")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Close the MongoDB connection, if any."""
        container = get_container()
        if container.has("mongo_client"):
            await container.get("mongo_client").close()
            logger.info("MongoDB connection closed")

    return application


app = create_application()
