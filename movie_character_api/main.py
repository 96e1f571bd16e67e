"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_character_api.api.v1 import character_router, franchise_router, movie_router
from movie_character_api.core.config import get_settings
from movie_character_api.di.container import DIContainer, get_container
from movie_character_api.infrastructure.db.database import create_schema

logger = logging.getLogger(__name__)


def create_application(container: Optional[DIContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Validation errors answered as 400 Bad Request
    - Startup/shutdown event handlers for the database

    Args:
        container: DI container to serve requests from. Defaults to the
            global container built from environment settings.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title=settings.api_title,
        description="CRUD API for movies, characters and franchises",
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(franchise_router, prefix="/api/franchise")
    application.include_router(movie_router, prefix="/api/movie")
    application.include_router(character_router, prefix="/api/character")

    if container is not None:
        application.dependency_overrides[get_container] = lambda: container

    def active_container() -> DIContainer:
        return container if container is not None else get_container()

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed requests (bad types, fields too long) are a 400."""
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @application.on_event("startup")
    async def startup_event():
        """Create missing tables when enabled."""
        if settings.create_schema_on_startup:
            create_schema(active_container().get("engine"))
            logger.info("Database schema ready")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Release pooled database connections."""
        active_container().dispose()
        logger.info("Database connections released")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": settings.api_title,
            "version": settings.api_version,
            "docs": "/docs"
        }

    return application


# Create application instance
app = create_application()
