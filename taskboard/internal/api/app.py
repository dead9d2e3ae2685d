"""
FastAPI application factory for the Taskboard API.
- Routes are separated into modules
- MongoDB (or an in-memory store) for persistence
- Logging for every request and storage failure
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.adapters import build_task_repository
from taskboard.core.config import Settings, get_settings
from taskboard.core.logger import logger
from taskboard.internal.api.middleware import RequestLoggingMiddleware
from taskboard.internal.api.routes import create_health_routes, create_task_routes
from taskboard.internal.api.utils import register_exception_handlers
from taskboard.ports.repository import TaskRepositoryPort
from taskboard.services import TaskService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    The repository connection is acquired before serving and always released.
    """
    settings: Settings = app.state.settings
    repository: TaskRepositoryPort = app.state.repository

    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Storage backend: {type(repository).__name__}")

    try:
        await repository.connect()
    except Exception as e:
        logger.error(f"Failed to initialize storage backend: {e}")
        logger.exception("Storage initialization error details:")
        raise

    if await repository.health_check():
        logger.info("Storage health check passed")
    else:
        logger.warning("Storage health check failed")

    logger.info(f"========== {settings.app_name} API service started ==========")

    try:
        yield
    finally:
        logger.info("========== Shutting down API service ==========")
        try:
            await repository.close()
            logger.info("Storage backend closed")
        except Exception as e:
            logger.error(f"Error closing storage backend: {e}")
            logger.exception("Storage shutdown error details:")
        logger.info("========== API service stopped ==========")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TaskRepositoryPort] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        repository: Storage backend (defaults to STORAGE_BACKEND)

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    repository = repository or build_task_repository(settings)

    logger.info("Creating FastAPI application...")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Paginated task tracking API.",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Tasks", "description": "Create, list, update and delete tasks."},
            {"name": "Health", "description": "Service and storage health."},
        ],
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.settings = settings
    app.state.repository = repository
    app.state.task_service = TaskService(repository)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.debug("Middleware added")

    register_exception_handlers(app)

    app.include_router(create_task_routes())
    app.include_router(create_health_routes())
    logger.info("Task and health routes registered")

    return app


def run() -> None:
    """Run the API under uvicorn using environment settings."""
    import uvicorn

    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"Reload: {settings.api_reload}")

    if settings.api_reload:
        # Reload needs an import string
        uvicorn.run(
            "taskboard.internal.api.app:create_app",
            factory=True,
            host=settings.api_host,
            port=settings.api_port,
            reload=True,
            log_level="info" if settings.debug else "warning",
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=settings.api_host,
            port=settings.api_port,
            log_level="info" if settings.debug else "warning",
        )
