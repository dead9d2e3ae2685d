"""
Health Check API Routes.
"""

from fastapi import APIRouter, Request

from taskboard.core.logger import logger
from taskboard.internal.api.schemas import HealthResponse, ServiceInfoResponse


def create_health_routes() -> APIRouter:
    """
    Factory function to create health routes.

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/",
        response_model=ServiceInfoResponse,
        summary="Root Endpoint",
        description="Get basic API information",
        operation_id="get_root",
    )
    async def root(request: Request):
        """Service name, version and status."""
        settings = request.app.state.settings
        return ServiceInfoResponse(
            service=settings.app_name,
            version=settings.app_version,
            status="running",
        )

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check service and storage backend health",
        operation_id="health_check",
    )
    async def health_check(request: Request):
        """
        Health check endpoint.

        **Returns:**
        - status: `healthy` when the storage backend answers, else `degraded`
        - database: `connected` or `disconnected`
        """
        settings = request.app.state.settings
        repository = request.app.state.repository

        try:
            database_ok = await repository.health_check()
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            database_ok = False

        return HealthResponse(
            status="healthy" if database_ok else "degraded",
            service=settings.app_name,
            version=settings.app_version,
            database="connected" if database_ok else "disconnected",
        )

    return router
