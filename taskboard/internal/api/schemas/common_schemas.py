"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"error": "Task not found"}]}
    )

    error: str


class ServiceInfoResponse(BaseModel):
    """Response model for the root endpoint."""

    service: str
    version: str
    status: str


class HealthResponse(BaseModel):
    """Response model for health check."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "Taskboard",
                    "version": "1.0.0",
                    "database": "connected",
                }
            ]
        }
    )

    status: str
    service: str
    version: str
    database: str
