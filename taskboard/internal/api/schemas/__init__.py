"""
API Schemas (Request/Response Models).
"""

from .common_schemas import ErrorResponse, HealthResponse, ServiceInfoResponse
from .task_schemas import (
    TaskCreateRequest,
    TaskListResponse,
    TaskPayload,
    TaskResponse,
    TaskUpdateRequest,
)

__all__ = [
    # Common schemas
    "ErrorResponse",
    "HealthResponse",
    "ServiceInfoResponse",
    # Task schemas
    "TaskPayload",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskResponse",
    "TaskListResponse",
]
