"""
Client application: HTTP client, board view model and terminal front end.
"""

from .api_client import TaskApiClient, TaskApiError, TaskPageResponse
from .board import EditBuffer, TaskBoard

__all__ = [
    "TaskApiClient",
    "TaskApiError",
    "TaskPageResponse",
    "TaskBoard",
    "EditBuffer",
]
