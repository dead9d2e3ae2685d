"""
Task Dependencies.
"""

from fastapi import Request

from taskboard.services.interfaces import ITaskService


def get_task_service(request: Request) -> ITaskService:
    """Get the Task Service bound to the running application."""
    return request.app.state.task_service
