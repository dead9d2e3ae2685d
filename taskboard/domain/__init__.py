"""
Domain layer: entities and value objects.
"""

from .entities import Task
from .value_objects import PageRequest, TaskId, TaskListing, TaskPage

__all__ = [
    "Task",
    "TaskId",
    "PageRequest",
    "TaskPage",
    "TaskListing",
]
