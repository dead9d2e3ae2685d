"""
Interface for Task Service.
Defines the contract that all task services must implement.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from taskboard.domain.entities import Task
from taskboard.domain.value_objects import TaskListing


class ITaskService(ABC):
    """Interface for task service operations."""

    @abstractmethod
    async def list_tasks(self, page: int, limit: int) -> TaskListing:
        """
        Get one page of tasks.

        Args:
            page: 1-indexed page number
            limit: Page size

        Returns:
            TaskListing: Page items, total count and page arithmetic

        Raises:
            ValidationError: If page or limit is not positive
            StorageError: If the repository fails
        """
        pass

    @abstractmethod
    async def create_task(
        self, title: str, description: str, due_date: datetime
    ) -> Task:
        """
        Create a task with a freshly generated id.

        Returns:
            Task: The created task including its id

        Raises:
            StorageError: If the repository fails
        """
        pass

    @abstractmethod
    async def update_task(
        self, task_id: str, title: str, description: str, due_date: datetime
    ) -> Task:
        """
        Replace every mutable field of an existing task.

        Returns:
            Task: The replacement record as submitted

        Raises:
            NotFoundError: If no task has this id
            StorageError: If the repository fails
        """
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> None:
        """
        Delete a task.

        Raises:
            NotFoundError: If no task has this id
            StorageError: If the repository fails
        """
        pass
