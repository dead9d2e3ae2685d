"""
Repository Ports.
"""

from abc import ABC, abstractmethod

from taskboard.domain.entities import Task
from taskboard.domain.value_objects import TaskPage


class TaskRepositoryPort(ABC):
    """
    Abstract interface for Task Repository.

    The four abstract operations are the only seam between the service layer
    and the storage technology. Lifecycle hooks are optional for backends
    that hold no connection.
    """

    @abstractmethod
    async def get_tasks(self, page: int, limit: int) -> TaskPage:
        """Get page `page` (1-indexed) of at most `limit` tasks ordered by id, plus the total count."""
        pass

    @abstractmethod
    async def create_task(self, task: Task) -> None:
        """Insert a fully formed task. Raises StorageError if the id already exists."""
        pass

    @abstractmethod
    async def update_task(self, task_id: str, task: Task) -> bool:
        """Replace the task matching `task_id`. Returns False if none matched."""
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> bool:
        """Remove the task matching `task_id`. Returns False if none existed."""
        pass

    async def connect(self) -> None:
        """Acquire backend resources before first use."""
        return None

    async def close(self) -> None:
        """Release backend resources. Must be awaited before process exit."""
        return None

    async def health_check(self) -> bool:
        return True
