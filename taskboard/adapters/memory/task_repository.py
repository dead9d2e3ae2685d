"""
In-memory Task Repository Adapter.
"""

from dataclasses import replace
from typing import Dict

from taskboard.core.errors import StorageError
from taskboard.core.logger import logger
from taskboard.domain.entities import Task
from taskboard.domain.value_objects import TaskPage
from taskboard.ports.repository import TaskRepositoryPort


class InMemoryTaskRepository(TaskRepositoryPort):
    """
    Dict-backed implementation of TaskRepositoryPort.

    No operation awaits while touching the dict, so `get_tasks` sees a
    consistent snapshot: `total` always matches the items it was computed with.
    """

    def __init__(self):
        self._tasks: Dict[str, Task] = {}

    async def get_tasks(self, page: int, limit: int) -> TaskPage:
        skip = (page - 1) * limit
        ordered = [self._tasks[key] for key in sorted(self._tasks)]
        items = [replace(task) for task in ordered[skip : skip + limit]]
        return TaskPage(items=items, total=len(ordered))

    async def create_task(self, task: Task) -> None:
        if task.id in self._tasks:
            raise StorageError(f"Task {task.id} already exists")
        self._tasks[task.id] = replace(task)
        logger.debug(f"Stored task in memory: {task.id}")

    async def update_task(self, task_id: str, task: Task) -> bool:
        if task_id not in self._tasks:
            return False
        self._tasks[task_id] = replace(task, id=task_id)
        return True

    async def delete_task(self, task_id: str) -> bool:
        return self._tasks.pop(task_id, None) is not None

    async def close(self) -> None:
        self._tasks.clear()
