"""
Task Service.
Validates pagination, assigns ids, and wraps every repository call so storage
faults surface as StorageError with a generic, caller-safe message.
"""

from datetime import datetime

from taskboard.core.errors import NotFoundError, StorageError
from taskboard.core.logger import logger
from taskboard.domain.entities import Task
from taskboard.domain.value_objects import PageRequest, TaskId, TaskListing
from taskboard.ports.repository import TaskRepositoryPort
from taskboard.services.interfaces import ITaskService


class TaskService(ITaskService):
    """Application service for managing tasks."""

    def __init__(self, repository: TaskRepositoryPort):
        self.repository = repository

    async def list_tasks(self, page: int, limit: int) -> TaskListing:
        request = PageRequest(page=page, limit=limit)

        try:
            result = await self.repository.get_tasks(request.page, request.limit)
        except Exception as e:
            logger.error(f"Error fetching tasks: {e}")
            logger.exception("Task listing error details:")
            raise StorageError("Failed to fetch tasks") from e

        return TaskListing(
            tasks=result.items,
            total=result.total,
            current_page=request.page,
            total_pages=request.total_pages(result.total),
        )

    async def create_task(
        self, title: str, description: str, due_date: datetime
    ) -> Task:
        task = Task(
            id=TaskId.generate().value,
            title=title,
            description=description,
            due_date=due_date,
        )
        logger.info(f"Creating task: id={task.id}, title={title!r}")

        try:
            await self.repository.create_task(task)
        except Exception as e:
            logger.error(f"Error creating task: {e}")
            logger.exception("Task creation error details:")
            raise StorageError("Failed to create task") from e

        return task

    async def update_task(
        self, task_id: str, title: str, description: str, due_date: datetime
    ) -> Task:
        task = Task(
            id=task_id,
            title=title,
            description=description,
            due_date=due_date,
        )
        logger.info(f"Updating task: id={task_id}")

        try:
            updated = await self.repository.update_task(task_id, task)
        except Exception as e:
            logger.error(f"Error updating task: {e}")
            logger.exception("Task update error details:")
            raise StorageError("Failed to update task") from e

        if not updated:
            logger.warning(f"Task not found for update: id={task_id}")
            raise NotFoundError(task_id)

        # Echo the caller's values; the stored document is not re-read
        return task

    async def delete_task(self, task_id: str) -> None:
        logger.info(f"Deleting task: id={task_id}")

        try:
            deleted = await self.repository.delete_task(task_id)
        except Exception as e:
            logger.error(f"Error deleting task: {e}")
            logger.exception("Task deletion error details:")
            raise StorageError("Failed to delete task") from e

        if not deleted:
            logger.warning(f"Task not found for delete: id={task_id}")
            raise NotFoundError(task_id)
