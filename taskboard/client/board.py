"""
Task board view model.

Holds the current page of tasks keyed by id (iteration follows the server's
order), the page counters and at most one task being edited. Every mutation
is followed by a re-fetch of the current page; server truth always replaces
the local copy.
"""

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from taskboard.client.api_client import TaskApiClient, TaskApiError
from taskboard.core.logger import logger
from taskboard.domain.entities import Task

Alert = Callable[[str], None]


def print_alert(message: str) -> None:
    print(message, file=sys.stderr)


@dataclass
class EditBuffer:
    """Unsaved values for the task being edited."""

    task_id: str
    title: str
    description: str
    due_date: Optional[datetime]


class TaskBoard:
    def __init__(
        self,
        api: TaskApiClient,
        page_size: int = 10,
        alert: Optional[Alert] = None,
    ):
        self.api = api
        self.page_size = page_size
        self.alert = alert or print_alert

        self.tasks: Dict[str, Task] = {}
        self.current_page = 1
        self.total_pages = 1
        self.loading = False
        self.editing: Optional[EditBuffer] = None

    @property
    def task_list(self) -> List[Task]:
        return list(self.tasks.values())

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 0

    @property
    def can_go_previous(self) -> bool:
        return not self.loading and self.current_page > 1

    @property
    def can_go_next(self) -> bool:
        return not self.loading and self.current_page < self.total_pages

    def is_editing(self, task_id: str) -> bool:
        return self.editing is not None and self.editing.task_id == task_id

    async def load(self) -> bool:
        """Initial fetch when the board is first shown."""
        return await self.fetch_tasks()

    async def fetch_tasks(self, page: Optional[int] = None) -> bool:
        """
        Fetch `page` (default: the current page) and replace local state.

        A page past the first that comes back empty (its last task was
        deleted) falls back to the previous page before anything is shown.
        """
        page = self.current_page if page is None else page
        self.loading = True
        try:
            response = await self.api.list_tasks(page, self.page_size)
            if not response.tasks and page > 1:
                logger.debug(f"Page {page} is empty, falling back to page {page - 1}")
                response = await self.api.list_tasks(page - 1, self.page_size)

            self.tasks = {task.id: task for task in response.tasks}
            self.current_page = response.current_page
            self.total_pages = response.total_pages
            return True
        except Exception as e:
            logger.error(f"Failed to fetch tasks: {e}")
            self.alert("Failed to fetch tasks.")
            return False
        finally:
            self.loading = False

    async def next_page(self) -> bool:
        if self.current_page < self.total_pages:
            return await self.fetch_tasks(self.current_page + 1)
        return False

    async def previous_page(self) -> bool:
        if self.current_page > 1:
            return await self.fetch_tasks(self.current_page - 1)
        return False

    def _check_fields(self, title: str, due_date: Optional[datetime]) -> bool:
        if not title:
            self.alert("Please enter a title.")
            return False
        if due_date is None:
            self.alert("Please select a due date.")
            return False
        return True

    async def add_task(
        self, title: str, description: str, due_date: Optional[datetime]
    ) -> bool:
        if not self._check_fields(title, due_date):
            return False

        try:
            await self.api.create_task(title, description, due_date)
        except TaskApiError as e:
            logger.error(f"Failed to add task: {e}")
            self.alert(e.detail or "Failed to add task.")
            return False

        await self.fetch_tasks()
        return True

    def start_edit(self, task_id: str) -> EditBuffer:
        """Enter editing for one task; any other edit in progress is dropped."""
        task = self.tasks[task_id]
        self.editing = EditBuffer(
            task_id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
        )
        return self.editing

    def cancel_edit(self) -> None:
        self.editing = None

    async def update_task(self) -> bool:
        """Submit the edit buffer. A 404 evicts the task and ends editing."""
        edit = self.editing
        if edit is None:
            return False
        if not self._check_fields(edit.title, edit.due_date):
            return False

        try:
            await self.api.update_task(
                edit.task_id, edit.title, edit.description, edit.due_date
            )
        except TaskApiError as e:
            logger.error(f"Failed to update task: {e}")
            if e.is_not_found:
                self.tasks.pop(edit.task_id, None)
                self.editing = None
                self.alert("Task not found.")
            else:
                self.alert(e.detail or "Failed to update task.")
            return False

        self.editing = None
        await self.fetch_tasks()
        return True

    async def delete_task(self, task_id: str) -> bool:
        try:
            await self.api.delete_task(task_id)
        except TaskApiError as e:
            logger.error(f"Failed to delete task: {e}")
            if not e.is_not_found:
                self.alert(e.detail or "Failed to delete task.")
                return False
            self.tasks.pop(task_id, None)
            self.alert("Task not found.")
            deleted = False
        else:
            deleted = True

        if self.is_editing(task_id):
            self.editing = None
        await self.fetch_tasks()
        return deleted
