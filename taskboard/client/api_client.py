"""
Async HTTP client for the Taskboard API.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from taskboard.core.logger import logger
from taskboard.domain.entities import Task, format_timestamp


class TaskApiError(Exception):
    """
    Non-success response from the API.

    `status_code` is None for transport failures. `detail` carries the
    server's `error` message when the response had one.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.detail = detail
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class TaskPageResponse:
    """Parsed `GET /tasks` body."""

    def __init__(self, tasks: List[Task], total: int, current_page: int, total_pages: int):
        self.tasks = tasks
        self.total = total
        self.current_page = current_page
        self.total_pages = total_pages

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "TaskPageResponse":
        return cls(
            tasks=[Task.from_json(item) for item in data.get("tasks", [])],
            total=data.get("total", 0),
            current_page=data.get("currentPage", 1),
            total_pages=data.get("totalPages", 0),
        )


class TaskApiClient:
    """Thin wrapper over httpx.AsyncClient speaking the Taskboard JSON API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Request {method} {url} failed: {e}")
            raise TaskApiError(f"Could not reach {self.base_url}: {e}") from e

        if response.is_success:
            return response

        detail = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            detail = str(body["error"])

        message = detail or response.reason_phrase or f"HTTP {response.status_code}"
        raise TaskApiError(message, status_code=response.status_code, detail=detail)

    @staticmethod
    def _payload(title: str, description: str, due_date: datetime) -> Dict[str, str]:
        return {
            "title": title,
            "description": description,
            "dueDate": format_timestamp(due_date),
        }

    async def list_tasks(self, page: int, limit: int) -> TaskPageResponse:
        response = await self._request(
            "GET", "/tasks", params={"page": page, "limit": limit}
        )
        return TaskPageResponse.from_json(response.json())

    async def create_task(self, title: str, description: str, due_date: datetime) -> Task:
        response = await self._request(
            "POST", "/tasks", json=self._payload(title, description, due_date)
        )
        return Task.from_json(response.json())

    async def update_task(
        self, task_id: str, title: str, description: str, due_date: datetime
    ) -> Task:
        response = await self._request(
            "PUT", f"/tasks/{task_id}", json=self._payload(title, description, due_date)
        )
        return Task.from_json(response.json())

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")
