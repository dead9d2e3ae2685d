"""
Pydantic schemas for Task Management API.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic_core import PydanticCustomError

from taskboard.domain.entities import Task, ensure_utc, format_timestamp
from taskboard.domain.value_objects import TaskListing


class TaskPayload(BaseModel):
    """Request body for task creation and replacement. Any `_id` is ignored."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "title": "Write report",
                    "description": "Quarterly numbers",
                    "dueDate": "2024-03-20T00:00:00.000Z",
                }
            ]
        },
    )

    title: str = Field(..., description="Task title (non-empty)")
    description: str = Field(..., description="Task description (may be empty)")
    due_date: datetime = Field(..., alias="dueDate", description="ISO-8601 due date")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("title_empty", "Title must not be empty")
        return value

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class TaskCreateRequest(TaskPayload):
    """Request model for task creation."""


class TaskUpdateRequest(TaskPayload):
    """Request model for task replacement."""


class TaskResponse(BaseModel):
    """Response model for a task."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "_id": "65f1c2a4e4b0a1b2c3d4e5f6",
                    "title": "Write report",
                    "description": "Quarterly numbers",
                    "dueDate": "2024-03-20T00:00:00.000Z",
                }
            ]
        },
    )

    id: str = Field(..., alias="_id")
    title: str
    description: str
    due_date: datetime = Field(..., alias="dueDate")

    @field_serializer("due_date")
    def serialize_due_date(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
        )


class TaskListResponse(BaseModel):
    """Response model for one page of tasks."""

    model_config = ConfigDict(populate_by_name=True)

    tasks: List[TaskResponse]
    total: int
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")

    @classmethod
    def from_listing(cls, listing: TaskListing) -> "TaskListResponse":
        return cls(
            tasks=[TaskResponse.from_entity(task) for task in listing.tasks],
            total=listing.total,
            current_page=listing.current_page,
            total_pages=listing.total_pages,
        )
