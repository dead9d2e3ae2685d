"""
Task API Routes.
Request validation is declared on the schemas and the pagination dependency,
so it runs before any handler body touches the service.
"""

import time

from fastapi import APIRouter, Depends, HTTPException, Response, status

from taskboard.core.errors import NotFoundError, StorageError
from taskboard.core.logger import logger
from taskboard.internal.api.dependencies import get_task_service
from taskboard.internal.api.schemas import (
    ErrorResponse,
    TaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)
from taskboard.internal.api.validation import Pagination, pagination_params
from taskboard.services.interfaces import ITaskService

TASK_NOT_FOUND = "Task not found"


def create_task_routes() -> APIRouter:
    """
    Factory function to create task routes.

    Returns:
        APIRouter: Configured router with task endpoints
    """
    router = APIRouter(tags=["Tasks"])

    @router.get(
        "/tasks",
        response_model=TaskListResponse,
        summary="List Tasks",
        description="Get one page of tasks ordered by id",
        responses={
            200: {
                "description": "Page retrieved successfully",
                "content": {
                    "application/json": {
                        "example": {
                            "tasks": [
                                {
                                    "_id": "65f1c2a4e4b0a1b2c3d4e5f6",
                                    "title": "Write report",
                                    "description": "Quarterly numbers",
                                    "dueDate": "2024-03-20T00:00:00.000Z",
                                }
                            ],
                            "total": 11,
                            "currentPage": 1,
                            "totalPages": 2,
                        }
                    }
                },
            },
            400: {"model": ErrorResponse, "description": "Invalid query parameters"},
            500: {"model": ErrorResponse, "description": "Storage error"},
        },
    )
    async def list_tasks(
        pagination: Pagination = Depends(pagination_params),
        task_service: ITaskService = Depends(get_task_service),
    ):
        """
        List tasks.

        **Query Parameters:**
        - **page**: 1-indexed page (default 1; non-numeric values fall back to the default)
        - **limit**: Page size (default 10)

        **Returns:**
        - tasks: Tasks on this page
        - total: Number of tasks across all pages
        - currentPage: The page served
        - totalPages: ceil(total / limit)
        """
        try:
            listing = await task_service.list_tasks(pagination.page, pagination.limit)
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )

        logger.info(
            f"API: Tasks listed: page={listing.current_page}, "
            f"count={len(listing.tasks)}, total={listing.total}"
        )
        return TaskListResponse.from_listing(listing)

    @router.post(
        "/tasks",
        response_model=TaskResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Create Task",
        description="Create a task; the id is generated server-side",
        responses={
            400: {"model": ErrorResponse, "description": "Validation error"},
            500: {"model": ErrorResponse, "description": "Storage error"},
        },
    )
    async def create_task(
        request: TaskCreateRequest,
        task_service: ITaskService = Depends(get_task_service),
    ):
        """
        Create a task.

        Any `_id` in the body is ignored; a new time-ordered id is assigned.
        """
        start_time = time.time()

        try:
            task = await task_service.create_task(
                title=request.title,
                description=request.description,
                due_date=request.due_date,
            )
        except StorageError as e:
            elapsed_time = time.time() - start_time
            logger.error(f"API: Create failed after {elapsed_time:.2f}s")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )

        logger.info(f"API: Task created: id={task.id}")
        return TaskResponse.from_entity(task)

    @router.put(
        "/tasks/{task_id}",
        response_model=TaskResponse,
        summary="Update Task",
        description="Replace every mutable field of a task",
        responses={
            400: {"model": ErrorResponse, "description": "Validation error"},
            404: {"model": ErrorResponse, "description": "Task not found"},
            500: {"model": ErrorResponse, "description": "Storage error"},
        },
    )
    async def update_task(
        task_id: str,
        request: TaskUpdateRequest,
        task_service: ITaskService = Depends(get_task_service),
    ):
        """
        Update a task.

        The path id wins over any `_id` in the body. The response echoes the
        submitted values; it is not re-read from storage.
        """
        try:
            task = await task_service.update_task(
                task_id=task_id,
                title=request.title,
                description=request.description,
                due_date=request.due_date,
            )
        except NotFoundError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND
            )
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )

        logger.info(f"API: Task updated: id={task_id}")
        return TaskResponse.from_entity(task)

    @router.delete(
        "/tasks/{task_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Delete Task",
        responses={
            404: {"model": ErrorResponse, "description": "Task not found"},
            500: {"model": ErrorResponse, "description": "Storage error"},
        },
    )
    async def delete_task(
        task_id: str,
        task_service: ITaskService = Depends(get_task_service),
    ):
        """Delete a task. Responds 204 with an empty body."""
        try:
            await task_service.delete_task(task_id)
        except NotFoundError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND
            )
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )

        logger.info(f"API: Task deleted: id={task_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
