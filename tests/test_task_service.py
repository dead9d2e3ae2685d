import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from taskboard.core.errors import NotFoundError, StorageError, ValidationError
from taskboard.domain.value_objects import TaskPage
from taskboard.ports.repository import TaskRepositoryPort
from taskboard.services import TaskService

from tests.fakes import make_task

DUE = datetime(2024, 3, 20, tzinfo=timezone.utc)


@pytest.fixture
def repository():
    repo = MagicMock(spec=TaskRepositoryPort)
    repo.get_tasks = AsyncMock(return_value=TaskPage())
    repo.create_task = AsyncMock(return_value=None)
    repo.update_task = AsyncMock(return_value=True)
    repo.delete_task = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def service(repository):
    return TaskService(repository)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "total,limit,expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (15, 7, 3), (100, 1, 100)],
)
async def test_list_tasks_total_pages(service, repository, total, limit, expected):
    repository.get_tasks.return_value = TaskPage(items=[make_task()], total=total)

    listing = await service.list_tasks(page=1, limit=limit)

    assert listing.total_pages == expected
    assert listing.total == total
    assert listing.current_page == 1
    repository.get_tasks.assert_awaited_once_with(1, limit)


@pytest.mark.asyncio
async def test_list_tasks_rejects_non_positive_values(service, repository):
    with pytest.raises(ValidationError) as excinfo:
        await service.list_tasks(page=0, limit=-1)

    assert excinfo.value.messages == [
        "Page must be a positive integer",
        "Limit must be a positive integer",
    ]
    repository.get_tasks.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_tasks_wraps_repository_failure(service, repository):
    repository.get_tasks.side_effect = ConnectionError("mongo down")

    with pytest.raises(StorageError) as excinfo:
        await service.list_tasks(page=1, limit=10)

    assert str(excinfo.value) == "Failed to fetch tasks"
    assert isinstance(excinfo.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_create_task_generates_fresh_ids(service, repository):
    first = await service.create_task("T", "D", DUE)
    second = await service.create_task("T", "D", DUE)

    assert first.id != second.id
    assert len(first.id) == 24
    stored = repository.create_task.await_args_list[0].args[0]
    assert stored == first
    assert stored.due_date == DUE


@pytest.mark.asyncio
async def test_create_task_wraps_duplicate_id(service, repository):
    repository.create_task.side_effect = StorageError("Task 1 already exists")

    with pytest.raises(StorageError) as excinfo:
        await service.create_task("T", "D", DUE)

    assert str(excinfo.value) == "Failed to create task"


@pytest.mark.asyncio
async def test_update_task_echoes_submitted_values(service, repository):
    task = await service.update_task("abc", "New", "", DUE)

    assert task == make_task("abc", "New", "", DUE)
    repository.update_task.assert_awaited_once_with("abc", task)


@pytest.mark.asyncio
async def test_update_task_not_found(service, repository):
    repository.update_task.return_value = False

    with pytest.raises(NotFoundError) as excinfo:
        await service.update_task("missing", "New", "", DUE)

    assert excinfo.value.task_id == "missing"
    assert str(excinfo.value) == "Task not found"


@pytest.mark.asyncio
async def test_update_task_wraps_failure(service, repository):
    repository.update_task.side_effect = StorageError("boom")

    with pytest.raises(StorageError, match="Failed to update task"):
        await service.update_task("abc", "New", "", DUE)


@pytest.mark.asyncio
async def test_delete_task(service, repository):
    await service.delete_task("abc")

    repository.delete_task.assert_awaited_once_with("abc")


@pytest.mark.asyncio
async def test_delete_task_not_found(service, repository):
    repository.delete_task.return_value = False

    with pytest.raises(NotFoundError):
        await service.delete_task("abc")


@pytest.mark.asyncio
async def test_delete_task_wraps_failure(service, repository):
    repository.delete_task.side_effect = TimeoutError()

    with pytest.raises(StorageError, match="Failed to delete task"):
        await service.delete_task("abc")
