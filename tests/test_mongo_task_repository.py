"""
Tests for the Mongo adapter. Motor is mocked at the collection level.
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from taskboard.adapters.mongo import MongoTaskRepository
from taskboard.core.config import Settings
from taskboard.core.errors import StorageError

from tests.fakes import make_task

DUE = datetime(2024, 3, 20, tzinfo=timezone.utc)


def make_document(task_id):
    return {"_id": task_id, "title": "T", "description": "D", "dueDate": DUE}


@pytest.fixture
def cursor():
    cursor = MagicMock()
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    return cursor


@pytest.fixture
def collection(cursor):
    collection = MagicMock()
    collection.find.return_value = cursor
    collection.count_documents = AsyncMock(return_value=0)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    return collection


@pytest.fixture
def database(collection):
    database = MagicMock()
    database.connect = AsyncMock()
    database.disconnect = AsyncMock()
    database.health_check = AsyncMock(return_value=True)
    database.get_collection = AsyncMock(return_value=collection)
    return database


@pytest.fixture
def repository(database):
    return MongoTaskRepository(
        database=database, collection_name="tasks", settings=Settings(log_dir="")
    )


@pytest.mark.asyncio
async def test_get_tasks_pages_by_id_and_counts_everything(repository, collection, cursor):
    cursor.to_list.return_value = [make_document("a"), make_document("b")]
    collection.count_documents.return_value = 12

    page = await repository.get_tasks(page=3, limit=5)

    collection.find.assert_called_once_with({})
    cursor.skip.assert_called_once_with(10)
    cursor.limit.assert_called_once_with(5)
    cursor.sort.assert_called_once_with("_id", 1)
    cursor.to_list.assert_awaited_once_with(length=5)
    collection.count_documents.assert_awaited_once_with({})
    assert page.total == 12
    assert [task.id for task in page.items] == ["a", "b"]
    assert page.items[0].due_date == DUE


@pytest.mark.asyncio
async def test_get_tasks_first_page_has_no_offset(repository, cursor):
    await repository.get_tasks(page=1, limit=10)

    cursor.skip.assert_called_once_with(0)


@pytest.mark.asyncio
async def test_get_tasks_wraps_driver_errors(repository, collection):
    collection.count_documents.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StorageError):
        await repository.get_tasks(page=1, limit=10)


@pytest.mark.asyncio
async def test_create_task_inserts_document_with_id(repository, collection):
    await repository.create_task(make_task("abc", "T", "D", DUE))

    collection.insert_one.assert_awaited_once_with(make_document("abc"))


@pytest.mark.asyncio
async def test_create_task_duplicate_id_is_storage_error(repository, collection):
    collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")

    with pytest.raises(StorageError, match="already exists"):
        await repository.create_task(make_task("abc"))


@pytest.mark.asyncio
async def test_update_task_sets_fields_without_id(repository, collection):
    updated = await repository.update_task("abc", make_task("abc", "T", "D", DUE))

    assert updated is True
    collection.update_one.assert_awaited_once_with(
        {"_id": "abc"},
        {"$set": {"title": "T", "description": "D", "dueDate": DUE}},
    )


@pytest.mark.asyncio
async def test_update_task_reports_no_match(repository, collection):
    collection.update_one.return_value = MagicMock(matched_count=0)

    assert await repository.update_task("abc", make_task("abc")) is False


@pytest.mark.asyncio
async def test_update_counts_match_even_when_nothing_changed(repository, collection):
    collection.update_one.return_value = MagicMock(matched_count=1, modified_count=0)

    assert await repository.update_task("abc", make_task("abc")) is True


@pytest.mark.asyncio
async def test_delete_task(repository, collection):
    assert await repository.delete_task("abc") is True
    collection.delete_one.assert_awaited_once_with({"_id": "abc"})

    collection.delete_one.return_value = MagicMock(deleted_count=0)
    assert await repository.delete_task("abc") is False


@pytest.mark.asyncio
async def test_operations_before_connect_raise_storage_error(repository, database):
    database.get_collection.side_effect = RuntimeError("Database not connected")

    with pytest.raises(StorageError):
        await repository.delete_task("abc")


@pytest.mark.asyncio
async def test_lifecycle_delegates_to_connection_manager(repository, database):
    await repository.connect()
    assert await repository.health_check() is True
    await repository.close()

    database.connect.assert_awaited_once()
    database.disconnect.assert_awaited_once()


@pytest.mark.asyncio
async def test_connect_failure_is_storage_error(repository, database):
    database.connect.side_effect = ServerSelectionTimeoutError("timed out")

    with pytest.raises(StorageError, match="Could not connect"):
        await repository.connect()
