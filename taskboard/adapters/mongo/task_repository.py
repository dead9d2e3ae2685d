"""
Mongo Task Repository Adapter.
"""

import asyncio
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from taskboard.core.config import Settings, get_settings
from taskboard.core.database import MongoDB
from taskboard.core.errors import StorageError
from taskboard.core.logger import logger
from taskboard.domain.entities import Task
from taskboard.domain.value_objects import TaskPage
from taskboard.ports.repository import TaskRepositoryPort


class MongoTaskRepository(TaskRepositoryPort):
    """
    MongoDB implementation of TaskRepositoryPort.

    `get_tasks` runs the page read and the count as two independent
    operations with no snapshot between them, so under concurrent writes
    `total` may briefly disagree with the returned items.
    """

    def __init__(
        self,
        database: Optional[MongoDB] = None,
        collection_name: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.database = database or MongoDB(settings)
        self.collection_name = collection_name or settings.mongodb_collection

    async def connect(self) -> None:
        try:
            await self.database.connect()
        except Exception as e:
            raise StorageError(f"Could not connect to MongoDB: {e}") from e

    async def close(self) -> None:
        await self.database.disconnect()

    async def health_check(self) -> bool:
        return await self.database.health_check()

    async def _collection(self) -> AsyncIOMotorCollection:
        try:
            return await self.database.get_collection(self.collection_name)
        except RuntimeError as e:
            raise StorageError(str(e)) from e

    async def get_tasks(self, page: int, limit: int) -> TaskPage:
        collection = await self._collection()
        skip = (page - 1) * limit
        query = {}

        try:
            cursor = collection.find(query).skip(skip).limit(limit).sort("_id", 1)
            documents, total = await asyncio.gather(
                cursor.to_list(length=limit),
                collection.count_documents(query),
            )
        except PyMongoError as e:
            logger.error(f"Error listing documents in {self.collection_name}: {e}")
            raise StorageError(f"Failed to read tasks: {e}") from e

        logger.debug(
            f"Listed {len(documents)} of {total} documents in {self.collection_name} "
            f"(page={page}, limit={limit})"
        )
        return TaskPage(
            items=[Task.from_document(doc) for doc in documents], total=total
        )

    async def create_task(self, task: Task) -> None:
        collection = await self._collection()

        try:
            await collection.insert_one(task.to_document())
        except DuplicateKeyError as e:
            logger.error(f"Duplicate task id in {self.collection_name}: {task.id}")
            raise StorageError(f"Task {task.id} already exists") from e
        except PyMongoError as e:
            logger.error(f"Error creating document in {self.collection_name}: {e}")
            raise StorageError(f"Failed to insert task {task.id}: {e}") from e

        logger.debug(f"Created document in {self.collection_name}: {task.id}")

    async def update_task(self, task_id: str, task: Task) -> bool:
        collection = await self._collection()

        data = task.to_document()
        # _id is immutable, match on it instead
        data.pop("_id", None)

        try:
            result = await collection.update_one({"_id": task_id}, {"$set": data})
        except PyMongoError as e:
            logger.error(f"Error updating document in {self.collection_name}: {e}")
            raise StorageError(f"Failed to update task {task_id}: {e}") from e

        logger.debug(
            f"Update in {self.collection_name}: id={task_id}, matched={result.matched_count}"
        )
        return result.matched_count > 0

    async def delete_task(self, task_id: str) -> bool:
        collection = await self._collection()

        try:
            result = await collection.delete_one({"_id": task_id})
        except PyMongoError as e:
            logger.error(f"Error deleting document in {self.collection_name}: {e}")
            raise StorageError(f"Failed to delete task {task_id}: {e}") from e

        logger.debug(
            f"Delete in {self.collection_name}: id={task_id}, deleted={result.deleted_count}"
        )
        return result.deleted_count > 0
