"""
MongoDB connection using Motor (async driver).
Includes detailed logging and comprehensive error handling.
"""

from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from taskboard.core.config import Settings, get_settings
from taskboard.core.logger import logger


class MongoDB:
    """MongoDB connection manager with async support."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize MongoDB connection manager."""
        self.settings = settings or get_settings()
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None
        logger.debug("MongoDB connection manager initialized")

    async def connect(self) -> None:
        """
        Establish connection to MongoDB.

        Raises:
            Exception: If connection fails
        """
        settings = self.settings
        try:
            logger.info(f"Connecting to MongoDB: {settings.masked_mongodb_url}")
            logger.debug(f"Database name: {settings.mongodb_database}")

            # tz_aware so dueDate comes back as an aware UTC datetime
            self.client = AsyncIOMotorClient(
                settings.mongodb_connection_url,
                maxPoolSize=settings.mongodb_max_pool_size,
                minPoolSize=settings.mongodb_min_pool_size,
                serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
                connectTimeoutMS=settings.mongodb_timeout_ms,
                socketTimeoutMS=settings.mongodb_timeout_ms,
                tz_aware=True,
            )

            await self.client.admin.command("ping")

            self.db = self.client[settings.mongodb_database]

            logger.info(f"Connected to MongoDB database: {settings.mongodb_database}")
            logger.debug(
                f"Connection pool: min={settings.mongodb_min_pool_size}, "
                f"max={settings.mongodb_max_pool_size}"
            )

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            logger.exception("MongoDB connection error details:")
            if self.client is not None:
                self.client.close()
            self.client = None
            self.db = None
            raise

    async def disconnect(self) -> None:
        """
        Close MongoDB connection.

        Safe to call even if not connected.
        """
        if self.client is None:
            logger.debug("MongoDB client not initialized, nothing to disconnect")
            return

        logger.info("Disconnecting from MongoDB...")
        self.client.close()
        self.client = None
        self.db = None
        logger.info("Disconnected from MongoDB")

    async def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection to access

        Returns:
            MongoDB collection object

        Raises:
            RuntimeError: If database is not connected
        """
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")

        return self.db[collection_name]

    async def health_check(self) -> bool:
        """
        Check if MongoDB connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        if self.client is None:
            logger.warning("MongoDB client not initialized")
            return False

        try:
            await self.client.admin.command("ping")
            logger.debug("MongoDB health check passed")
            return True
        except Exception as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False
