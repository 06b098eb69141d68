"""
MongoDB Client
==============

Singleton MongoDB client manager built on pymongo's asyncio client.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from garden_site.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    Singleton MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    Creating the client does not contact the server; the first operation does.
    """
    _instance: Optional["MongoClientManager"] = None
    _client: Optional[AsyncMongoClient] = None
    _database: Optional[AsyncDatabase] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._client is None:
            self._initialize_client()

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        settings = get_settings()
        self._client = AsyncMongoClient(
            settings.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
        self._database = self._client[settings.mongo_database_name]
        logger.info("MongoDB client configured for database '%s'", settings.mongo_database_name)

    def get_database(self) -> AsyncDatabase:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB AsyncCollection object
        """
        return self.get_database()[collection_name]

    async def ping(self) -> bool:
        """Check the server is reachable. Never raises."""
        try:
            await self.get_database().command("ping")
            return True
        except PyMongoError as e:
            logger.error("MongoDB ping failed: %s", e)
            return False

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    return MongoClientManager()
