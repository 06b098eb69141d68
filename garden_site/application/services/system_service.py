"""
System Service
==============

Storage preparation at startup and the connectivity report behind
``GET /api/status``.
"""
import logging
from typing import Dict, Optional, Sequence

from garden_site.domain.repositories.base_repository import CrudRepository
from garden_site.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


class SystemService:
    """Application service for storage lifecycle and health."""

    def __init__(
        self,
        repositories: Sequence[CrudRepository],
        mongo_client: Optional[MongoClientManager] = None,
    ):
        """
        Initialize service.

        Args:
            repositories: Every registered repository
            mongo_client: MongoDB client manager, None for the in-memory backend
        """
        self._repositories = list(repositories)
        self._mongo_client = mongo_client

    @property
    def storage(self) -> str:
        return "mongodb" if self._mongo_client is not None else "memory"

    async def prepare_storage(self) -> None:
        """Create backend indexes for every repository."""
        for repository in self._repositories:
            await repository.ensure_indexes()
        logger.info("Storage ready (%s)", self.storage)

    async def status(self) -> Dict[str, str]:
        """
        Report storage connectivity. Never raises.

        Returns:
            Dict with ``status``, ``storage`` and ``database`` keys
        """
        if self._mongo_client is None:
            database = "in-memory"
        elif await self._mongo_client.ping():
            database = "connected"
        else:
            database = "disconnected"
        return {"status": "ok", "storage": self.storage, "database": database}
