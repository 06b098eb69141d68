from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client manager when the MongoDB backend is selected.
        The in-memory backend has no connection to register.
        """
        if not get_settings().uses_mongodb:
            return

        container.register_singleton("mongo_client", get_mongo_client())
