"""
Service Repository Interface
============================
"""
from abc import abstractmethod
from typing import List

from garden_site.domain.models.service import Service
from garden_site.domain.repositories.base_repository import CrudRepository


class ServiceRepository(CrudRepository[Service]):
    """Abstract repository interface for service operations."""

    @abstractmethod
    async def find_featured(self) -> List[Service]:
        """
        Find featured services.

        Returns:
            Exactly the services whose ``featured`` flag is true
        """
        pass
