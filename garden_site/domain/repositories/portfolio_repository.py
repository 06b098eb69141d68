"""
Portfolio Repository Interface
==============================
"""
from abc import abstractmethod
from typing import List, Optional

from garden_site.domain.models.portfolio_item import PortfolioItem
from garden_site.domain.repositories.base_repository import CrudRepository
from garden_site.utils.identifiers import EntityId


class PortfolioRepository(CrudRepository[PortfolioItem]):
    """Abstract repository interface for portfolio operations."""

    @abstractmethod
    async def find_by_service(self, service_id: EntityId) -> List[PortfolioItem]:
        """
        Find all portfolio items referencing a service.

        Args:
            service_id: Numeric or string service identifier

        Returns:
            List of portfolio items (empty for unparseable ids)
        """
        pass

    @abstractmethod
    async def delete_by_service(self, service_id: EntityId) -> int:
        """
        Delete all portfolio items referencing a service.

        Returns:
            Number of deleted items
        """
        pass

    @abstractmethod
    async def increment_view_count(self, item_id: EntityId) -> Optional[PortfolioItem]:
        """
        Add one to an item's view count.

        Returns:
            Updated item, or None if not found
        """
        pass
