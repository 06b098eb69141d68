"""
Portfolio Service
=================

Application service for portfolio items. The public site only sees
Published items; the admin surface sees everything.
"""
from typing import Any, Dict, List, Optional

from garden_site.domain.models.portfolio_item import PortfolioItem, build_sub_records
from garden_site.domain.repositories.portfolio_repository import PortfolioRepository
from garden_site.utils.identifiers import EntityId


class PortfolioService:
    """Application service for portfolio operations."""

    def __init__(self, portfolio_repository: PortfolioRepository):
        self._repository = portfolio_repository

    async def list_items(self, published_only: bool = False) -> List[PortfolioItem]:
        """
        List portfolio items.

        Args:
            published_only: Hide drafts (public site)

        Returns:
            List of portfolio items
        """
        items = await self._repository.find_all()
        if published_only:
            items = [item for item in items if item.is_published()]
        return items

    async def list_items_by_service(
        self,
        service_id: EntityId,
        published_only: bool = False,
    ) -> List[PortfolioItem]:
        items = await self._repository.find_by_service(service_id)
        if published_only:
            items = [item for item in items if item.is_published()]
        return items

    async def get_item(self, item_id: EntityId) -> Optional[PortfolioItem]:
        return await self._repository.find_by_id(item_id)

    async def view_item(self, item_id: EntityId) -> Optional[PortfolioItem]:
        """
        Fetch a published item for its public page and count the view.

        Returns:
            The item with its incremented view count, or None if it does
            not exist or is still a draft
        """
        item = await self._repository.find_by_id(item_id)
        if item is None or not item.is_published():
            return None
        return await self._repository.increment_view_count(item_id)

    async def create_item(self, values: Dict[str, Any]) -> PortfolioItem:
        """
        Create a portfolio item from plain attribute values.

        Args:
            values: Attribute name -> value; sub-records may be plain dicts

        Returns:
            Persisted portfolio item
        """
        return await self._repository.create(PortfolioItem(**build_sub_records(values)))

    async def update_item(
        self,
        item_id: EntityId,
        changes: Dict[str, Any],
    ) -> Optional[PortfolioItem]:
        return await self._repository.update(item_id, build_sub_records(changes))

    async def delete_item(self, item_id: EntityId) -> bool:
        return await self._repository.delete(item_id)
