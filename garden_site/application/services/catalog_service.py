"""
Catalog Service
===============

Application service for the services catalog.

Owns the one cross-entity rule of the data model: deleting a service
also deletes every portfolio item that references it.
"""
import logging
from typing import Any, Dict, List, Optional

from garden_site.application.use_cases.reconcile_portfolio_items import ReconcilePortfolioItemsUseCase
from garden_site.domain.models.service import Service
from garden_site.domain.repositories.portfolio_repository import PortfolioRepository
from garden_site.domain.repositories.service_repository import ServiceRepository
from garden_site.utils.identifiers import EntityId

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Application service for service catalog operations.

    Coordinates the service and portfolio repositories.
    """

    def __init__(
        self,
        service_repository: ServiceRepository,
        portfolio_repository: PortfolioRepository,
    ):
        """
        Initialize service with repositories.

        Args:
            service_repository: Repository for services
            portfolio_repository: Repository for portfolio items
        """
        self._services = service_repository
        self._portfolio = portfolio_repository
        self._reconcile_use_case = ReconcilePortfolioItemsUseCase(
            service_repository, portfolio_repository
        )

    async def list_services(self) -> List[Service]:
        return await self._services.find_all()

    async def list_featured_services(self) -> List[Service]:
        return await self._services.find_featured()

    async def get_service(self, service_id: EntityId) -> Optional[Service]:
        return await self._services.find_by_id(service_id)

    async def create_service(self, service: Service) -> Service:
        created = await self._services.create(service)
        logger.info("Created service %s (%s)", created.id, created.name)
        return created

    async def update_service(
        self,
        service_id: EntityId,
        changes: Dict[str, Any],
    ) -> Optional[Service]:
        return await self._services.update(service_id, changes)

    async def delete_service(self, service_id: EntityId) -> bool:
        """
        Delete a service and the portfolio items that showcase it.

        The two deletes are not atomic. Items left behind by a failure
        between them are removed by ``reconcile_portfolio_items``.

        Args:
            service_id: Numeric or string service identifier

        Returns:
            True if the service existed and was deleted
        """
        if not await self._services.delete(service_id):
            return False

        removed = await self._portfolio.delete_by_service(service_id)
        logger.info(
            "Deleted service %s and %d portfolio item(s) referencing it",
            service_id, removed,
        )
        return True

    async def reconcile_portfolio_items(self) -> int:
        """
        Remove portfolio items whose service no longer exists.

        Returns:
            Number of portfolio items removed
        """
        return await self._reconcile_use_case.execute()
