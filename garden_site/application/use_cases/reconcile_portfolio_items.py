"""
Reconcile Portfolio Items Use Case
==================================

Removes portfolio items whose service no longer exists.

Deleting a service and deleting its portfolio items are two separate
writes. If the process dies between them the items are orphaned; running
this pass afterwards finishes the job. Safe to run any number of times.
"""
import logging

from garden_site.domain.repositories.portfolio_repository import PortfolioRepository
from garden_site.domain.repositories.service_repository import ServiceRepository

logger = logging.getLogger(__name__)


class ReconcilePortfolioItemsUseCase:
    """Use case for deleting orphaned portfolio items."""

    def __init__(
        self,
        service_repository: ServiceRepository,
        portfolio_repository: PortfolioRepository,
    ):
        self._service_repository = service_repository
        self._portfolio_repository = portfolio_repository

    async def execute(self) -> int:
        """
        Execute the reconciliation pass.

        Service IDs are read with ``list_ids``; if that read fails the
        error propagates and nothing is deleted.

        Returns:
            Number of portfolio items removed
        """
        service_ids = {str(service_id) for service_id in await self._service_repository.list_ids()}

        removed = 0
        for item in await self._portfolio_repository.find_all():
            if item.service_id is None or str(item.service_id) in service_ids:
                continue
            if await self._portfolio_repository.delete(item.id):
                removed += 1
                logger.info(
                    "Removed orphaned portfolio item %s (service %s no longer exists)",
                    item.id, item.service_id,
                )
        return removed
