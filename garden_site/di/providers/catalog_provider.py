from typing import TYPE_CHECKING

from ...domain.repositories.portfolio_repository import PortfolioRepository
from ...domain.repositories.service_repository import ServiceRepository
from ...application.services.catalog_service import CatalogService
from ...application.services.portfolio_service import PortfolioService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CatalogProvider:
    """Catalog provider - registers service catalog and portfolio services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            CatalogService,
            CatalogService(
                service_repository=container.get(ServiceRepository),
                portfolio_repository=container.get(PortfolioRepository),
            )
        )
        container.register_singleton(
            PortfolioService,
            PortfolioService(portfolio_repository=container.get(PortfolioRepository))
        )
