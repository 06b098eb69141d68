from typing import TYPE_CHECKING

from ...domain.repositories.blog_post_repository import BlogPostRepository
from ...domain.repositories.portfolio_repository import PortfolioRepository
from ...domain.repositories.service_repository import ServiceRepository
from ...domain.repositories.testimonial_repository import TestimonialRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.system_service import SystemService
from ...application.use_cases.seed_demo_data import SeedDemoDataUseCase
from .repository_provider import REPOSITORY_INTERFACES

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SystemProvider:
    """System provider - registers storage lifecycle, status and seeding"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        mongo_client = container.get("mongo_client") if container.has("mongo_client") else None
        container.register_singleton(
            SystemService,
            SystemService(
                repositories=[container.get(interface) for interface in REPOSITORY_INTERFACES],
                mongo_client=mongo_client,
            )
        )
        container.register_singleton(
            SeedDemoDataUseCase,
            SeedDemoDataUseCase(
                user_repository=container.get(UserRepository),
                service_repository=container.get(ServiceRepository),
                portfolio_repository=container.get(PortfolioRepository),
                blog_post_repository=container.get(BlogPostRepository),
                testimonial_repository=container.get(TestimonialRepository),
            )
        )
