from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.appointment_repository import AppointmentRepository
from ...domain.repositories.blog_post_repository import BlogPostRepository
from ...domain.repositories.inquiry_repository import InquiryRepository
from ...domain.repositories.portfolio_repository import PortfolioRepository
from ...domain.repositories.service_repository import ServiceRepository
from ...domain.repositories.testimonial_repository import TestimonialRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db import (
    MongoAppointmentRepository,
    MongoBlogPostRepository,
    MongoInquiryRepository,
    MongoPortfolioRepository,
    MongoServiceRepository,
    MongoTestimonialRepository,
    MongoUserRepository,
)
from ...infrastructure.memory import (
    InMemoryAppointmentRepository,
    InMemoryBlogPostRepository,
    InMemoryInquiryRepository,
    InMemoryPortfolioRepository,
    InMemoryServiceRepository,
    InMemoryTestimonialRepository,
    InMemoryUserRepository,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer

REPOSITORY_INTERFACES = (
    UserRepository,
    ServiceRepository,
    PortfolioRepository,
    BlogPostRepository,
    InquiryRepository,
    AppointmentRepository,
    TestimonialRepository,
)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations for the configured backend.
        MongoDB repositories get their database from the database provider.
        """
        if container.has("mongo_client"):
            RepositoryProvider._register_mongo(container)
        else:
            RepositoryProvider._register_memory(container)

    @staticmethod
    def _register_memory(container: "BaseContainer") -> None:
        container.register_singleton(UserRepository, InMemoryUserRepository())
        container.register_singleton(ServiceRepository, InMemoryServiceRepository())
        container.register_singleton(PortfolioRepository, InMemoryPortfolioRepository())
        container.register_singleton(BlogPostRepository, InMemoryBlogPostRepository())
        container.register_singleton(InquiryRepository, InMemoryInquiryRepository())
        container.register_singleton(AppointmentRepository, InMemoryAppointmentRepository())
        container.register_singleton(TestimonialRepository, InMemoryTestimonialRepository())

    @staticmethod
    def _register_mongo(container: "BaseContainer") -> None:
        settings = get_settings()
        database = container.get("mongo_client").get_database()

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(database, settings.users_collection),
        )
        container.register_singleton(
            ServiceRepository,
            MongoServiceRepository(database, settings.services_collection),
        )
        container.register_singleton(
            PortfolioRepository,
            MongoPortfolioRepository(database, settings.portfolio_collection),
        )
        container.register_singleton(
            BlogPostRepository,
            MongoBlogPostRepository(database, settings.blog_posts_collection),
        )
        container.register_singleton(
            InquiryRepository,
            MongoInquiryRepository(database, settings.inquiries_collection),
        )
        container.register_singleton(
            AppointmentRepository,
            MongoAppointmentRepository(database, settings.appointments_collection),
        )
        container.register_singleton(
            TestimonialRepository,
            MongoTestimonialRepository(database, settings.testimonials_collection),
        )
