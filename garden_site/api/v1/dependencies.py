"""
Dependency Container
====================

FastAPI dependency functions resolving application services from the
DI container.
"""
from garden_site.application.services.appointment_service import AppointmentService
from garden_site.application.services.blog_service import BlogService
from garden_site.application.services.catalog_service import CatalogService
from garden_site.application.services.inquiry_service import InquiryService
from garden_site.application.services.portfolio_service import PortfolioService
from garden_site.application.services.system_service import SystemService
from garden_site.application.services.testimonial_service import TestimonialService
from garden_site.application.services.user_service import UserService
from garden_site.di.container import get_container


def get_catalog_service() -> CatalogService:
    """
    Get catalog service instance (singleton).

    Returns:
        CatalogService instance
    """
    return get_container().get(CatalogService)


def get_portfolio_service() -> PortfolioService:
    return get_container().get(PortfolioService)


def get_blog_service() -> BlogService:
    return get_container().get(BlogService)


def get_inquiry_service() -> InquiryService:
    return get_container().get(InquiryService)


def get_appointment_service() -> AppointmentService:
    return get_container().get(AppointmentService)


def get_testimonial_service() -> TestimonialService:
    return get_container().get(TestimonialService)


def get_user_service() -> UserService:
    return get_container().get(UserService)


def get_system_service() -> SystemService:
    return get_container().get(SystemService)
