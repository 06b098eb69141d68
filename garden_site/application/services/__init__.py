"""Application services"""
from .catalog_service import CatalogService
from .portfolio_service import PortfolioService
from .blog_service import BlogService
from .inquiry_service import InquiryService
from .appointment_service import AppointmentService
from .testimonial_service import TestimonialService
from .user_service import UserService
from .system_service import SystemService

__all__ = [
    "CatalogService",
    "PortfolioService",
    "BlogService",
    "InquiryService",
    "AppointmentService",
    "TestimonialService",
    "UserService",
    "SystemService",
]
