"""
Repository Interfaces
=====================

Abstract, backend-agnostic storage contract, one repository per entity.
"""
from .base_repository import CrudRepository
from .user_repository import UserRepository
from .service_repository import ServiceRepository
from .portfolio_repository import PortfolioRepository
from .blog_post_repository import BlogPostRepository
from .inquiry_repository import InquiryRepository
from .appointment_repository import AppointmentRepository
from .testimonial_repository import TestimonialRepository

__all__ = [
    "CrudRepository",
    "UserRepository",
    "ServiceRepository",
    "PortfolioRepository",
    "BlogPostRepository",
    "InquiryRepository",
    "AppointmentRepository",
    "TestimonialRepository",
]
