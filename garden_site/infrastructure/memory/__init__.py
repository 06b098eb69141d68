"""
In-Memory Infrastructure
========================

Dict-backed repositories for running without MongoDB.
"""
from .memory_repositories import (
    InMemoryUserRepository,
    InMemoryServiceRepository,
    InMemoryPortfolioRepository,
    InMemoryBlogPostRepository,
    InMemoryInquiryRepository,
    InMemoryAppointmentRepository,
    InMemoryTestimonialRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryServiceRepository",
    "InMemoryPortfolioRepository",
    "InMemoryBlogPostRepository",
    "InMemoryInquiryRepository",
    "InMemoryAppointmentRepository",
    "InMemoryTestimonialRepository",
]
