"""
MongoDB Infrastructure
======================

Connection manager and MongoDB repository implementations.
"""
from .mongo_connection import MongoClientManager, get_mongo_client
from .mongo_user_repository import MongoUserRepository
from .mongo_service_repository import MongoServiceRepository
from .mongo_portfolio_repository import MongoPortfolioRepository
from .mongo_blog_post_repository import MongoBlogPostRepository
from .mongo_inquiry_repository import MongoInquiryRepository
from .mongo_appointment_repository import MongoAppointmentRepository
from .mongo_testimonial_repository import MongoTestimonialRepository

__all__ = [
    "MongoClientManager",
    "get_mongo_client",
    "MongoUserRepository",
    "MongoServiceRepository",
    "MongoPortfolioRepository",
    "MongoBlogPostRepository",
    "MongoInquiryRepository",
    "MongoAppointmentRepository",
    "MongoTestimonialRepository",
]
