"""
Domain Models
=============

Pure dataclasses describing the seven entity kinds. No persistence
concerns live here.
"""
from .user import User
from .service import Service
from .portfolio_item import PortfolioItem, ImagePair, ClientTestimonial, SeoMetadata
from .blog_post import BlogPost
from .inquiry import Inquiry
from .appointment import Appointment
from .testimonial import Testimonial

__all__ = [
    "User",
    "Service",
    "PortfolioItem",
    "ImagePair",
    "ClientTestimonial",
    "SeoMetadata",
    "BlogPost",
    "Inquiry",
    "Appointment",
    "Testimonial",
]
