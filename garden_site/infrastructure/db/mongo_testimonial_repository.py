"""
MongoDB Testimonial Repository
==============================
"""
from pymongo import ASCENDING

from garden_site.domain.constants.testimonial_fields import TestimonialFields
from garden_site.domain.models.testimonial import Testimonial
from garden_site.domain.repositories.testimonial_repository import TestimonialRepository
from garden_site.infrastructure.db.mongo_base_repository import MongoRepository


class MongoTestimonialRepository(MongoRepository[Testimonial], TestimonialRepository):
    """MongoDB implementation of TestimonialRepository."""

    ENTITY_CLASS = Testimonial
    ENTITY_NAME = "testimonial"
    COLLECTION_NAME = "testimonials"
    FIELD_MAP = {
        "name": TestimonialFields.NAME,
        "role": TestimonialFields.ROLE,
        "content": TestimonialFields.CONTENT,
        "rating": TestimonialFields.RATING,
        "image_url": TestimonialFields.IMAGE_URL,
        "display_order": TestimonialFields.DISPLAY_ORDER,
        "created_at": TestimonialFields.CREATED_AT,
        "updated_at": TestimonialFields.UPDATED_AT,
    }
    DEFAULT_SORT = (TestimonialFields.DISPLAY_ORDER, ASCENDING)
