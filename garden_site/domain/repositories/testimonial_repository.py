"""
Testimonial Repository Interface
================================
"""
from garden_site.domain.models.testimonial import Testimonial
from garden_site.domain.repositories.base_repository import CrudRepository


class TestimonialRepository(CrudRepository[Testimonial]):
    """Testimonials. ``find_all`` returns ascending ``display_order``."""
