from typing import TYPE_CHECKING

from ...domain.repositories.blog_post_repository import BlogPostRepository
from ...domain.repositories.testimonial_repository import TestimonialRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.blog_service import BlogService
from ...application.services.testimonial_service import TestimonialService
from ...application.services.user_service import UserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ContentProvider:
    """Content provider - registers blog, testimonial and user services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            BlogService,
            BlogService(
                blog_post_repository=container.get(BlogPostRepository),
                user_repository=container.get(UserRepository),
            )
        )
        container.register_singleton(
            TestimonialService,
            TestimonialService(testimonial_repository=container.get(TestimonialRepository))
        )
        container.register_singleton(
            UserService,
            UserService(user_repository=container.get(UserRepository))
        )
