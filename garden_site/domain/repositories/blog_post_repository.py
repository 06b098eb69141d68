"""
Blog Post Repository Interface
==============================
"""
from garden_site.domain.models.blog_post import BlogPost
from garden_site.domain.repositories.base_repository import CrudRepository


class BlogPostRepository(CrudRepository[BlogPost]):
    """Blog posts. ``find_all`` returns newest ``published_at`` first."""
