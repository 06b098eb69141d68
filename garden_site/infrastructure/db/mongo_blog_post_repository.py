"""
MongoDB Blog Post Repository
============================
"""
from pymongo import DESCENDING

from garden_site.domain.constants.blog_post_fields import BlogPostFields
from garden_site.domain.models.blog_post import BlogPost
from garden_site.domain.repositories.blog_post_repository import BlogPostRepository
from garden_site.infrastructure.db.mongo_base_repository import MongoRepository


class MongoBlogPostRepository(MongoRepository[BlogPost], BlogPostRepository):
    """MongoDB implementation of BlogPostRepository."""

    ENTITY_CLASS = BlogPost
    ENTITY_NAME = "blog post"
    COLLECTION_NAME = "blogposts"
    FIELD_MAP = {
        "title": BlogPostFields.TITLE,
        "content": BlogPostFields.CONTENT,
        "excerpt": BlogPostFields.EXCERPT,
        "image_url": BlogPostFields.IMAGE_URL,
        "author_id": BlogPostFields.AUTHOR_ID,
        "published_at": BlogPostFields.PUBLISHED_AT,
        "created_at": BlogPostFields.CREATED_AT,
        "updated_at": BlogPostFields.UPDATED_AT,
    }
    FOREIGN_KEYS = ("author_id",)
    DEFAULT_SORT = (BlogPostFields.PUBLISHED_AT, DESCENDING)
