"""
Blog Service
============

Application service for blog posts.
"""
import logging
from typing import Any, Dict, List, Optional

from garden_site.domain.constants.choices import PLACEHOLDER_OBJECT_ID
from garden_site.domain.models.blog_post import BlogPost
from garden_site.domain.repositories.blog_post_repository import BlogPostRepository
from garden_site.domain.repositories.user_repository import UserRepository
from garden_site.utils.identifiers import EntityId

logger = logging.getLogger(__name__)


def _missing_author(author_id: Optional[EntityId]) -> bool:
    return author_id in (None, "", PLACEHOLDER_OBJECT_ID)


class BlogService:
    """
    Application service for blog operations.

    Posts written without an author are attributed to the first admin.
    """

    def __init__(
        self,
        blog_post_repository: BlogPostRepository,
        user_repository: UserRepository,
    ):
        self._repository = blog_post_repository
        self._users = user_repository

    async def _default_author_id(self) -> Optional[EntityId]:
        admin = await self._users.find_first_admin()
        if admin is None:
            logger.warning("No admin user found to attribute blog post to")
            return None
        return admin.id

    async def list_posts(self) -> List[BlogPost]:
        return await self._repository.find_all()

    async def get_post(self, post_id: EntityId) -> Optional[BlogPost]:
        return await self._repository.find_by_id(post_id)

    async def create_post(self, values: Dict[str, Any]) -> BlogPost:
        """
        Create a blog post.

        Args:
            values: Attribute name -> value. ``published_at`` defaults to now.

        Returns:
            Persisted blog post
        """
        values = {key: value for key, value in values.items() if value is not None}
        if _missing_author(values.get("author_id")):
            values["author_id"] = await self._default_author_id()
        return await self._repository.create(BlogPost(**values))

    async def update_post(
        self,
        post_id: EntityId,
        changes: Dict[str, Any],
    ) -> Optional[BlogPost]:
        if "author_id" in changes and _missing_author(changes["author_id"]):
            changes = dict(changes, author_id=await self._default_author_id())
        return await self._repository.update(post_id, changes)

    async def delete_post(self, post_id: EntityId) -> bool:
        return await self._repository.delete(post_id)
