"""
MongoDB User Repository
=======================
"""
from typing import Optional

from pymongo import ASCENDING

from garden_site.domain.constants.user_fields import UserFields
from garden_site.domain.models.user import User
from garden_site.domain.repositories.user_repository import UserRepository
from garden_site.infrastructure.db.mongo_base_repository import MongoRepository


class MongoUserRepository(MongoRepository[User], UserRepository):
    """MongoDB implementation of UserRepository."""

    ENTITY_CLASS = User
    ENTITY_NAME = "user"
    COLLECTION_NAME = "users"
    FIELD_MAP = {
        "username": UserFields.USERNAME,
        "email": UserFields.EMAIL,
        "password": UserFields.PASSWORD,
        "name": UserFields.NAME,
        "role": UserFields.ROLE,
        "created_at": UserFields.CREATED_AT,
        "updated_at": UserFields.UPDATED_AT,
    }

    async def find_by_username(self, username: str) -> Optional[User]:
        return await self._find_one({UserFields.USERNAME: username}, f"fetch of user {username}")

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_one({UserFields.EMAIL: email}, f"fetch of user {email}")

    async def find_first_admin(self) -> Optional[User]:
        return await self._find_one({UserFields.ROLE: "admin"}, "fetch of admin user")

    async def ensure_indexes(self) -> None:
        """Usernames and emails are unique."""
        await self._collection.create_index([(UserFields.USERNAME, ASCENDING)], unique=True)
        await self._collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
