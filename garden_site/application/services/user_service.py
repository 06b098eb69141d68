"""
User Service
============

Application service for back-office accounts.

Usernames and emails are unique. The in-memory store does not enforce
that, so the check happens here for both backends; MongoDB additionally
backs it with unique indexes.
"""
import logging
from typing import Any, Dict, List, Optional

from garden_site.core.security import hash_password, is_password_hash
from garden_site.domain.models.user import User
from garden_site.domain.repositories.user_repository import UserRepository
from garden_site.utils.identifiers import EntityId

logger = logging.getLogger(__name__)


def _hashed(password: str) -> str:
    return password if is_password_hash(password) else hash_password(password)


class UserService:
    """Application service for user operations."""

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    async def _ensure_unique(
        self,
        username: Optional[str],
        email: Optional[str],
        user_id: Optional[EntityId] = None,
    ) -> None:
        """
        Raises:
            ValueError: If another user already has the username or email
        """
        if username is not None:
            existing = await self._repository.find_by_username(username)
            if existing is not None and str(existing.id) != str(user_id):
                raise ValueError(f"Username '{username}' is already taken")
        if email is not None:
            existing = await self._repository.find_by_email(email)
            if existing is not None and str(existing.id) != str(user_id):
                raise ValueError(f"Email '{email}' is already registered")

    async def list_users(self) -> List[User]:
        return await self._repository.find_all()

    async def get_user(self, user_id: EntityId) -> Optional[User]:
        return await self._repository.find_by_id(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self._repository.find_by_username(username)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self._repository.find_by_email(email)

    async def create_user(self, values: Dict[str, Any]) -> User:
        """
        Create a user with a hashed password.

        Args:
            values: Attribute name -> value, ``password`` in plain text

        Returns:
            Persisted user

        Raises:
            ValueError: If the username or email is taken
        """
        await self._ensure_unique(values.get("username"), values.get("email"))
        values = dict(values, password=_hashed(values["password"]))
        user = await self._repository.create(User(**values))
        logger.info("Created %s user '%s'", user.role, user.username)
        return user

    async def update_user(
        self,
        user_id: EntityId,
        changes: Dict[str, Any],
    ) -> Optional[User]:
        """
        Update a user. A supplied password is hashed before storage.

        Raises:
            ValueError: If the new username or email is taken
        """
        await self._ensure_unique(changes.get("username"), changes.get("email"), user_id)
        if changes.get("password"):
            changes = dict(changes, password=_hashed(changes["password"]))
        else:
            changes = {key: value for key, value in changes.items() if key != "password"}
        return await self._repository.update(user_id, changes)

    async def delete_user(self, user_id: EntityId) -> bool:
        return await self._repository.delete(user_id)
