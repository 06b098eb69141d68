"""
User Repository Interface
=========================
"""
from abc import abstractmethod
from typing import Optional

from garden_site.domain.models.user import User
from garden_site.domain.repositories.base_repository import CrudRepository


class UserRepository(CrudRepository[User]):
    """Abstract repository interface for user operations."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        pass

    @abstractmethod
    async def find_first_admin(self) -> Optional[User]:
        """Find any user with the admin role."""
        pass
