"""
Base Repository Interface
=========================

Abstract CRUD contract shared by every entity repository.
Implementations live in the infrastructure layer (in-memory and MongoDB).
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from garden_site.utils.identifiers import EntityId

EntityType = TypeVar("EntityType")


class CrudRepository(ABC, Generic[EntityType]):
    """
    Abstract repository for one entity kind.

    Identifiers may be given as int or str; an identifier the backend
    cannot parse behaves exactly like an unknown one. "Not found" is
    never an exception.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: EntityId) -> Optional[EntityType]:
        """
        Find an entity by its ID.

        Args:
            entity_id: Numeric or string identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[EntityType]:
        """
        Find all entities, in the entity's natural order if it has one.

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """
        Persist a new entity.

        Args:
            entity: Entity without an ID

        Returns:
            Persisted entity with its newly assigned ID

        Raises:
            ValueError: If a foreign-key identifier cannot be stored
        """
        pass

    @abstractmethod
    async def update(self, entity_id: EntityId, changes: Dict[str, Any]) -> Optional[EntityType]:
        """
        Merge ``changes`` onto an existing entity and stamp ``updated_at``.

        Attributes missing from ``changes`` keep their current values.

        Args:
            entity_id: Numeric or string identifier
            changes: Attribute name -> new value

        Returns:
            Updated entity, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: EntityId) -> bool:
        """
        Delete an entity.

        Returns:
            True if the entity existed and was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def list_ids(self) -> List[EntityId]:
        """
        Identifiers of every stored entity.

        Storage failures are raised, never reported as an empty list.

        Returns:
            List of identifiers
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entities."""
        pass

    async def ensure_indexes(self) -> None:
        """Create backend indexes. Backends without indexes do nothing."""
        return None
