"""
In-Memory Base Repository
=========================

Dict-backed implementation of CrudRepository used when no MongoDB
connection is configured (local development, demos and tests).
"""
from copy import deepcopy
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from garden_site.domain.repositories.base_repository import CrudRepository, EntityType
from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId, to_int_id


class InMemoryRepository(CrudRepository[EntityType]):
    """
    In-memory implementation of CrudRepository.

    Each repository owns its own map and its own ID counter starting at 1.
    Not safe for concurrent mutation; it is a single-process fixture.
    """

    # Attributes holding identifiers of other entities
    FOREIGN_KEYS: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._items: Dict[int, EntityType] = {}
        self._next_id = 1

    def _sort(self, items: List[EntityType]) -> List[EntityType]:
        """Natural order of the entity; insertion order by default."""
        return items

    def _coerce_foreign_keys(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Store foreign keys as ints so lookups by "3" and 3 agree."""
        for attr in self.FOREIGN_KEYS:
            value = values.get(attr)
            if value is None:
                continue
            key = to_int_id(value)
            if key is None:
                raise ValueError(f"Invalid {attr} '{value}'")
            values[attr] = key
        return values

    def _get(self, entity_id: EntityId) -> Optional[EntityType]:
        key = to_int_id(entity_id)
        if key is None:
            return None
        return self._items.get(key)

    async def find_by_id(self, entity_id: EntityId) -> Optional[EntityType]:
        """Find an entity by its ID."""
        item = self._get(entity_id)
        return deepcopy(item) if item is not None else None

    async def find_all(self) -> List[EntityType]:
        """Find all entities."""
        return self._sort([deepcopy(item) for item in self._items.values()])

    async def create(self, entity: EntityType) -> EntityType:
        """Assign the next ID and store the entity."""
        foreign_keys = self._coerce_foreign_keys(
            {attr: getattr(entity, attr) for attr in self.FOREIGN_KEYS}
        )
        stored = replace(deepcopy(entity), id=self._next_id, **foreign_keys)
        self._next_id += 1
        self._items[stored.id] = stored
        return deepcopy(stored)

    async def update(self, entity_id: EntityId, changes: Dict[str, Any]) -> Optional[EntityType]:
        """Shallow-merge ``changes`` onto the stored entity."""
        existing = self._get(entity_id)
        if existing is None:
            return None

        changes = self._coerce_foreign_keys(
            {attr: value for attr, value in changes.items() if attr != "id"}
        )
        changes["updated_at"] = now()
        updated = replace(existing, **deepcopy(changes))
        self._items[existing.id] = updated
        return deepcopy(updated)

    async def delete(self, entity_id: EntityId) -> bool:
        """Remove an entity; False if it did not exist."""
        key = to_int_id(entity_id)
        if key is None:
            return False
        return self._items.pop(key, None) is not None

    async def list_ids(self) -> List[EntityId]:
        return list(self._items)

    async def count(self) -> int:
        """Number of stored entities."""
        return len(self._items)
