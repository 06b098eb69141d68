"""
MongoDB Base Repository
=======================

Generic MongoDB implementation of CrudRepository.

Handles the three translations the in-memory store does not need:
identifiers (int/str <-> ObjectId), field names (application attribute
<-> persisted document key) and foreign keys (stored as ObjectId, read
back as plain strings).

Read paths never raise: malformed identifiers and driver errors are
logged and reported as "not found" / empty results. ``list_ids`` is the
exception; it feeds deletions and lets driver errors propagate.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Type

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from garden_site.domain.repositories.base_repository import CrudRepository, EntityType
from garden_site.utils.datetime_utils import ensure_aware, now
from garden_site.utils.identifiers import EntityId, object_id_to_str, to_object_id

logger = logging.getLogger(__name__)

MONGO_ID = "_id"


class MongoRepository(CrudRepository[EntityType]):
    """
    MongoDB implementation of CrudRepository.

    Subclasses declare the entity class, the collection, the attribute to
    document-field map and which attributes are foreign keys.
    """

    ENTITY_CLASS: Type[EntityType]
    ENTITY_NAME: str = "document"
    COLLECTION_NAME: str = ""
    # Application attribute -> persisted document field
    FIELD_MAP: Dict[str, str] = {}
    FOREIGN_KEYS: Tuple[str, ...] = ()
    DEFAULT_SORT: Optional[Tuple[str, int]] = None

    def __init__(self, database, collection_name: Optional[str] = None):
        """
        Initialize repository with a MongoDB database handle.

        Args:
            database: AsyncDatabase (anything supporting ``database[name]``)
            collection_name: Overrides COLLECTION_NAME
        """
        self._collection = database[collection_name or self.COLLECTION_NAME]

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def _parse_id(self, entity_id: EntityId, operation: str) -> Optional[ObjectId]:
        object_id = to_object_id(entity_id)
        if object_id is None:
            logger.warning(
                "Malformed %s id %r during %s, treating as not found",
                self.ENTITY_NAME, entity_id, operation,
            )
        return object_id

    def _to_foreign_key(self, attr: str, value: Any) -> Optional[ObjectId]:
        if value is None:
            return None
        object_id = to_object_id(value)
        if object_id is None:
            raise ValueError(f"Invalid {attr} '{value}'")
        return object_id

    def _write_value(self, attr: str, value: Any) -> Any:
        """Application value -> stored value."""
        if attr in self.FOREIGN_KEYS:
            return self._to_foreign_key(attr, value)
        return value

    def _read_value(self, attr: str, value: Any) -> Any:
        """Stored value -> application value."""
        if attr in self.FOREIGN_KEYS:
            return object_id_to_str(value)
        if isinstance(value, datetime):
            return ensure_aware(value)
        return value

    def _to_document(self, entity: EntityType) -> Dict[str, Any]:
        """Convert entity to MongoDB document."""
        return {
            field: self._write_value(attr, getattr(entity, attr))
            for attr, field in self.FIELD_MAP.items()
        }

    def _to_changes(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Convert a partial attribute dict to a ``$set`` payload."""
        return {
            self.FIELD_MAP[attr]: self._write_value(attr, value)
            for attr, value in changes.items()
            if attr in self.FIELD_MAP
        }

    def _to_entity(self, doc: Dict[str, Any]) -> EntityType:
        """Convert MongoDB document to entity. Absent fields take model defaults."""
        values = {
            attr: self._read_value(attr, doc[field])
            for attr, field in self.FIELD_MAP.items()
            if field in doc
        }
        return self.ENTITY_CLASS(id=object_id_to_str(doc[MONGO_ID]), **values)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def _find_many(self, query: Dict[str, Any], operation: str) -> List[EntityType]:
        try:
            cursor = self._collection.find(query)
            if self.DEFAULT_SORT:
                cursor = cursor.sort(*self.DEFAULT_SORT)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("Error during %s on %s: %s", operation, self.COLLECTION_NAME, e)
            return []
        return [self._to_entity(doc) for doc in docs]

    async def _find_one(self, query: Dict[str, Any], operation: str) -> Optional[EntityType]:
        try:
            doc = await self._collection.find_one(query)
        except PyMongoError as e:
            logger.error("Error during %s on %s: %s", operation, self.COLLECTION_NAME, e)
            return None
        return self._to_entity(doc) if doc else None

    async def find_by_id(self, entity_id: EntityId) -> Optional[EntityType]:
        """Find an entity by its ID."""
        object_id = self._parse_id(entity_id, "fetch")
        if object_id is None:
            return None

        entity = await self._find_one({MONGO_ID: object_id}, f"fetch of {self.ENTITY_NAME} {entity_id}")
        if entity is None:
            logger.debug("%s with id %s not found", self.ENTITY_NAME, entity_id)
        return entity

    async def find_all(self) -> List[EntityType]:
        """Find all entities in their natural order."""
        return await self._find_many({}, f"list {self.ENTITY_NAME}")

    async def create(self, entity: EntityType) -> EntityType:
        """Insert a new document."""
        doc = self._to_document(entity)
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise ValueError(f"Duplicate {self.ENTITY_NAME}") from e
        except PyMongoError as e:
            logger.error("Error creating %s: %s", self.ENTITY_NAME, e)
            raise

        doc[MONGO_ID] = result.inserted_id
        return self._to_entity(doc)

    async def update(self, entity_id: EntityId, changes: Dict[str, Any]) -> Optional[EntityType]:
        """Merge ``changes`` and stamp the server-side update time."""
        object_id = self._parse_id(entity_id, "update")
        if object_id is None:
            return None

        payload = self._to_changes(changes)
        payload[self.FIELD_MAP["updated_at"]] = now()
        try:
            doc = await self._collection.find_one_and_update(
                {MONGO_ID: object_id},
                {"$set": payload},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Error updating %s with id %s: %s", self.ENTITY_NAME, entity_id, e)
            return None
        return self._to_entity(doc) if doc else None

    async def delete(self, entity_id: EntityId) -> bool:
        """Delete a document by ID."""
        object_id = self._parse_id(entity_id, "delete")
        if object_id is None:
            return False

        try:
            doc = await self._collection.find_one_and_delete({MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error("Error deleting %s with id %s: %s", self.ENTITY_NAME, entity_id, e)
            return False
        return doc is not None

    async def list_ids(self) -> List[EntityId]:
        """IDs of every document. Driver errors propagate."""
        docs = await self._collection.find({}, {MONGO_ID: 1}).to_list(length=None)
        return [object_id_to_str(doc[MONGO_ID]) for doc in docs]

    async def count(self) -> int:
        """Number of documents in the collection."""
        return await self._collection.count_documents({})
