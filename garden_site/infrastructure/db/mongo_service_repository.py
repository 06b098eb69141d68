"""
MongoDB Service Repository
==========================

The application-level ``featured`` flag is persisted as ``isFeatured``.
"""
from typing import List

from garden_site.domain.constants.service_fields import ServiceFields
from garden_site.domain.models.service import Service
from garden_site.domain.repositories.service_repository import ServiceRepository
from garden_site.infrastructure.db.mongo_base_repository import MongoRepository


class MongoServiceRepository(MongoRepository[Service], ServiceRepository):
    """MongoDB implementation of ServiceRepository."""

    ENTITY_CLASS = Service
    ENTITY_NAME = "service"
    COLLECTION_NAME = "services"
    FIELD_MAP = {
        "name": ServiceFields.NAME,
        "description": ServiceFields.DESCRIPTION,
        "short_desc": ServiceFields.SHORT_DESC,
        "price": ServiceFields.PRICE,
        "image_url": ServiceFields.IMAGE_URL,
        "featured": ServiceFields.FEATURED,
        "created_at": ServiceFields.CREATED_AT,
        "updated_at": ServiceFields.UPDATED_AT,
    }

    def _read_value(self, attr, value):
        # Prices were stored as numbers by earlier versions of the site
        if attr == "price" and isinstance(value, (int, float)):
            return str(value)
        return super()._read_value(attr, value)

    async def find_featured(self) -> List[Service]:
        return await self._find_many({ServiceFields.FEATURED: True}, "list featured services")
