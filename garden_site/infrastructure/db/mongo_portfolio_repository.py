"""
MongoDB Portfolio Repository
============================

Portfolio items reference their service by ObjectId. Embedded
sub-records (image pairs, client testimonial, SEO) are stored with
camelCase keys.
"""
import logging
from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from garden_site.domain.constants.portfolio_fields import (
    ClientTestimonialFields,
    ImagePairFields,
    PortfolioFields,
    SeoFields,
)
from garden_site.domain.models.portfolio_item import (
    ClientTestimonial,
    ImagePair,
    PortfolioItem,
    SeoMetadata,
)
from garden_site.domain.repositories.portfolio_repository import PortfolioRepository
from garden_site.infrastructure.db.mongo_base_repository import MONGO_ID, MongoRepository
from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId, to_object_id

logger = logging.getLogger(__name__)


def _image_pair_to_document(pair: ImagePair) -> Dict[str, Any]:
    return {
        ImagePairFields.BEFORE: pair.before,
        ImagePairFields.AFTER: pair.after,
        ImagePairFields.CAPTION: pair.caption,
        ImagePairFields.RICH_DESCRIPTION: pair.rich_description,
        ImagePairFields.ORDER: pair.order,
    }


def _image_pair_from_document(doc: Dict[str, Any]) -> ImagePair:
    return ImagePair(
        before=doc.get(ImagePairFields.BEFORE, ""),
        after=doc.get(ImagePairFields.AFTER, ""),
        caption=doc.get(ImagePairFields.CAPTION),
        rich_description=doc.get(ImagePairFields.RICH_DESCRIPTION),
        order=doc.get(ImagePairFields.ORDER, 0),
    )


class MongoPortfolioRepository(MongoRepository[PortfolioItem], PortfolioRepository):
    """MongoDB implementation of PortfolioRepository."""

    ENTITY_CLASS = PortfolioItem
    ENTITY_NAME = "portfolio item"
    COLLECTION_NAME = "portfolioitems"
    FIELD_MAP = {
        "title": PortfolioFields.TITLE,
        "description": PortfolioFields.DESCRIPTION,
        "image_url": PortfolioFields.IMAGE_URL,
        "images": PortfolioFields.IMAGES,
        "service_id": PortfolioFields.SERVICE_ID,
        "date": PortfolioFields.DATE,
        "location": PortfolioFields.LOCATION,
        "duration": PortfolioFields.DURATION,
        "difficulty": PortfolioFields.DIFFICULTY,
        "client_testimonial": PortfolioFields.CLIENT_TESTIMONIAL,
        "seo": PortfolioFields.SEO,
        "featured": PortfolioFields.FEATURED,
        "status": PortfolioFields.STATUS,
        "view_count": PortfolioFields.VIEW_COUNT,
        "created_at": PortfolioFields.CREATED_AT,
        "updated_at": PortfolioFields.UPDATED_AT,
    }
    FOREIGN_KEYS = ("service_id",)

    def _write_value(self, attr: str, value: Any) -> Any:
        if value is None:
            return super()._write_value(attr, value)
        if attr == "images":
            return [_image_pair_to_document(pair) for pair in value]
        if attr == "client_testimonial":
            return {
                ClientTestimonialFields.CLIENT_NAME: value.client_name,
                ClientTestimonialFields.COMMENT: value.comment,
                ClientTestimonialFields.DISPLAY_PERMISSION: value.display_permission,
            }
        if attr == "seo":
            return {
                SeoFields.META_TITLE: value.meta_title,
                SeoFields.META_DESCRIPTION: value.meta_description,
                SeoFields.TAGS: list(value.tags),
            }
        return super()._write_value(attr, value)

    def _read_value(self, attr: str, value: Any) -> Any:
        if value is None:
            return super()._read_value(attr, value)
        if attr == "images":
            return [_image_pair_from_document(pair) for pair in value]
        if attr == "client_testimonial":
            return ClientTestimonial(
                client_name=value.get(ClientTestimonialFields.CLIENT_NAME),
                comment=value.get(ClientTestimonialFields.COMMENT),
                display_permission=value.get(ClientTestimonialFields.DISPLAY_PERMISSION, False),
            )
        if attr == "seo":
            return SeoMetadata(
                meta_title=value.get(SeoFields.META_TITLE),
                meta_description=value.get(SeoFields.META_DESCRIPTION),
                tags=list(value.get(SeoFields.TAGS) or []),
            )
        return super()._read_value(attr, value)

    async def find_by_service(self, service_id: EntityId) -> List[PortfolioItem]:
        object_id = to_object_id(service_id)
        if object_id is None:
            logger.warning("Malformed service id %r in portfolio lookup", service_id)
            return []
        return await self._find_many(
            {PortfolioFields.SERVICE_ID: object_id},
            f"list portfolio items for service {service_id}",
        )

    async def delete_by_service(self, service_id: EntityId) -> int:
        object_id = to_object_id(service_id)
        if object_id is None:
            return 0
        try:
            result = await self._collection.delete_many({PortfolioFields.SERVICE_ID: object_id})
        except PyMongoError as e:
            logger.error("Error deleting portfolio items for service %s: %s", service_id, e)
            return 0
        return result.deleted_count

    async def increment_view_count(self, item_id: EntityId) -> Optional[PortfolioItem]:
        object_id = self._parse_id(item_id, "view count increment")
        if object_id is None:
            return None
        try:
            doc = await self._collection.find_one_and_update(
                {MONGO_ID: object_id},
                {
                    "$inc": {PortfolioFields.VIEW_COUNT: 1},
                    "$set": {PortfolioFields.UPDATED_AT: now()},
                },
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Error incrementing view count of portfolio item %s: %s", item_id, e)
            return None
        return self._to_entity(doc) if doc else None
