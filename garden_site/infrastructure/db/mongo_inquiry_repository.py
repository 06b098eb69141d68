"""
MongoDB Inquiry Repository
==========================
"""
from pymongo import DESCENDING

from garden_site.domain.constants.inquiry_fields import InquiryFields
from garden_site.domain.models.inquiry import Inquiry
from garden_site.domain.repositories.inquiry_repository import InquiryRepository
from garden_site.infrastructure.db.mongo_base_repository import MongoRepository


class MongoInquiryRepository(MongoRepository[Inquiry], InquiryRepository):
    """MongoDB implementation of InquiryRepository."""

    ENTITY_CLASS = Inquiry
    ENTITY_NAME = "inquiry"
    COLLECTION_NAME = "inquiries"
    FIELD_MAP = {
        "name": InquiryFields.NAME,
        "email": InquiryFields.EMAIL,
        "phone": InquiryFields.PHONE,
        "message": InquiryFields.MESSAGE,
        "service_id": InquiryFields.SERVICE_ID,
        "status": InquiryFields.STATUS,
        "created_at": InquiryFields.CREATED_AT,
        "updated_at": InquiryFields.UPDATED_AT,
    }
    FOREIGN_KEYS = ("service_id",)
    DEFAULT_SORT = (InquiryFields.CREATED_AT, DESCENDING)
