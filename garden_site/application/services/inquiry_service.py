"""
Inquiry Service
===============

Application service for contact-form inquiries.
"""
import logging
from typing import Any, Dict, List, Optional

from garden_site.domain.models.inquiry import Inquiry
from garden_site.domain.repositories.inquiry_repository import InquiryRepository
from garden_site.utils.identifiers import EntityId

logger = logging.getLogger(__name__)


class InquiryService:
    """Application service for inquiry operations."""

    def __init__(self, inquiry_repository: InquiryRepository):
        self._repository = inquiry_repository

    async def list_inquiries(self) -> List[Inquiry]:
        return await self._repository.find_all()

    async def get_inquiry(self, inquiry_id: EntityId) -> Optional[Inquiry]:
        return await self._repository.find_by_id(inquiry_id)

    async def create_inquiry(self, values: Dict[str, Any]) -> Inquiry:
        """
        Record an inquiry.

        Args:
            values: Attribute name -> value; None values take model defaults

        Returns:
            Persisted inquiry
        """
        values = {key: value for key, value in values.items() if value is not None}
        inquiry = await self._repository.create(Inquiry(**values))
        logger.info("New inquiry %s from %s", inquiry.id, inquiry.email)
        return inquiry

    async def update_inquiry(
        self,
        inquiry_id: EntityId,
        changes: Dict[str, Any],
    ) -> Optional[Inquiry]:
        return await self._repository.update(inquiry_id, changes)

    async def delete_inquiry(self, inquiry_id: EntityId) -> bool:
        return await self._repository.delete(inquiry_id)
