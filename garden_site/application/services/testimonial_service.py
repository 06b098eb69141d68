"""
Testimonial Service
===================
"""
from typing import Any, Dict, List, Optional

from garden_site.domain.models.testimonial import Testimonial
from garden_site.domain.repositories.testimonial_repository import TestimonialRepository
from garden_site.utils.identifiers import EntityId


class TestimonialService:
    """Application service for testimonial operations."""

    def __init__(self, testimonial_repository: TestimonialRepository):
        self._repository = testimonial_repository

    async def list_testimonials(self) -> List[Testimonial]:
        return await self._repository.find_all()

    async def get_testimonial(self, testimonial_id: EntityId) -> Optional[Testimonial]:
        return await self._repository.find_by_id(testimonial_id)

    async def create_testimonial(self, values: Dict[str, Any]) -> Testimonial:
        values = {key: value for key, value in values.items() if value is not None}
        return await self._repository.create(Testimonial(**values))

    async def update_testimonial(
        self,
        testimonial_id: EntityId,
        changes: Dict[str, Any],
    ) -> Optional[Testimonial]:
        return await self._repository.update(testimonial_id, changes)

    async def delete_testimonial(self, testimonial_id: EntityId) -> bool:
        return await self._repository.delete(testimonial_id)
