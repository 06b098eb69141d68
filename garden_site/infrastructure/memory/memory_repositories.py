"""
In-Memory Repositories
======================

Concrete in-memory repositories, one per entity kind.
"""
from copy import deepcopy
from datetime import datetime, timezone
from typing import List, Optional

from garden_site.domain.models.appointment import Appointment
from garden_site.domain.models.blog_post import BlogPost
from garden_site.domain.models.inquiry import Inquiry
from garden_site.domain.models.portfolio_item import PortfolioItem
from garden_site.domain.models.service import Service
from garden_site.domain.models.testimonial import Testimonial
from garden_site.domain.models.user import User
from garden_site.domain.repositories.appointment_repository import AppointmentRepository
from garden_site.domain.repositories.blog_post_repository import BlogPostRepository
from garden_site.domain.repositories.inquiry_repository import InquiryRepository
from garden_site.domain.repositories.portfolio_repository import PortfolioRepository
from garden_site.domain.repositories.service_repository import ServiceRepository
from garden_site.domain.repositories.testimonial_repository import TestimonialRepository
from garden_site.domain.repositories.user_repository import UserRepository
from garden_site.infrastructure.memory.memory_base_repository import InMemoryRepository
from garden_site.utils.datetime_utils import ensure_aware, now
from garden_site.utils.identifiers import EntityId, to_int_id

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _sort_key(value: Optional[datetime]) -> datetime:
    return ensure_aware(value) or _EPOCH


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    """In-memory users. Uniqueness of username/email is not enforced here."""

    async def find_by_username(self, username: str) -> Optional[User]:
        return next((deepcopy(u) for u in self._items.values() if u.username == username), None)

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((deepcopy(u) for u in self._items.values() if u.email == email), None)

    async def find_first_admin(self) -> Optional[User]:
        return next((deepcopy(u) for u in self._items.values() if u.is_admin()), None)


class InMemoryServiceRepository(InMemoryRepository[Service], ServiceRepository):

    async def find_featured(self) -> List[Service]:
        return [deepcopy(s) for s in self._items.values() if s.featured]


class InMemoryPortfolioRepository(InMemoryRepository[PortfolioItem], PortfolioRepository):
    FOREIGN_KEYS = ("service_id",)

    async def find_by_service(self, service_id: EntityId) -> List[PortfolioItem]:
        key = to_int_id(service_id)
        if key is None:
            return []
        return [deepcopy(item) for item in self._items.values() if item.service_id == key]

    async def delete_by_service(self, service_id: EntityId) -> int:
        key = to_int_id(service_id)
        if key is None:
            return 0
        doomed = [item_id for item_id, item in self._items.items() if item.service_id == key]
        for item_id in doomed:
            del self._items[item_id]
        return len(doomed)

    async def increment_view_count(self, item_id: EntityId) -> Optional[PortfolioItem]:
        item = self._get(item_id)
        if item is None:
            return None
        item.view_count += 1
        item.updated_at = now()
        return deepcopy(item)


class InMemoryBlogPostRepository(InMemoryRepository[BlogPost], BlogPostRepository):
    FOREIGN_KEYS = ("author_id",)

    def _sort(self, items: List[BlogPost]) -> List[BlogPost]:
        return sorted(items, key=lambda post: _sort_key(post.published_at), reverse=True)


class InMemoryInquiryRepository(InMemoryRepository[Inquiry], InquiryRepository):
    FOREIGN_KEYS = ("service_id",)

    def _sort(self, items: List[Inquiry]) -> List[Inquiry]:
        return sorted(items, key=lambda inquiry: _sort_key(inquiry.created_at), reverse=True)


class InMemoryAppointmentRepository(InMemoryRepository[Appointment], AppointmentRepository):
    FOREIGN_KEYS = ("service_id",)

    def _sort(self, items: List[Appointment]) -> List[Appointment]:
        return sorted(items, key=lambda appointment: _sort_key(appointment.date))


class InMemoryTestimonialRepository(InMemoryRepository[Testimonial], TestimonialRepository):

    def _sort(self, items: List[Testimonial]) -> List[Testimonial]:
        return sorted(items, key=lambda testimonial: testimonial.display_order or 0)
