"""
Inquiry Repository Interface
============================
"""
from garden_site.domain.models.inquiry import Inquiry
from garden_site.domain.repositories.base_repository import CrudRepository


class InquiryRepository(CrudRepository[Inquiry]):
    """Inquiries. ``find_all`` returns newest ``created_at`` first."""
