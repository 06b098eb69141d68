"""
Inquiry Model
=============

A message left through the public contact form.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId


@dataclass
class Inquiry:
    """Inquiry domain model."""
    name: str
    email: str
    message: str
    phone: Optional[str] = None
    service_id: Optional[EntityId] = None
    status: str = "new"  # "new" | "in-progress" | "resolved" | "archived"
    id: Optional[EntityId] = None
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)
