"""
Testimonial Model
=================
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId


@dataclass
class Testimonial:
    """Customer testimonial shown on the public site, ordered by ``display_order``."""
    name: str
    content: str
    role: Optional[str] = None
    rating: Optional[int] = None  # 1..5
    image_url: Optional[str] = None
    display_order: int = 0
    id: Optional[EntityId] = None
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)
