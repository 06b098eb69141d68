"""
Blog Post Model
===============
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId


@dataclass
class BlogPost:
    """Blog post domain model. Listed newest ``published_at`` first."""
    title: str
    content: str
    excerpt: str
    image_url: Optional[str] = None
    author_id: Optional[EntityId] = None
    published_at: datetime = field(default_factory=now)
    id: Optional[EntityId] = None
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)
