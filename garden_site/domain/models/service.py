"""
Service Model
=============

A service offered by the business (e.g. "Lawn Care").
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId


@dataclass
class Service:
    """
    Service domain model.

    ``price`` is display text ("From $80/visit"), not a number.
    ``featured`` is persisted as ``isFeatured`` in MongoDB.
    """
    name: str
    description: str
    price: str
    short_desc: Optional[str] = None
    image_url: Optional[str] = None
    featured: bool = False
    id: Optional[EntityId] = None
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)
