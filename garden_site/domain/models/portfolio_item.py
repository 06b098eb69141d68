"""
Portfolio Item Model
====================

A completed project shown in the portfolio, optionally linked to the
service it showcases. Before/after image pairs, the client's testimonial
and SEO metadata are embedded sub-records, not separate entities.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId


@dataclass
class ImagePair:
    """Before/after photo pair."""
    before: str
    after: str
    caption: Optional[str] = None
    rich_description: Optional[str] = None
    order: int = 0


@dataclass
class ClientTestimonial:
    """Quote from the client of a specific project."""
    client_name: Optional[str] = None
    comment: Optional[str] = None
    display_permission: bool = False


@dataclass
class SeoMetadata:
    """Search engine metadata for the project page."""
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass
class PortfolioItem:
    """
    Portfolio item domain model.

    ``view_count`` is incremented each time the public detail page is read.
    """
    title: str
    description: str
    image_url: Optional[str] = None
    images: List[ImagePair] = field(default_factory=list)
    service_id: Optional[EntityId] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    difficulty: Optional[str] = None  # "Easy" | "Moderate" | "Complex"
    client_testimonial: Optional[ClientTestimonial] = None
    seo: Optional[SeoMetadata] = None
    featured: bool = False
    status: str = "Draft"  # "Published" | "Draft"
    view_count: int = 0
    id: Optional[EntityId] = None
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)

    def is_published(self) -> bool:
        """Check if the item is visible on the public site."""
        return self.status == "Published"


def build_sub_records(values: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn nested plain dicts (as produced by ``model_dump``) into the
    sub-record dataclasses. Keys that are absent stay absent.
    """
    result = dict(values)
    if result.get("images") is not None:
        result["images"] = [
            pair if isinstance(pair, ImagePair) else ImagePair(**pair)
            for pair in result["images"]
        ]
    if isinstance(result.get("client_testimonial"), dict):
        result["client_testimonial"] = ClientTestimonial(**result["client_testimonial"])
    if isinstance(result.get("seo"), dict):
        result["seo"] = SeoMetadata(**result["seo"])
    return result
