"""
Portfolio DTO
=============

Pydantic models for portfolio item requests and responses, including
the embedded image pair, client testimonial and SEO sub-records.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from garden_site.application.dto.base_dto import ApiModel, IdType, reject_null

Difficulty = Literal["Easy", "Moderate", "Complex"]
PortfolioStatus = Literal["Published", "Draft"]


class ImagePairDto(ApiModel):
    """Before/after photo pair."""
    before: str = Field(..., min_length=1)
    after: str = Field(..., min_length=1)
    caption: Optional[str] = None
    rich_description: Optional[str] = None
    order: int = 0


class ClientTestimonialDto(ApiModel):
    client_name: Optional[str] = None
    comment: Optional[str] = None
    display_permission: bool = False


class SeoMetadataDto(ApiModel):
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class PortfolioItemCreateRequest(ApiModel):
    """DTO for creating a portfolio item."""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    images: List[ImagePairDto] = Field(default_factory=list)
    service_id: Optional[IdType] = Field(None, description="Service this project showcases")
    date: Optional[datetime] = Field(None, description="Completion date")
    location: Optional[str] = None
    duration: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    client_testimonial: Optional[ClientTestimonialDto] = None
    seo: Optional[SeoMetadataDto] = None
    featured: bool = False
    status: PortfolioStatus = "Draft"


class PortfolioItemUpdateRequest(ApiModel):
    """DTO for partial portfolio item updates."""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    images: Optional[List[ImagePairDto]] = None
    service_id: Optional[IdType] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    client_testimonial: Optional[ClientTestimonialDto] = None
    seo: Optional[SeoMetadataDto] = None
    featured: Optional[bool] = None
    status: Optional[PortfolioStatus] = None

    check_not_null = field_validator(
        "title", "description", "images", "featured", "status", mode="before"
    )(reject_null)


class PortfolioItemResponse(ApiModel):
    """DTO for portfolio item data."""
    id: IdType
    title: str
    description: str
    image_url: Optional[str] = None
    images: List[ImagePairDto] = Field(default_factory=list)
    service_id: Optional[IdType] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    difficulty: Optional[str] = None
    client_testimonial: Optional[ClientTestimonialDto] = None
    seo: Optional[SeoMetadataDto] = None
    featured: bool = False
    status: str
    view_count: int = 0
    created_at: datetime
    updated_at: datetime


class PortfolioItemListResponse(ApiModel):
    portfolio_items: List[PortfolioItemResponse]


class PortfolioItemEnvelope(ApiModel):
    portfolio_item: PortfolioItemResponse


class PortfolioItemMutationResponse(ApiModel):
    success: bool
    portfolio_item: PortfolioItemResponse
