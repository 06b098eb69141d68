"""
Testimonial DTO
===============
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from garden_site.application.dto.base_dto import ApiModel, IdType, reject_null


class TestimonialCreateRequest(ApiModel):
    """DTO for creating a testimonial."""
    name: str = Field(..., min_length=1)
    role: Optional[str] = None
    content: str = Field(..., min_length=1)
    rating: Optional[int] = Field(None, ge=1, le=5)
    image_url: Optional[str] = None
    display_order: int = Field(0, description="Position on the public page, ascending")


class TestimonialUpdateRequest(ApiModel):
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    rating: Optional[int] = Field(None, ge=1, le=5)
    image_url: Optional[str] = None
    display_order: Optional[int] = None

    check_not_null = field_validator("name", "content", "display_order", mode="before")(reject_null)


class TestimonialResponse(ApiModel):
    """DTO for testimonial data."""
    id: IdType
    name: str
    role: Optional[str] = None
    content: str
    rating: Optional[int] = None
    image_url: Optional[str] = None
    display_order: int = 0
    created_at: datetime
    updated_at: datetime


class TestimonialListResponse(ApiModel):
    testimonials: List[TestimonialResponse]


class TestimonialEnvelope(ApiModel):
    testimonial: TestimonialResponse


class TestimonialMutationResponse(ApiModel):
    success: bool
    testimonial: TestimonialResponse
