"""
Blog DTO
========
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from garden_site.application.dto.base_dto import ApiModel, IdType, reject_null


class BlogPostCreateRequest(ApiModel):
    """DTO for creating a blog post. A missing author defaults to the first admin."""
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=30, description="Post body")
    excerpt: str = Field(..., min_length=10, max_length=150, description="Summary for listings")
    image_url: Optional[str] = None
    author_id: Optional[IdType] = None
    published_at: Optional[datetime] = Field(None, description="Defaults to now")


class BlogPostUpdateRequest(ApiModel):
    """DTO for partial blog post updates."""
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=30)
    excerpt: Optional[str] = Field(None, min_length=10, max_length=150)
    image_url: Optional[str] = None
    author_id: Optional[IdType] = None
    published_at: Optional[datetime] = None

    check_not_null = field_validator("title", "content", "excerpt", "published_at", mode="before")(reject_null)


class BlogPostResponse(ApiModel):
    """DTO for blog post data."""
    id: IdType
    title: str
    content: str
    excerpt: str
    image_url: Optional[str] = None
    author_id: Optional[IdType] = None
    published_at: datetime
    created_at: datetime
    updated_at: datetime


class BlogPostListResponse(ApiModel):
    blog_posts: List[BlogPostResponse]


class BlogPostEnvelope(ApiModel):
    blog_post: BlogPostResponse


class BlogPostMutationResponse(ApiModel):
    success: bool
    blog_post: BlogPostResponse
