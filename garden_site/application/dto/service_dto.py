"""
Service DTO
===========

Pydantic models for service catalog requests and responses.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from garden_site.application.dto.base_dto import ApiModel, IdType, reject_null


class ServiceCreateRequest(ApiModel):
    """DTO for creating a service."""
    name: str = Field(..., min_length=1, description="Service name")
    description: str = Field(..., min_length=1)
    short_desc: Optional[str] = Field(None, description="One-line summary for cards")
    price: str = Field(..., min_length=1, description="Display price, e.g. 'From $80/visit'")
    image_url: Optional[str] = None
    featured: bool = False

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Lawn Care",
                "description": "Mowing, fertilization, aeration and overseeding.",
                "shortDesc": "Keep your lawn lush and green",
                "price": "From $80/visit",
                "featured": True,
            }
        }
    }


class ServiceUpdateRequest(ApiModel):
    """DTO for partial service updates. Only supplied fields change."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    short_desc: Optional[str] = None
    price: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    featured: Optional[bool] = None

    check_not_null = field_validator("name", "description", "price", "featured", mode="before")(reject_null)


class ServiceResponse(ApiModel):
    """DTO for service data."""
    id: IdType
    name: str
    description: str
    short_desc: Optional[str] = None
    price: str
    image_url: Optional[str] = None
    featured: bool
    created_at: datetime
    updated_at: datetime


class ServiceListResponse(ApiModel):
    services: List[ServiceResponse]


class ServiceEnvelope(ApiModel):
    service: ServiceResponse


class ServiceMutationResponse(ApiModel):
    success: bool
    service: ServiceResponse


class ReconcileResponse(ApiModel):
    """DTO for the orphaned portfolio item cleanup."""
    success: bool
    removed: int
