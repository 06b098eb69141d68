"""
Inquiry DTO
===========

The public contact form has its own, narrower schema than the admin
inquiry form.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from garden_site.application.dto.base_dto import ApiModel, IdType, reject_null

InquiryStatus = Literal["new", "in-progress", "resolved", "archived"]


class ContactRequest(ApiModel):
    """DTO for the public contact form."""
    name: str = Field(..., min_length=1, description="Sender name")
    email: EmailStr
    phone: Optional[str] = None
    service_id: Optional[IdType] = Field(None, description="Service the inquiry is about")
    message: str = Field(..., min_length=10)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "phone": "555-0100",
                "message": "I would like a quote for weekly lawn care.",
            }
        }
    }


class InquiryCreateRequest(ContactRequest):
    """DTO for inquiries entered from the admin back-office."""
    status: InquiryStatus = "new"


class InquiryUpdateRequest(ApiModel):
    """DTO for partial inquiry updates, usually just ``status``."""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    service_id: Optional[IdType] = None
    message: Optional[str] = Field(None, min_length=10)
    status: Optional[InquiryStatus] = None

    check_not_null = field_validator("name", "email", "message", "status", mode="before")(reject_null)


class InquiryResponse(ApiModel):
    """DTO for inquiry data."""
    id: IdType
    name: str
    email: str
    phone: Optional[str] = None
    service_id: Optional[IdType] = None
    message: str
    status: str
    created_at: datetime
    updated_at: datetime


class InquiryListResponse(ApiModel):
    inquiries: List[InquiryResponse]


class InquiryEnvelope(ApiModel):
    inquiry: InquiryResponse


class InquiryMutationResponse(ApiModel):
    success: bool
    inquiry: InquiryResponse
