"""
User DTO
========

Passwords are accepted on input only; no response model carries one.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from garden_site.application.dto.base_dto import ApiModel, IdType, reject_null

Role = Literal["admin", "staff"]


class UserCreateRequest(ApiModel):
    """DTO for creating a back-office account."""
    username: str = Field(..., min_length=3)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Plain text, hashed before storage")
    name: str = Field(..., min_length=1)
    role: Role = "staff"


class UserUpdateRequest(ApiModel):
    """DTO for partial user updates. A supplied password is re-hashed."""
    username: Optional[str] = Field(None, min_length=3)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[Role] = None

    check_not_null = field_validator("username", "email", "name", "role", mode="before")(reject_null)


class UserResponse(ApiModel):
    """DTO for user data."""
    id: IdType
    username: str
    email: str
    name: str
    role: str
    created_at: datetime
    updated_at: datetime


class UserListResponse(ApiModel):
    users: List[UserResponse]


class UserEnvelope(ApiModel):
    user: UserResponse


class UserMutationResponse(ApiModel):
    success: bool
    user: UserResponse
