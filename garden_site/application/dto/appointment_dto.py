"""
Appointment DTO
===============

Two creation schemas: the public booking form (contact details, service
and date, address optional) and the admin form (full address required).
"""
from datetime import datetime, timedelta
from typing import List, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from garden_site.application.dto.base_dto import ApiModel, IdType, reject_null
from garden_site.utils.datetime_utils import ensure_aware, now

Priority = Literal["Normal", "Urgent"]
AppointmentStatus = Literal["Scheduled", "Completed", "Cancelled", "Rescheduled"]


class PublicAppointmentRequest(ApiModel):
    """DTO for the public booking form."""
    name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., min_length=10)
    service_id: IdType = Field(..., description="Service to book")
    date: datetime = Field(..., description="Requested visit date, at least one day ahead")
    notes: Optional[str] = None
    building_name: Optional[str] = None
    street_name: Optional[str] = None
    house_number: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    postal_code: Optional[str] = None

    @field_validator("date")
    @classmethod
    def date_at_least_tomorrow(cls, value: datetime) -> datetime:
        value = ensure_aware(value)
        if value.date() < (now() + timedelta(days=1)).date():
            raise ValueError("Appointments must be booked at least one day in advance")
        return value


class AppointmentCreateRequest(ApiModel):
    """DTO for appointments entered from the admin back-office."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    building_name: Optional[str] = None
    street_name: str = Field(..., min_length=1)
    house_number: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    county: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    service_id: IdType
    date: datetime
    priority: Priority = "Normal"
    notes: Optional[str] = None
    status: AppointmentStatus = "Scheduled"


class AppointmentUpdateRequest(ApiModel):
    """DTO for partial appointment updates. Only supplied fields change."""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1)
    building_name: Optional[str] = None
    street_name: Optional[str] = None
    house_number: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    postal_code: Optional[str] = None
    service_id: Optional[IdType] = None
    date: Optional[datetime] = None
    priority: Optional[Priority] = None
    notes: Optional[str] = None
    status: Optional[AppointmentStatus] = None

    check_not_null = field_validator(
        "name", "email", "phone", "service_id", "date", "priority", "status", mode="before"
    )(reject_null)


class AppointmentResponse(ApiModel):
    """DTO for appointment data."""
    id: IdType
    name: str
    email: str
    phone: str
    building_name: Optional[str] = None
    street_name: Optional[str] = None
    house_number: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    postal_code: Optional[str] = None
    service_id: IdType
    date: datetime
    priority: str
    notes: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


class AppointmentListResponse(ApiModel):
    appointments: List[AppointmentResponse]


class AppointmentEnvelope(ApiModel):
    appointment: AppointmentResponse


class AppointmentMutationResponse(ApiModel):
    success: bool
    appointment: AppointmentResponse
