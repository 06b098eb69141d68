"""
Appointments Controller
=======================

``POST /api/appointments`` is the public booking form; the admin surface
manages every appointment.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from garden_site.api.v1.dependencies import get_appointment_service
from garden_site.application.dto.appointment_dto import (
    AppointmentCreateRequest,
    AppointmentEnvelope,
    AppointmentListResponse,
    AppointmentMutationResponse,
    AppointmentResponse,
    AppointmentUpdateRequest,
    PublicAppointmentRequest,
)
from garden_site.application.dto.base_dto import DeleteResponse
from garden_site.application.services.appointment_service import AppointmentService
from garden_site.core.security import require_admin

router = APIRouter(tags=["appointments"])
admin_router = APIRouter(tags=["admin: appointments"], dependencies=[Depends(require_admin)])


def _not_found(appointment_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Appointment '{appointment_id}' not found",
    )


async def _create(values: dict, service: AppointmentService) -> AppointmentMutationResponse:
    try:
        appointment = await service.create_appointment(values)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return AppointmentMutationResponse(
        success=True, appointment=AppointmentResponse.model_validate(appointment)
    )


@router.post(
    "",
    response_model=AppointmentMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book an appointment",
    description="Public booking form. The date must be at least one day ahead.",
)
async def book_appointment(
    request: PublicAppointmentRequest,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentMutationResponse:
    return await _create(request.model_dump(), service)


@admin_router.get("", response_model=AppointmentListResponse, summary="List appointments, earliest first")
async def list_appointments(
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentListResponse:
    appointments = await service.list_appointments()
    return AppointmentListResponse(
        appointments=[AppointmentResponse.model_validate(a) for a in appointments]
    )


@admin_router.get("/{appointment_id}", response_model=AppointmentEnvelope, summary="Get appointment by ID")
async def get_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentEnvelope:
    appointment = await service.get_appointment(appointment_id)
    if appointment is None:
        raise _not_found(appointment_id)
    return AppointmentEnvelope(appointment=AppointmentResponse.model_validate(appointment))


@admin_router.post(
    "",
    response_model=AppointmentMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an appointment",
)
async def create_appointment(
    request: AppointmentCreateRequest,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentMutationResponse:
    return await _create(request.model_dump(), service)


@admin_router.put(
    "/{appointment_id}",
    response_model=AppointmentMutationResponse,
    summary="Update an appointment",
    description="Only the supplied fields change, e.g. ``{\"status\": \"Completed\"}``.",
)
async def update_appointment(
    appointment_id: str,
    request: AppointmentUpdateRequest,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentMutationResponse:
    try:
        appointment = await service.update_appointment(
            appointment_id, request.model_dump(exclude_unset=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if appointment is None:
        raise _not_found(appointment_id)
    return AppointmentMutationResponse(
        success=True, appointment=AppointmentResponse.model_validate(appointment)
    )


@admin_router.delete("/{appointment_id}", response_model=DeleteResponse, summary="Delete an appointment")
async def delete_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
) -> DeleteResponse:
    if not await service.delete_appointment(appointment_id):
        raise _not_found(appointment_id)
    return DeleteResponse(success=True, message=f"Appointment '{appointment_id}' deleted")
