"""
Inquiries Controller
====================

``POST /api/contact`` is the public entry point; everything else lives
under the admin surface.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from garden_site.api.v1.dependencies import get_inquiry_service
from garden_site.application.dto.base_dto import DeleteResponse
from garden_site.application.dto.inquiry_dto import (
    ContactRequest,
    InquiryCreateRequest,
    InquiryEnvelope,
    InquiryListResponse,
    InquiryMutationResponse,
    InquiryResponse,
    InquiryUpdateRequest,
)
from garden_site.application.services.inquiry_service import InquiryService
from garden_site.core.security import require_admin

contact_router = APIRouter(tags=["contact"])
admin_router = APIRouter(tags=["admin: inquiries"], dependencies=[Depends(require_admin)])


def _not_found(inquiry_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Inquiry '{inquiry_id}' not found",
    )


async def _create(values: dict, service: InquiryService) -> InquiryMutationResponse:
    try:
        inquiry = await service.create_inquiry(values)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return InquiryMutationResponse(success=True, inquiry=InquiryResponse.model_validate(inquiry))


@contact_router.post(
    "",
    response_model=InquiryMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a contact message",
)
async def submit_contact(
    request: ContactRequest,
    service: InquiryService = Depends(get_inquiry_service),
) -> InquiryMutationResponse:
    return await _create(request.model_dump(), service)


@admin_router.get("", response_model=InquiryListResponse, summary="List inquiries, newest first")
async def list_inquiries(
    service: InquiryService = Depends(get_inquiry_service),
) -> InquiryListResponse:
    inquiries = await service.list_inquiries()
    return InquiryListResponse(inquiries=[InquiryResponse.model_validate(i) for i in inquiries])


@admin_router.get("/{inquiry_id}", response_model=InquiryEnvelope, summary="Get inquiry by ID")
async def get_inquiry(
    inquiry_id: str,
    service: InquiryService = Depends(get_inquiry_service),
) -> InquiryEnvelope:
    inquiry = await service.get_inquiry(inquiry_id)
    if inquiry is None:
        raise _not_found(inquiry_id)
    return InquiryEnvelope(inquiry=InquiryResponse.model_validate(inquiry))


@admin_router.post(
    "",
    response_model=InquiryMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an inquiry",
)
async def create_inquiry(
    request: InquiryCreateRequest,
    service: InquiryService = Depends(get_inquiry_service),
) -> InquiryMutationResponse:
    return await _create(request.model_dump(), service)


@admin_router.put("/{inquiry_id}", response_model=InquiryMutationResponse, summary="Update an inquiry")
async def update_inquiry(
    inquiry_id: str,
    request: InquiryUpdateRequest,
    service: InquiryService = Depends(get_inquiry_service),
) -> InquiryMutationResponse:
    try:
        inquiry = await service.update_inquiry(inquiry_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if inquiry is None:
        raise _not_found(inquiry_id)
    return InquiryMutationResponse(success=True, inquiry=InquiryResponse.model_validate(inquiry))


@admin_router.delete("/{inquiry_id}", response_model=DeleteResponse, summary="Delete an inquiry")
async def delete_inquiry(
    inquiry_id: str,
    service: InquiryService = Depends(get_inquiry_service),
) -> DeleteResponse:
    if not await service.delete_inquiry(inquiry_id):
        raise _not_found(inquiry_id)
    return DeleteResponse(success=True, message=f"Inquiry '{inquiry_id}' deleted")
