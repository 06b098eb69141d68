"""
Testimonials Controller
=======================
"""
from fastapi import APIRouter, Depends, HTTPException, status

from garden_site.api.v1.dependencies import get_testimonial_service
from garden_site.application.dto.base_dto import DeleteResponse
from garden_site.application.dto.testimonial_dto import (
    TestimonialCreateRequest,
    TestimonialEnvelope,
    TestimonialListResponse,
    TestimonialMutationResponse,
    TestimonialResponse,
    TestimonialUpdateRequest,
)
from garden_site.application.services.testimonial_service import TestimonialService
from garden_site.core.security import require_admin

router = APIRouter(tags=["testimonials"])
admin_router = APIRouter(tags=["admin: testimonials"], dependencies=[Depends(require_admin)])


def _not_found(testimonial_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Testimonial '{testimonial_id}' not found",
    )


@router.get("", response_model=TestimonialListResponse, summary="List testimonials in display order")
async def list_testimonials(
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialListResponse:
    testimonials = await service.list_testimonials()
    return TestimonialListResponse(
        testimonials=[TestimonialResponse.model_validate(t) for t in testimonials]
    )


@router.get("/{testimonial_id}", response_model=TestimonialEnvelope, summary="Get testimonial by ID")
async def get_testimonial(
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialEnvelope:
    testimonial = await service.get_testimonial(testimonial_id)
    if testimonial is None:
        raise _not_found(testimonial_id)
    return TestimonialEnvelope(testimonial=TestimonialResponse.model_validate(testimonial))


admin_router.add_api_route(
    "", list_testimonials, methods=["GET"], response_model=TestimonialListResponse,
    summary="List testimonials (admin)",
)
admin_router.add_api_route(
    "/{testimonial_id}", get_testimonial, methods=["GET"], response_model=TestimonialEnvelope,
    summary="Get testimonial (admin)",
)


@admin_router.post(
    "",
    response_model=TestimonialMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a testimonial",
)
async def create_testimonial(
    request: TestimonialCreateRequest,
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialMutationResponse:
    testimonial = await service.create_testimonial(request.model_dump())
    return TestimonialMutationResponse(
        success=True, testimonial=TestimonialResponse.model_validate(testimonial)
    )


@admin_router.put("/{testimonial_id}", response_model=TestimonialMutationResponse, summary="Update a testimonial")
async def update_testimonial(
    testimonial_id: str,
    request: TestimonialUpdateRequest,
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialMutationResponse:
    testimonial = await service.update_testimonial(
        testimonial_id, request.model_dump(exclude_unset=True)
    )
    if testimonial is None:
        raise _not_found(testimonial_id)
    return TestimonialMutationResponse(
        success=True, testimonial=TestimonialResponse.model_validate(testimonial)
    )


@admin_router.delete("/{testimonial_id}", response_model=DeleteResponse, summary="Delete a testimonial")
async def delete_testimonial(
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
) -> DeleteResponse:
    if not await service.delete_testimonial(testimonial_id):
        raise _not_found(testimonial_id)
    return DeleteResponse(success=True, message=f"Testimonial '{testimonial_id}' deleted")
