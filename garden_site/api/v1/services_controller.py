"""
Services Controller
===================

FastAPI controller for the services catalog: a public read-only surface
and the admin CRUD surface.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from garden_site.api.v1.dependencies import get_catalog_service, get_portfolio_service
from garden_site.application.dto.base_dto import DeleteResponse
from garden_site.application.dto.portfolio_dto import PortfolioItemListResponse, PortfolioItemResponse
from garden_site.application.dto.service_dto import (
    ReconcileResponse,
    ServiceCreateRequest,
    ServiceEnvelope,
    ServiceListResponse,
    ServiceMutationResponse,
    ServiceResponse,
    ServiceUpdateRequest,
)
from garden_site.application.services.catalog_service import CatalogService
from garden_site.application.services.portfolio_service import PortfolioService
from garden_site.core.security import require_admin
from garden_site.domain.models.service import Service

router = APIRouter(tags=["services"])
admin_router = APIRouter(tags=["admin: services"], dependencies=[Depends(require_admin)])


def _not_found(service_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Service '{service_id}' not found",
    )


@router.get("", response_model=ServiceListResponse, summary="List services")
async def list_services(
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceListResponse:
    services = await service.list_services()
    return ServiceListResponse(services=[ServiceResponse.model_validate(s) for s in services])


@router.get(
    "/featured",
    response_model=ServiceListResponse,
    summary="List featured services",
    description="Services flagged as featured, for the home page.",
)
async def list_featured_services(
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceListResponse:
    services = await service.list_featured_services()
    return ServiceListResponse(services=[ServiceResponse.model_validate(s) for s in services])


@router.get("/{service_id}", response_model=ServiceEnvelope, summary="Get service by ID")
async def get_service(
    service_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceEnvelope:
    """Unknown and malformed identifiers both yield 404."""
    found = await service.get_service(service_id)
    if found is None:
        raise _not_found(service_id)
    return ServiceEnvelope(service=ServiceResponse.model_validate(found))


@router.get(
    "/{service_id}/portfolio",
    response_model=PortfolioItemListResponse,
    summary="List published portfolio items of a service",
)
async def list_service_portfolio(
    service_id: str,
    portfolio: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItemListResponse:
    items = await portfolio.list_items_by_service(service_id, published_only=True)
    return PortfolioItemListResponse(
        portfolio_items=[PortfolioItemResponse.model_validate(item) for item in items]
    )


@admin_router.get("", response_model=ServiceListResponse, summary="List services (admin)")
async def admin_list_services(
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceListResponse:
    services = await service.list_services()
    return ServiceListResponse(services=[ServiceResponse.model_validate(s) for s in services])


@admin_router.post(
    "/reconcile",
    response_model=ReconcileResponse,
    summary="Remove orphaned portfolio items",
    description="""
    Delete portfolio items whose service no longer exists.

    Service deletion removes dependent portfolio items in a second step;
    this endpoint finishes that step if it was interrupted. Idempotent.
    """,
)
async def reconcile_portfolio_items(
    service: CatalogService = Depends(get_catalog_service),
) -> ReconcileResponse:
    removed = await service.reconcile_portfolio_items()
    return ReconcileResponse(success=True, removed=removed)


@admin_router.get("/{service_id}", response_model=ServiceEnvelope, summary="Get service (admin)")
async def admin_get_service(
    service_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceEnvelope:
    found = await service.get_service(service_id)
    if found is None:
        raise _not_found(service_id)
    return ServiceEnvelope(service=ServiceResponse.model_validate(found))


@admin_router.post(
    "",
    response_model=ServiceMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a service",
)
async def create_service(
    request: ServiceCreateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceMutationResponse:
    created = await service.create_service(Service(**request.model_dump()))
    return ServiceMutationResponse(success=True, service=ServiceResponse.model_validate(created))


@admin_router.put("/{service_id}", response_model=ServiceMutationResponse, summary="Update a service")
async def update_service(
    service_id: str,
    request: ServiceUpdateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceMutationResponse:
    updated = await service.update_service(service_id, request.model_dump(exclude_unset=True))
    if updated is None:
        raise _not_found(service_id)
    return ServiceMutationResponse(success=True, service=ServiceResponse.model_validate(updated))


@admin_router.delete(
    "/{service_id}",
    response_model=DeleteResponse,
    summary="Delete a service",
    description="Deletes the service and every portfolio item referencing it.",
)
async def delete_service(
    service_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> DeleteResponse:
    if not await service.delete_service(service_id):
        raise _not_found(service_id)
    return DeleteResponse(success=True, message=f"Service '{service_id}' deleted")
