"""
Portfolio Controller
====================

Public surface shows Published items only; reading one item's page
counts a view. The admin surface sees drafts too.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from garden_site.api.v1.dependencies import get_portfolio_service
from garden_site.application.dto.base_dto import DeleteResponse
from garden_site.application.dto.portfolio_dto import (
    PortfolioItemCreateRequest,
    PortfolioItemEnvelope,
    PortfolioItemListResponse,
    PortfolioItemMutationResponse,
    PortfolioItemResponse,
    PortfolioItemUpdateRequest,
)
from garden_site.application.services.portfolio_service import PortfolioService
from garden_site.core.security import require_admin

router = APIRouter(tags=["portfolio"])
admin_router = APIRouter(tags=["admin: portfolio"], dependencies=[Depends(require_admin)])


def _not_found(item_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Portfolio item '{item_id}' not found",
    )


def _to_list(items) -> PortfolioItemListResponse:
    return PortfolioItemListResponse(
        portfolio_items=[PortfolioItemResponse.model_validate(item) for item in items]
    )


@router.get("", response_model=PortfolioItemListResponse, summary="List published portfolio items")
async def list_portfolio_items(
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItemListResponse:
    return _to_list(await service.list_items(published_only=True))


@router.get(
    "/{item_id}",
    response_model=PortfolioItemEnvelope,
    summary="Get a published portfolio item",
    description="Returns the item and increments its view count.",
)
async def get_portfolio_item(
    item_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItemEnvelope:
    item = await service.view_item(item_id)
    if item is None:
        raise _not_found(item_id)
    return PortfolioItemEnvelope(portfolio_item=PortfolioItemResponse.model_validate(item))


@admin_router.get("", response_model=PortfolioItemListResponse, summary="List portfolio items (admin)")
async def admin_list_portfolio_items(
    service_id: Optional[str] = Query(None, alias="serviceId", description="Only items of this service"),
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItemListResponse:
    if service_id is not None:
        return _to_list(await service.list_items_by_service(service_id))
    return _to_list(await service.list_items())


@admin_router.get("/{item_id}", response_model=PortfolioItemEnvelope, summary="Get portfolio item (admin)")
async def admin_get_portfolio_item(
    item_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItemEnvelope:
    item = await service.get_item(item_id)
    if item is None:
        raise _not_found(item_id)
    return PortfolioItemEnvelope(portfolio_item=PortfolioItemResponse.model_validate(item))


@admin_router.post(
    "",
    response_model=PortfolioItemMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a portfolio item",
)
async def create_portfolio_item(
    request: PortfolioItemCreateRequest,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItemMutationResponse:
    try:
        item = await service.create_item(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return PortfolioItemMutationResponse(
        success=True, portfolio_item=PortfolioItemResponse.model_validate(item)
    )


@admin_router.put("/{item_id}", response_model=PortfolioItemMutationResponse, summary="Update a portfolio item")
async def update_portfolio_item(
    item_id: str,
    request: PortfolioItemUpdateRequest,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItemMutationResponse:
    try:
        item = await service.update_item(item_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if item is None:
        raise _not_found(item_id)
    return PortfolioItemMutationResponse(
        success=True, portfolio_item=PortfolioItemResponse.model_validate(item)
    )


@admin_router.delete("/{item_id}", response_model=DeleteResponse, summary="Delete a portfolio item")
async def delete_portfolio_item(
    item_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> DeleteResponse:
    if not await service.delete_item(item_id):
        raise _not_found(item_id)
    return DeleteResponse(success=True, message=f"Portfolio item '{item_id}' deleted")
