"""
Users Controller
================

Admin-only management of back-office accounts. Responses never include
password hashes.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from garden_site.api.v1.dependencies import get_user_service
from garden_site.application.dto.base_dto import DeleteResponse
from garden_site.application.dto.user_dto import (
    UserCreateRequest,
    UserEnvelope,
    UserListResponse,
    UserMutationResponse,
    UserResponse,
    UserUpdateRequest,
)
from garden_site.application.services.user_service import UserService
from garden_site.core.security import require_admin

admin_router = APIRouter(tags=["admin: users"], dependencies=[Depends(require_admin)])


def _not_found(user_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User '{user_id}' not found",
    )


@admin_router.get("", response_model=UserListResponse, summary="List users")
async def list_users(
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    users = await service.list_users()
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])


@admin_router.get("/{user_id}", response_model=UserEnvelope, summary="Get user by ID")
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    user = await service.get_user(user_id)
    if user is None:
        raise _not_found(user_id)
    return UserEnvelope(user=UserResponse.model_validate(user))


@admin_router.post(
    "",
    response_model=UserMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="Fails with 400 when the username or email is already in use.",
)
async def create_user(
    request: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserMutationResponse:
    try:
        user = await service.create_user(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserMutationResponse(success=True, user=UserResponse.model_validate(user))


@admin_router.put("/{user_id}", response_model=UserMutationResponse, summary="Update a user")
async def update_user(
    user_id: str,
    request: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserMutationResponse:
    try:
        user = await service.update_user(user_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if user is None:
        raise _not_found(user_id)
    return UserMutationResponse(success=True, user=UserResponse.model_validate(user))


@admin_router.delete("/{user_id}", response_model=DeleteResponse, summary="Delete a user")
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> DeleteResponse:
    if not await service.delete_user(user_id):
        raise _not_found(user_id)
    return DeleteResponse(success=True, message=f"User '{user_id}' deleted")
