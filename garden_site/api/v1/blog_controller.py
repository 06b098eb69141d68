"""
Blog Controller
===============
"""
from fastapi import APIRouter, Depends, HTTPException, status

from garden_site.api.v1.dependencies import get_blog_service
from garden_site.application.dto.base_dto import DeleteResponse
from garden_site.application.dto.blog_dto import (
    BlogPostCreateRequest,
    BlogPostEnvelope,
    BlogPostListResponse,
    BlogPostMutationResponse,
    BlogPostResponse,
    BlogPostUpdateRequest,
)
from garden_site.application.services.blog_service import BlogService
from garden_site.core.security import require_admin

router = APIRouter(tags=["blog"])
admin_router = APIRouter(tags=["admin: blog"], dependencies=[Depends(require_admin)])


def _not_found(post_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Blog post '{post_id}' not found",
    )


@router.get("", response_model=BlogPostListResponse, summary="List blog posts, newest first")
async def list_blog_posts(
    service: BlogService = Depends(get_blog_service),
) -> BlogPostListResponse:
    posts = await service.list_posts()
    return BlogPostListResponse(blog_posts=[BlogPostResponse.model_validate(p) for p in posts])


@router.get("/{post_id}", response_model=BlogPostEnvelope, summary="Get blog post by ID")
async def get_blog_post(
    post_id: str,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostEnvelope:
    post = await service.get_post(post_id)
    if post is None:
        raise _not_found(post_id)
    return BlogPostEnvelope(blog_post=BlogPostResponse.model_validate(post))


# Admin list/get reuse the public handlers
admin_router.add_api_route(
    "", list_blog_posts, methods=["GET"], response_model=BlogPostListResponse,
    summary="List blog posts (admin)",
)
admin_router.add_api_route(
    "/{post_id}", get_blog_post, methods=["GET"], response_model=BlogPostEnvelope,
    summary="Get blog post (admin)",
)


@admin_router.post(
    "",
    response_model=BlogPostMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a blog post",
    description="A post without an author is attributed to the first admin user.",
)
async def create_blog_post(
    request: BlogPostCreateRequest,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostMutationResponse:
    try:
        post = await service.create_post(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return BlogPostMutationResponse(success=True, blog_post=BlogPostResponse.model_validate(post))


@admin_router.put("/{post_id}", response_model=BlogPostMutationResponse, summary="Update a blog post")
async def update_blog_post(
    post_id: str,
    request: BlogPostUpdateRequest,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostMutationResponse:
    try:
        post = await service.update_post(post_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if post is None:
        raise _not_found(post_id)
    return BlogPostMutationResponse(success=True, blog_post=BlogPostResponse.model_validate(post))


@admin_router.delete("/{post_id}", response_model=DeleteResponse, summary="Delete a blog post")
async def delete_blog_post(
    post_id: str,
    service: BlogService = Depends(get_blog_service),
) -> DeleteResponse:
    if not await service.delete_post(post_id):
        raise _not_found(post_id)
    return DeleteResponse(success=True, message=f"Blog post '{post_id}' deleted")
