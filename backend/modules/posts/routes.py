"""
Posts API endpoints.

Reading posts works anonymously; liked_by_viewer is then always false.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user, get_optional_user
from api.dependencies import get_post_service
from shared.models import ActionResult, AuthenticatedUser

from .interfaces import IPostService
from .models import CreatePostRequest, PostView, UpdatePostRequest

router = APIRouter()


@router.post("", response_model=PostView, status_code=201)
async def create_post(
    request: CreatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> PostView:
    """Publish a post."""
    return await service.create_post(user.id, request)


@router.get("/user/{user_id}", response_model=list[PostView])
async def list_user_posts(
    user_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IPostService = Depends(get_post_service),
) -> list[PostView]:
    """List one user's posts, newest first."""
    return await service.list_user_posts(user_id, user.id if user else None)


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IPostService = Depends(get_post_service),
) -> PostView:
    """Get a single post."""
    post = await service.get_post(post_id, user.id if user else None)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: UpdatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> PostView:
    """
    Edit one of the current user's posts.

    Posts by other users are reported as not found.
    """
    post = await service.update_post(post_id, user.id, request)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.delete("/{post_id}", status_code=204)
async def delete_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> None:
    """Delete one of the current user's posts with its comments and likes."""
    if not await service.delete_post(post_id, user.id):
        raise HTTPException(status_code=404, detail="Post not found")


@router.post("/{post_id}/like", response_model=ActionResult)
async def like_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> ActionResult:
    result = await service.like(post_id, user.id)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return result


@router.delete("/{post_id}/like", response_model=ActionResult)
async def unlike_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> ActionResult:
    result = await service.unlike(post_id, user.id)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return result
