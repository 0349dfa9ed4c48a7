"""
Comments API endpoints.

Two routers: `post_comments_router` is mounted under /api/posts for the
per-post collection, `router` under /api/comments for single comments.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_comment_service
from shared.models import AuthenticatedUser

from .interfaces import ICommentService
from .models import CommentView, CreateCommentRequest

router = APIRouter()
post_comments_router = APIRouter()


@post_comments_router.post("/{post_id}/comments", response_model=CommentView, status_code=201)
async def create_comment(
    post_id: str,
    request: CreateCommentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommentService = Depends(get_comment_service),
) -> CommentView:
    """Comment on a post."""
    comment = await service.create_comment(post_id, user.id, request)
    if not comment:
        raise HTTPException(status_code=404, detail="Post not found")
    return comment


@post_comments_router.get("/{post_id}/comments", response_model=list[CommentView])
async def list_comments(
    post_id: str,
    service: ICommentService = Depends(get_comment_service),
) -> list[CommentView]:
    """List a post's comments, oldest first."""
    return await service.list_comments(post_id)


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommentService = Depends(get_comment_service),
) -> None:
    """
    Delete a comment.

    The comment's author or the post's author may delete it; anyone else
    gets a 404.
    """
    if not await service.delete_comment(comment_id, user.id):
        raise HTTPException(status_code=404, detail="Comment not found")
