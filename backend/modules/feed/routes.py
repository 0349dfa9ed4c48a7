"""
Feed API endpoint.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_feed_service
from shared.models import AuthenticatedUser
from modules.posts.models import PostView

from .interfaces import IFeedService
from .service import DEFAULT_PAGE_SIZE

router = APIRouter()


@router.get("", response_model=list[PostView])
async def get_feed(
    page: int = Query(default=1, description="Page number (1-indexed)"),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, description="Items per page (max 50)"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFeedService = Depends(get_feed_service),
) -> list[PostView]:
    """
    Get the current user's feed.

    Out-of-range pagination values are clamped rather than rejected.
    """
    return await service.get_feed(user.id, page, page_size)
