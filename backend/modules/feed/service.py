"""
Feed service implementation.

The feed is recomputed on every call: posts written by the user or by
anyone with an accepted connection to them, newest first.
"""

from modules.connections.interfaces import IConnectionService
from modules.posts.interfaces import IPostService
from modules.posts.models import PostView
from modules.posts.repository import PostRepository

from .interfaces import IFeedService

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50


def clamp_page(page: int, page_size: int) -> tuple[int, int]:
    """
    Normalize pagination arguments instead of rejecting them.

    page below 1 becomes 1; page_size above the maximum is capped and
    page_size below 1 falls back to the default.
    """
    if page < 1:
        page = 1
    if page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    elif page_size > MAX_PAGE_SIZE:
        page_size = MAX_PAGE_SIZE
    return page, page_size


class FeedService(IFeedService):
    """Implementation of the feed service."""

    def __init__(
        self,
        posts: PostRepository,
        connections: IConnectionService,
        post_views: IPostService,
    ):
        self._posts = posts
        self._connections = connections
        self._post_views = post_views

    async def get_feed(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[PostView]:
        page, page_size = clamp_page(page, page_size)

        authors = [user_id] + await self._connections.get_connected_user_ids(user_id)
        posts = self._posts.list_by_authors(
            authors,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return await self._post_views.build_views(posts, viewer_id=user_id)
