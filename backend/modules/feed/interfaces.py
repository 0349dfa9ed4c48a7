"""
Feed module interface.
"""

from typing import Protocol, runtime_checkable

from modules.posts.models import PostView


@runtime_checkable
class IFeedService(Protocol):
    """Interface for the home feed."""

    async def get_feed(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = 20,
    ) -> list[PostView]:
        """One page of the user's feed, decorated for the user."""
        ...
