"""
Posts module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import ActionResult

from .models import CreatePostRequest, PostRecord, PostView, UpdatePostRequest


@runtime_checkable
class IPostService(Protocol):
    """Interface for posts and likes."""

    async def create_post(self, author_id: str, request: CreatePostRequest) -> PostView:
        """Publish a post with sanitized content."""
        ...

    async def get_post(self, post_id: str, viewer_id: Optional[str] = None) -> Optional[PostView]:
        """
        Get a post decorated for a viewer.

        Returns:
            PostView if found, None otherwise
        """
        ...

    async def update_post(
        self,
        post_id: str,
        acting_user_id: str,
        request: UpdatePostRequest,
    ) -> Optional[PostView]:
        """Edit a post. None when absent or not written by acting_user_id."""
        ...

    async def delete_post(self, post_id: str, acting_user_id: str) -> bool:
        """Delete a post with its comments and likes. Author only."""
        ...

    async def list_user_posts(
        self,
        author_id: str,
        viewer_id: Optional[str] = None,
    ) -> list[PostView]:
        """One author's posts, newest first."""
        ...

    async def like(self, post_id: str, user_id: str) -> ActionResult:
        """Like a post once."""
        ...

    async def unlike(self, post_id: str, user_id: str) -> ActionResult:
        """Withdraw a like."""
        ...

    async def build_views(
        self,
        posts: list[PostRecord],
        viewer_id: Optional[str] = None,
    ) -> list[PostView]:
        """Decorate post records with author, counts and viewer like state."""
        ...
