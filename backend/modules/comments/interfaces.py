"""
Comments module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CommentView, CreateCommentRequest


@runtime_checkable
class ICommentService(Protocol):
    """Interface for comments on posts."""

    async def create_comment(
        self,
        post_id: str,
        author_id: str,
        request: CreateCommentRequest,
    ) -> Optional[CommentView]:
        """
        Comment on a post.

        Returns:
            The new comment, or None if the post does not exist
        """
        ...

    async def list_comments(self, post_id: str) -> list[CommentView]:
        """Comments on a post, oldest first."""
        ...

    async def delete_comment(self, comment_id: str, acting_user_id: str) -> bool:
        """
        Delete a comment.

        Allowed for the comment's author and for the author of the post.
        """
        ...
