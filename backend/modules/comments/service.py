"""
Comment service implementation.
"""

import logging
from typing import Optional

from shared.sanitizer import Sanitizer
from modules.posts.repository import PostRepository
from modules.users.models import UserRecord
from modules.users.repository import UserRepository

from .interfaces import ICommentService
from .models import CommentAuthor, CommentRecord, CommentView, CreateCommentRequest
from .repository import CommentRepository

logger = logging.getLogger(__name__)


class CommentService(ICommentService):
    """Implementation of the comment service."""

    def __init__(
        self,
        comments: CommentRepository,
        posts: PostRepository,
        users: UserRepository,
        sanitizer: Sanitizer,
    ):
        self._comments = comments
        self._posts = posts
        self._users = users
        self._sanitizer = sanitizer

    async def create_comment(
        self,
        post_id: str,
        author_id: str,
        request: CreateCommentRequest,
    ) -> Optional[CommentView]:
        if self._posts.get_by_id(post_id) is None:
            return None

        author = self._users.get_by_id(author_id)
        if author is None:
            return None

        comment = self._comments.create(
            post_id=post_id,
            author_id=author_id,
            content=self._sanitizer.sanitize_required(request.content),
        )
        logger.info("Comment created: %s on post %s", comment.id, post_id)
        return self._to_view(comment, author)

    async def list_comments(self, post_id: str) -> list[CommentView]:
        comments = self._comments.list_by_post(post_id)
        authors = self._users.get_many([c.author_id for c in comments])
        return [
            self._to_view(comment, authors[comment.author_id])
            for comment in comments
            if comment.author_id in authors
        ]

    async def delete_comment(self, comment_id: str, acting_user_id: str) -> bool:
        comment = self._comments.get_by_id(comment_id)
        if comment is None:
            return False

        if comment.author_id != acting_user_id:
            post = self._posts.get_by_id(comment.post_id)
            if post is None or post.author_id != acting_user_id:
                return False

        deleted = self._comments.delete(comment_id)
        if deleted:
            logger.info("Comment deleted: %s by %s", comment_id, acting_user_id)
        return deleted

    def _to_view(self, comment: CommentRecord, author: UserRecord) -> CommentView:
        return CommentView(
            id=comment.id,
            post_id=comment.post_id,
            content=comment.content,
            author=CommentAuthor(
                id=author.id,
                first_name=author.first_name,
                last_name=author.last_name,
                avatar_url=author.avatar_url,
            ),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
