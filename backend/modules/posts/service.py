"""
Post service implementation.

Posts, likes, and the view decoration shared with the feed.
"""

import logging
from typing import Optional, TYPE_CHECKING

from shared.exceptions import DuplicateRecordError
from shared.models import ActionResult
from shared.sanitizer import Sanitizer
from modules.users.repository import UserRepository

from .interfaces import IPostService
from .models import CreatePostRequest, PostRecord, PostView, UpdatePostRequest
from .repository import LikeRepository, PostRepository

if TYPE_CHECKING:
    from modules.comments.repository import CommentRepository

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """Implementation of the post service."""

    def __init__(
        self,
        posts: PostRepository,
        likes: LikeRepository,
        comments: "CommentRepository",
        users: UserRepository,
        sanitizer: Sanitizer,
    ):
        self._posts = posts
        self._likes = likes
        self._comments = comments
        self._users = users
        self._sanitizer = sanitizer

    async def create_post(self, author_id: str, request: CreatePostRequest) -> PostView:
        post = self._posts.create(
            author_id=author_id,
            content=self._sanitizer.sanitize_required(request.content),
            image_url=str(request.image_url) if request.image_url else None,
        )
        logger.info("Post created: %s by %s", post.id, author_id)
        views = await self.build_views([post], viewer_id=author_id)
        return views[0]

    async def get_post(self, post_id: str, viewer_id: Optional[str] = None) -> Optional[PostView]:
        post = self._posts.get_by_id(post_id)
        if post is None:
            return None
        views = await self.build_views([post], viewer_id)
        return views[0] if views else None

    async def update_post(
        self,
        post_id: str,
        acting_user_id: str,
        request: UpdatePostRequest,
    ) -> Optional[PostView]:
        post = self._posts.get_by_id(post_id)
        if post is None or post.author_id != acting_user_id:
            return None

        changes: dict[str, Optional[str]] = {}
        if request.content is not None:
            changes["content"] = self._sanitizer.sanitize_required(request.content)
        if request.image_url is not None:
            changes["image_url"] = str(request.image_url)

        if changes:
            updated = self._posts.update(post_id, changes)
            if updated is None:
                return None
            post = updated

        views = await self.build_views([post], viewer_id=acting_user_id)
        return views[0] if views else None

    async def delete_post(self, post_id: str, acting_user_id: str) -> bool:
        post = self._posts.get_by_id(post_id)
        if post is None or post.author_id != acting_user_id:
            return False

        deleted = self._posts.delete(post_id)
        if deleted:
            logger.info("Post deleted: %s", post_id)
        return deleted

    async def list_user_posts(
        self,
        author_id: str,
        viewer_id: Optional[str] = None,
    ) -> list[PostView]:
        return await self.build_views(self._posts.list_by_author(author_id), viewer_id)

    async def like(self, post_id: str, user_id: str) -> ActionResult:
        if self._posts.get_by_id(post_id) is None:
            return ActionResult.fail("Post not found")

        if self._likes.exists(post_id, user_id):
            return ActionResult.fail("You already liked this post")

        try:
            self._likes.create(post_id, user_id)
        except DuplicateRecordError:
            return ActionResult.fail("You already liked this post")

        return ActionResult.ok("Post liked", resource_id=post_id)

    async def unlike(self, post_id: str, user_id: str) -> ActionResult:
        if not self._likes.delete(post_id, user_id):
            return ActionResult.fail("You have not liked this post")
        return ActionResult.ok("Like removed", resource_id=post_id)

    async def build_views(
        self,
        posts: list[PostRecord],
        viewer_id: Optional[str] = None,
    ) -> list[PostView]:
        """
        Decorate posts for display.

        Authors, counts and the viewer's likes are loaded in one query each
        for the whole batch. Posts whose author no longer exists are dropped.
        """
        if not posts:
            return []

        post_ids = [p.id for p in posts]
        authors = self._users.get_many([p.author_id for p in posts])
        like_counts = self._likes.count_for_posts(post_ids)
        comment_counts = self._comments.count_for_posts(post_ids)
        liked = self._likes.liked_post_ids(viewer_id, post_ids) if viewer_id else set()

        views = []
        for post in posts:
            author = authors.get(post.author_id)
            if author is None:
                continue
            views.append(
                PostView(
                    id=post.id,
                    content=post.content,
                    image_url=post.image_url,
                    author=author.to_public_profile(),
                    likes_count=like_counts.get(post.id, 0),
                    comments_count=comment_counts.get(post.id, 0),
                    liked_by_viewer=post.id in liked,
                    created_at=post.created_at,
                    updated_at=post.updated_at,
                )
            )
        return views
