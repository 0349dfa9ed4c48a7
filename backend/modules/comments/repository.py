"""
Comment repository for database access.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import CommentRecord


class CommentRepository(BaseRepository[CommentRecord]):
    """
    Repository for comment data access.

    Note: This repository does NOT perform authorization checks.
    """

    table = "comments"

    def create(self, post_id: str, author_id: str, content: str) -> CommentRecord:
        result = self._execute(
            self._table().insert({
                "post_id": post_id,
                "author_id": author_id,
                "content": content,
            })
        )
        return self._map_to_comment(result.data[0])

    def get_by_id(self, comment_id: str) -> Optional[CommentRecord]:
        result = self._execute(
            self._table().select("*").eq("id", comment_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_comment(result.data[0])

    def delete(self, comment_id: str) -> bool:
        result = self._execute(self._table().delete().eq("id", comment_id))
        return bool(result.data)

    def list_by_post(self, post_id: str) -> list[CommentRecord]:
        """Comments on a post, oldest first."""
        result = self._execute(
            self._table()
            .select("*")
            .eq("post_id", post_id)
            .order("created_at")
        )
        return [self._map_to_comment(row) for row in result.data]

    def count_for_posts(self, post_ids: list[str]) -> dict[str, int]:
        """Number of comments per post, counted by the database."""
        return {post_id: self.count_for_post(post_id) for post_id in post_ids}

    def count_for_post(self, post_id: str) -> int:
        result = self._execute(
            self._table().select("id", count="exact", head=True).eq("post_id", post_id)
        )
        return result.count or 0

    def _map_to_comment(self, data: dict[str, Any]) -> CommentRecord:
        """Map database row to CommentRecord model."""
        return CommentRecord(
            id=str(data["id"]),
            post_id=str(data["post_id"]),
            author_id=str(data["author_id"]),
            content=data["content"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
