"""
Post repositories for database access.

Encapsulates all Supabase queries and data mapping for:
- posts
- likes
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import PostRecord


class PostRepository(BaseRepository[PostRecord]):
    """
    Repository for post data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying authorship.
    """

    table = "posts"

    def create(self, author_id: str, content: str, image_url: Optional[str] = None) -> PostRecord:
        result = self._execute(
            self._table().insert({
                "author_id": author_id,
                "content": content,
                "image_url": image_url,
            })
        )
        return self._map_to_post(result.data[0])

    def get_by_id(self, post_id: str) -> Optional[PostRecord]:
        result = self._execute(self._table().select("*").eq("id", post_id).limit(1))
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def update(self, post_id: str, data: dict[str, Any]) -> Optional[PostRecord]:
        """
        Update the given columns and bump updated_at.

        Returns:
            The updated post, or None if it no longer exists.
        """
        values = dict(data)
        values["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = self._execute(self._table().update(values).eq("id", post_id))
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def delete(self, post_id: str) -> bool:
        """
        Delete a post.

        Note: Comments and likes are deleted via CASCADE.
        """
        result = self._execute(self._table().delete().eq("id", post_id))
        return bool(result.data)

    def list_by_author(self, author_id: str) -> list[PostRecord]:
        """All posts by one author, newest first."""
        result = self._execute(
            self._table()
            .select("*")
            .eq("author_id", author_id)
            .order("created_at", desc=True)
        )
        return [self._map_to_post(row) for row in result.data]

    def list_by_authors(
        self,
        author_ids: list[str],
        offset: int,
        limit: int,
    ) -> list[PostRecord]:
        """
        One page of posts by any of the given authors, newest first.

        Args:
            author_ids: Authors whose posts are included.
            offset: Number of posts to skip.
            limit: Maximum number of posts to return.
        """
        if not author_ids or limit < 1:
            return []
        result = self._execute(
            self._table()
            .select("*")
            .in_("author_id", list(dict.fromkeys(author_ids)))
            .order("created_at", desc=True)
            .range(offset, offset + limit - 1)
        )
        return [self._map_to_post(row) for row in result.data]

    def count_by_author(self, author_id: str) -> int:
        result = self._execute(
            self._table().select("id", count="exact").eq("author_id", author_id)
        )
        return result.count or 0

    def _map_to_post(self, data: dict[str, Any]) -> PostRecord:
        """Map database row to PostRecord model."""
        return PostRecord(
            id=str(data["id"]),
            author_id=str(data["author_id"]),
            content=data["content"],
            image_url=data.get("image_url"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class LikeRepository(BaseRepository[dict]):
    """
    Repository for likes.

    A user likes a post at most once; the schema has a unique index on
    (user_id, post_id).
    """

    table = "likes"

    def exists(self, post_id: str, user_id: str) -> bool:
        result = self._execute(
            self._table()
            .select("id")
            .eq("post_id", post_id)
            .eq("user_id", user_id)
            .limit(1)
        )
        return bool(result.data)

    def create(self, post_id: str, user_id: str) -> None:
        """
        Record a like.

        Raises:
            DuplicateRecordError: If the user already likes the post.
        """
        self._execute(self._table().insert({"post_id": post_id, "user_id": user_id}))

    def delete(self, post_id: str, user_id: str) -> bool:
        result = self._execute(
            self._table().delete().eq("post_id", post_id).eq("user_id", user_id)
        )
        return bool(result.data)

    def count_for_posts(self, post_ids: list[str]) -> dict[str, int]:
        """
        Number of likes per post; posts without likes map to 0.

        Counted by the database with one head request per post.
        """
        return {post_id: self.count_for_post(post_id) for post_id in post_ids}

    def count_for_post(self, post_id: str) -> int:
        result = self._execute(
            self._table().select("id", count="exact", head=True).eq("post_id", post_id)
        )
        return result.count or 0

    def liked_post_ids(self, user_id: str, post_ids: list[str]) -> set[str]:
        """The subset of post_ids the user has liked."""
        if not post_ids:
            return set()
        result = self._execute(
            self._table()
            .select("post_id")
            .eq("user_id", user_id)
            .in_("post_id", post_ids)
        )
        return {str(row["post_id"]) for row in result.data}

