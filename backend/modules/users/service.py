"""
User service implementation.

Profile reads and edits, search, account deletion and avatar upload.
"""

import logging
import os
from typing import Optional, TYPE_CHECKING

from shared.sanitizer import Sanitizer
from shared.storage import AvatarStorage

from .interfaces import IUserService
from .models import UpdateUserRequest, UserProfile, UserRecord
from .repository import UserRepository

if TYPE_CHECKING:
    from modules.connections.repository import ConnectionRepository
    from modules.posts.repository import PostRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    Implementation of the user service.

    Connection and post counts are read from their own repositories;
    this service never writes to them.
    """

    def __init__(
        self,
        users: UserRepository,
        connections: "ConnectionRepository",
        posts: "PostRepository",
        sanitizer: Sanitizer,
        storage: Optional[AvatarStorage] = None,
    ):
        self._users = users
        self._connections = connections
        self._posts = posts
        self._sanitizer = sanitizer
        self._storage = storage

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        user = self._users.get_by_id(user_id)
        if user is None:
            return None
        return self._to_profile(user)

    async def update_profile(
        self,
        user_id: str,
        request: UpdateUserRequest,
    ) -> Optional[UserProfile]:
        """
        Apply a partial update.

        Names, headline and bio are reduced to plain text. An empty
        headline or bio clears the field; an empty name is rejected.

        Raises:
            EmptyContentError: If a name holds nothing but markup.
        """
        changes = request.model_dump(exclude_none=True)
        for field, label in (("first_name", "First name"), ("last_name", "Last name")):
            if field in changes:
                changes[field] = self._sanitizer.strip_all_html_required(changes[field], label)
        for field in ("headline", "bio"):
            if field in changes:
                changes[field] = self._sanitizer.strip_all_html(changes[field]) or None

        if not changes:
            return await self.get_profile(user_id)

        user = self._users.update(user_id, changes)
        if user is None:
            return None

        logger.info("Profile updated: %s (%s)", user_id, ", ".join(sorted(changes)))
        return self._to_profile(user)

    async def search_users(self, query: str) -> list[UserProfile]:
        if not query or not query.strip():
            return []
        users = self._users.search(query.strip())
        return [self._to_profile(user) for user in users]

    async def delete_account(self, user_id: str) -> bool:
        deleted = self._users.delete(user_id)
        if deleted:
            logger.info("Account deleted: %s", user_id)
        return deleted

    async def upload_avatar(
        self,
        user_id: str,
        filename: str,
        content: bytes,
        content_type: str,
    ) -> Optional[str]:
        if self._storage is None:
            raise RuntimeError("Avatar storage is not configured")
        if not self._users.exists(user_id):
            return None

        extension = os.path.splitext(filename)[1].lower()
        url = self._storage.save(user_id, extension, content, content_type)

        if self._users.update(user_id, {"avatar_url": url}) is None:
            return None
        logger.info("Avatar updated: %s", user_id)
        return url

    def _to_profile(self, user: UserRecord) -> UserProfile:
        return UserProfile(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            headline=user.headline,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            connections_count=self._connections.count_accepted(user.id),
            posts_count=self._posts.count_by_author(user.id),
        )
