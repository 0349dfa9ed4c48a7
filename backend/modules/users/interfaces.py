"""
Users module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import UpdateUserRequest, UserProfile


@runtime_checkable
class IUserService(Protocol):
    """Interface for profile operations on identities."""

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's profile with connection and post counts.

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def update_profile(
        self,
        user_id: str,
        request: UpdateUserRequest,
    ) -> Optional[UserProfile]:
        """
        Apply the fields set in request.

        Returns:
            Updated profile, or None if the user does not exist
        """
        ...

    async def search_users(self, query: str) -> list[UserProfile]:
        """Case-insensitive search; a blank query returns nothing."""
        ...

    async def delete_account(self, user_id: str) -> bool:
        """Hard-delete a user and everything they own."""
        ...

    async def upload_avatar(
        self,
        user_id: str,
        filename: str,
        content: bytes,
        content_type: str,
    ) -> Optional[str]:
        """
        Store a new avatar image and point the profile at it.

        Returns:
            Public URL of the avatar, or None if the user does not exist
        """
        ...
