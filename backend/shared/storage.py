"""
Blob storage for user avatars.

Uploads go to a Supabase Storage bucket; the public URL of the stored
object becomes the user's avatar_url.
"""

import uuid

from storage3.exceptions import StorageException
from supabase import Client

from .exceptions import ExternalServiceError


class AvatarStorage:
    """Stores avatar images and returns their public URLs."""

    def __init__(self, db: Client, bucket: str) -> None:
        self._db = db
        self._bucket = bucket

    def save(self, user_id: str, extension: str, content: bytes, content_type: str) -> str:
        """
        Store an avatar image under a unique name.

        Args:
            user_id: Owner of the avatar, used as the object name prefix
            extension: File extension including the dot (".png")
            content: Raw image bytes
            content_type: MIME type sent by the client

        Returns:
            Public URL of the stored object
        """
        path = f"{user_id}/{uuid.uuid4()}{extension}"
        bucket = self._db.storage.from_(self._bucket)
        try:
            bucket.upload(
                path=path,
                file=content,
                file_options={"content-type": content_type},
            )
        except StorageException as e:
            raise ExternalServiceError(
                "Avatar upload failed",
                service="supabase-storage",
                details={"path": path},
            ) from e
        return bucket.get_public_url(path)
