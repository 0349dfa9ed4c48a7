"""
Notification repository for document store access.
"""

from pymongo import ASCENDING, DESCENDING

from shared.repository import BaseDocumentRepository


class NotificationRepository(BaseDocumentRepository):
    """Repository for the notifications collection."""

    collection_name = "notifications"

    def ensure_indexes(self) -> None:
        """Create the collection's indexes. Safe to call repeatedly."""
        with self._store_errors():
            self._collection.create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])
            self._collection.create_index([("user_id", ASCENDING), ("read", ASCENDING)])
