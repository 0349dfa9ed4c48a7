"""
Conversation repository for document store access.

One document per pair of users. Creation is a single upsert keyed on the
unique `pair_key`, and appending a message is a single update_one, so
neither needs a read-modify-write cycle.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from shared.exceptions import DuplicateRecordError
from shared.repository import BaseDocumentRepository
from .models import ConversationDocument, MessageDocument, pair_key


class ConversationRepository(BaseDocumentRepository):
    """
    Repository for the conversations collection.

    Note: Participant checks are part of the queries themselves; a
    conversation the user is not part of is indistinguishable from one
    that does not exist.
    """

    collection_name = "conversations"

    def ensure_indexes(self) -> None:
        """Create the collection's indexes. Safe to call repeatedly."""
        with self._store_errors():
            self._collection.create_index([("participants", ASCENDING)])
            self._collection.create_index([("last_message_at", DESCENDING)])
            self._collection.create_index("pair_key", unique=True)

    def get_or_create(
        self,
        creator_id: str,
        participant_id: str,
        first_message: str,
    ) -> ConversationDocument:
        """
        Return the pair's conversation, creating it with a first message.

        An existing conversation is returned untouched; first_message is
        only stored when this call creates the document.
        """
        key = pair_key(creator_id, participant_id)
        now = datetime.now(timezone.utc)
        message = {
            "sender_id": creator_id,
            "content": first_message,
            "sent_at": now,
            "read_at": None,
        }
        try:
            with self._store_errors():
                doc = self._collection.find_one_and_update(
                    {"pair_key": key},
                    {
                        "$setOnInsert": {
                            "participants": [creator_id, participant_id],
                            "messages": [message],
                            "last_message_at": now,
                            "created_at": now,
                            "updated_at": now,
                        }
                    },
                    upsert=True,
                    return_document=ReturnDocument.AFTER,
                )
        except DuplicateRecordError:
            # Concurrent upsert for the same pair inserted first
            with self._store_errors():
                doc = self._collection.find_one({"pair_key": key})
        return self._map_to_conversation(doc)

    def list_for_user(self, user_id: str) -> list[ConversationDocument]:
        """Conversations the user takes part in, most recent activity first."""
        with self._store_errors():
            cursor = self._collection.find({"participants": user_id}).sort(
                "last_message_at", DESCENDING
            )
            return [self._map_to_conversation(doc) for doc in cursor]

    def get_for_participant(
        self,
        conversation_id: str,
        user_id: str,
    ) -> Optional[ConversationDocument]:
        """Load a conversation only if user_id participates in it."""
        if not ObjectId.is_valid(conversation_id):
            return None
        with self._store_errors():
            doc = self._collection.find_one(
                {"_id": ObjectId(conversation_id), "participants": user_id}
            )
        if doc is None:
            return None
        return self._map_to_conversation(doc)

    def append_message(
        self,
        conversation_id: str,
        sender_id: str,
        content: str,
    ) -> Optional[MessageDocument]:
        """
        Append a message if sender_id participates in the conversation.

        Returns:
            The stored message, or None when nothing matched.
        """
        if not ObjectId.is_valid(conversation_id):
            return None

        now = datetime.now(timezone.utc)
        message = MessageDocument(sender_id=sender_id, content=content, sent_at=now)
        with self._store_errors():
            result = self._collection.update_one(
                {"_id": ObjectId(conversation_id), "participants": sender_id},
                {
                    "$push": {"messages": message.model_dump()},
                    "$set": {"last_message_at": now, "updated_at": now},
                },
            )
        if result.matched_count != 1:
            return None
        return message

    def _map_to_conversation(self, doc: dict[str, Any]) -> ConversationDocument:
        """Map a stored document to ConversationDocument."""
        return ConversationDocument(
            id=str(doc["_id"]),
            participants=[str(p) for p in doc["participants"]],
            pair_key=doc["pair_key"],
            messages=[MessageDocument(**m) for m in doc.get("messages", [])],
            last_message_at=doc["last_message_at"],
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )
