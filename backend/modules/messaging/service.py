"""
Messaging service implementation.

Conversations live in the document store; participant profiles and
sender names are resolved against the users table on read.
"""

import logging
from typing import Optional

from shared.models import PublicProfile
from shared.sanitizer import Sanitizer
from modules.users.models import UserRecord
from modules.users.repository import UserRepository

from .interfaces import IMessagingService
from .models import (
    UNKNOWN_SENDER,
    ConversationDetail,
    ConversationDocument,
    ConversationSummary,
    CreateConversationRequest,
    MessageDocument,
    MessageView,
    SendMessageRequest,
)
from .repository import ConversationRepository

logger = logging.getLogger(__name__)


class MessagingService(IMessagingService):
    """Implementation of the messaging service."""

    def __init__(
        self,
        conversations: ConversationRepository,
        users: UserRepository,
        sanitizer: Sanitizer,
    ):
        self._conversations = conversations
        self._users = users
        self._sanitizer = sanitizer

    async def create_conversation(
        self,
        user_id: str,
        request: CreateConversationRequest,
    ) -> Optional[ConversationSummary]:
        if request.participant_id == user_id:
            return None
        if not self._users.exists(request.participant_id):
            return None

        conversation = self._conversations.get_or_create(
            creator_id=user_id,
            participant_id=request.participant_id,
            first_message=self._sanitizer.sanitize_required(request.initial_message, "Message"),
        )
        return self._summaries([conversation])[0]

    async def list_conversations(self, user_id: str) -> list[ConversationSummary]:
        return self._summaries(self._conversations.list_for_user(user_id))

    async def get_conversation(
        self,
        conversation_id: str,
        user_id: str,
    ) -> Optional[ConversationDetail]:
        conversation = self._conversations.get_for_participant(conversation_id, user_id)
        if conversation is None:
            return None

        sender_ids = [m.sender_id for m in conversation.messages]
        users = self._users.get_many(conversation.participants + sender_ids)
        return ConversationDetail(
            id=conversation.id,
            participants=self._participants(conversation, users),
            messages=[self._message_view(m, users) for m in conversation.messages],
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )

    async def send_message(
        self,
        conversation_id: str,
        sender_id: str,
        request: SendMessageRequest,
    ) -> Optional[MessageView]:
        message = self._conversations.append_message(
            conversation_id,
            sender_id,
            self._sanitizer.sanitize_required(request.content, "Message"),
        )
        if message is None:
            logger.debug("Message rejected for conversation %s", conversation_id)
            return None
        return self._message_view(message, self._users.get_many([sender_id]))

    def _summaries(self, conversations: list[ConversationDocument]) -> list[ConversationSummary]:
        ids: list[str] = []
        for conversation in conversations:
            ids.extend(conversation.participants)
            if conversation.messages:
                ids.append(conversation.messages[-1].sender_id)
        users = self._users.get_many(ids)

        summaries = []
        for conversation in conversations:
            last = conversation.messages[-1] if conversation.messages else None
            summaries.append(
                ConversationSummary(
                    id=conversation.id,
                    participants=self._participants(conversation, users),
                    last_message=self._message_view(last, users) if last else None,
                    last_message_at=conversation.last_message_at,
                    created_at=conversation.created_at,
                )
            )
        return summaries

    def _participants(
        self,
        conversation: ConversationDocument,
        users: dict[str, UserRecord],
    ) -> list[PublicProfile]:
        return [
            users[user_id].to_public_profile()
            for user_id in conversation.participants
            if user_id in users
        ]

    def _message_view(
        self,
        message: MessageDocument,
        users: dict[str, UserRecord],
    ) -> MessageView:
        sender = users.get(message.sender_id)
        return MessageView(
            sender_id=message.sender_id,
            sender_name=f"{sender.first_name} {sender.last_name}" if sender else UNKNOWN_SENDER,
            content=message.content,
            sent_at=message.sent_at,
            read_at=message.read_at,
        )
