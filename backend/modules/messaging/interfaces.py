"""
Messaging module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    ConversationDetail,
    ConversationSummary,
    CreateConversationRequest,
    MessageView,
    SendMessageRequest,
)


@runtime_checkable
class IMessagingService(Protocol):
    """
    Interface for private two-party conversations.

    Lookups return None for a missing conversation, a malformed ID and a
    conversation the user is not part of alike.
    """

    async def create_conversation(
        self,
        user_id: str,
        request: CreateConversationRequest,
    ) -> Optional[ConversationSummary]:
        """
        Start a conversation, or return the pair's existing one unchanged.

        Returns None when the participant does not exist or is the user.
        """
        ...

    async def list_conversations(self, user_id: str) -> list[ConversationSummary]:
        """The user's conversations, most recent activity first."""
        ...

    async def get_conversation(
        self,
        conversation_id: str,
        user_id: str,
    ) -> Optional[ConversationDetail]:
        """A conversation with all its messages."""
        ...

    async def send_message(
        self,
        conversation_id: str,
        sender_id: str,
        request: SendMessageRequest,
    ) -> Optional[MessageView]:
        """Append a message to a conversation the sender is part of."""
        ...
