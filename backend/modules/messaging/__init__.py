"""
Messaging module.

Private conversations between two users, stored as MongoDB documents
with embedded messages.

Public API:
- IMessagingService: Interface for conversation operations
- Conversation and message models
- ConversationRepository: Data access for the conversations collection
"""

from .interfaces import IMessagingService
from .models import (
    ConversationDetail,
    ConversationSummary,
    CreateConversationRequest,
    MessageView,
    SendMessageRequest,
    pair_key,
)
from .repository import ConversationRepository

__all__ = [
    "IMessagingService",
    "ConversationDetail",
    "ConversationSummary",
    "CreateConversationRequest",
    "MessageView",
    "SendMessageRequest",
    "pair_key",
    "ConversationRepository",
]
