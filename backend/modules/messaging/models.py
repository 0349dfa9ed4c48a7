"""
Messaging module data models.

ConversationDocument and MessageDocument mirror what is stored in the
`conversations` collection; the *View / Summary / Detail models are what
clients receive.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import PublicProfile

UNKNOWN_SENDER = "Unknown"


def pair_key(user_a: str, user_b: str) -> str:
    """Order-independent key for a pair of users."""
    first, second = sorted((user_a, user_b))
    return f"{first}:{second}"


class MessageDocument(BaseModel):
    """A message embedded in a conversation document."""

    sender_id: str
    content: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ConversationDocument(BaseModel):
    """A stored conversation with its embedded messages."""

    id: str
    participants: list[str]
    pair_key: str
    messages: list[MessageDocument] = Field(default_factory=list)
    last_message_at: datetime
    created_at: datetime
    updated_at: datetime


class MessageView(BaseModel):
    """A message with its sender's display name."""

    sender_id: str
    sender_name: str = Field(..., description=f'Sender full name, or "{UNKNOWN_SENDER}"')
    content: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ConversationSummary(BaseModel):
    """Conversation list entry."""

    id: str = Field(..., description="Conversation ID")
    participants: list[PublicProfile]
    last_message: Optional[MessageView] = None
    last_message_at: datetime
    created_at: datetime


class ConversationDetail(BaseModel):
    """A conversation with its full message history, oldest first."""

    id: str = Field(..., description="Conversation ID")
    participants: list[PublicProfile]
    messages: list[MessageView]
    created_at: datetime
    updated_at: datetime


class CreateConversationRequest(BaseModel):
    """Start (or reopen) a conversation with another user."""

    participant_id: str = Field(..., min_length=1, description="The other user's ID")
    initial_message: str = Field(..., min_length=1, max_length=5000)


class SendMessageRequest(BaseModel):
    """Append a message to a conversation."""

    content: str = Field(..., min_length=1, max_length=5000)
