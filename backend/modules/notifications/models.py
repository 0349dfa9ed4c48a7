"""
Notifications module data models.

Documents of the `notifications` collection. Nothing produces them yet;
the collection and its indexes exist so the shape is fixed.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class NotificationType(str, Enum):
    CONNECTION_REQUEST = "connection_request"
    CONNECTION_ACCEPTED = "connection_accepted"
    NEW_LIKE = "new_like"
    NEW_COMMENT = "new_comment"
    NEW_MESSAGE = "new_message"


class NotificationData(BaseModel):
    """References to the objects a notification is about."""

    from_user_id: Optional[str] = None
    from_user_name: Optional[str] = None
    post_id: Optional[str] = None
    comment_id: Optional[str] = None
    conversation_id: Optional[str] = None
    connection_id: Optional[str] = None


class NotificationDocument(BaseModel):
    """A notification addressed to one user."""

    id: Optional[str] = None
    user_id: str = Field(..., description="Recipient")
    type: NotificationType
    data: NotificationData = Field(default_factory=NotificationData)
    read: bool = False
    message: str
    created_at: datetime
