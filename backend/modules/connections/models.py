"""
Connections module data models.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field

from shared.models import PublicProfile


class ConnectionStatus(str, Enum):
    """Lifecycle state of a connection record."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ConnectionRecord(BaseModel):
    """A row of the connections table."""

    id: str
    requester_id: str
    addressee_id: str
    status: ConnectionStatus
    created_at: datetime
    updated_at: datetime

    def involves(self, user_id: str) -> bool:
        return user_id in (self.requester_id, self.addressee_id)

    def other_party(self, user_id: str) -> str:
        """The counterpart of user_id in this record."""
        return self.addressee_id if self.requester_id == user_id else self.requester_id


class ConnectionView(BaseModel):
    """An accepted connection, seen from one of its parties."""

    id: str = Field(..., description="Connection ID")
    user: PublicProfile = Field(..., description="The other party")
    status: ConnectionStatus
    created_at: datetime
    updated_at: datetime


class ConnectionRequestView(BaseModel):
    """A pending request received by the current user."""

    id: str = Field(..., description="Connection ID")
    requester: PublicProfile = Field(..., description="Who sent the request")
    created_at: datetime
