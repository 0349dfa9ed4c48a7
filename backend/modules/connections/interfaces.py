"""
Connections module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import ActionResult, PublicProfile

from .models import ConnectionRequestView, ConnectionView


@runtime_checkable
class IConnectionService(Protocol):
    """
    Interface for the professional graph.

    State-changing operations return an ActionResult; a failed business
    rule is never raised.
    """

    async def send_request(self, requester_id: str, addressee_id: str) -> ActionResult:
        """Create a pending request from requester to addressee."""
        ...

    async def accept_request(self, connection_id: str, acting_user_id: str) -> ActionResult:
        """Accept a pending request. Only the addressee may accept."""
        ...

    async def reject_request(self, connection_id: str, acting_user_id: str) -> ActionResult:
        """Reject a pending request. Only the addressee may reject."""
        ...

    async def remove_connection(self, connection_id: str, acting_user_id: str) -> ActionResult:
        """Delete a connection record. Either party may remove it."""
        ...

    async def list_connections(self, user_id: str) -> list[ConnectionView]:
        """Accepted connections, each with the other party's profile."""
        ...

    async def list_pending_received(self, user_id: str) -> list[ConnectionRequestView]:
        """Pending requests addressed to the user, newest first."""
        ...

    async def suggest_users(self, user_id: str, limit: int = 10) -> list[PublicProfile]:
        """Random users the user has no connection record with."""
        ...

    async def get_connected_user_ids(self, user_id: str) -> list[str]:
        """IDs of every user with an accepted connection to user_id."""
        ...
