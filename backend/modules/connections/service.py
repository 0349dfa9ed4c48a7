"""
Connection service implementation.

Drives the request lifecycle:

    pending --accept--> accepted
    pending --reject--> rejected
    any     --remove--> (deleted)

There is no way back from rejected to pending; the pair stays blocked
until one side removes the record.
"""

import logging
import random
from typing import Optional

from shared.exceptions import DuplicateRecordError
from shared.models import ActionResult, PublicProfile
from modules.users.repository import UserRepository

from .interfaces import IConnectionService
from .models import (
    ConnectionRecord,
    ConnectionRequestView,
    ConnectionStatus,
    ConnectionView,
)
from .repository import ConnectionRepository

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 50

_EXISTING_MESSAGES = {
    ConnectionStatus.PENDING: "A connection request is already pending",
    ConnectionStatus.ACCEPTED: "You are already connected",
    ConnectionStatus.REJECTED: "This connection request was rejected",
}


class ConnectionService(IConnectionService):
    """Implementation of the connection service."""

    def __init__(self, connections: ConnectionRepository, users: UserRepository):
        self._connections = connections
        self._users = users

    async def send_request(self, requester_id: str, addressee_id: str) -> ActionResult:
        if requester_id == addressee_id:
            return ActionResult.fail("You cannot send a connection request to yourself")

        if not self._users.exists(addressee_id):
            return ActionResult.fail("User not found")

        existing = self._connections.find_between(requester_id, addressee_id)
        if existing is not None:
            return self._existing_failure(existing)

        try:
            connection = self._connections.create(requester_id, addressee_id)
        except DuplicateRecordError:
            # A concurrent request for the same pair won the insert
            existing = self._connections.find_between(requester_id, addressee_id)
            if existing is not None:
                return self._existing_failure(existing)
            return ActionResult.fail("A connection already exists")

        logger.info("Connection requested: %s -> %s", requester_id, addressee_id)
        return ActionResult.ok("Connection request sent", resource_id=connection.id)

    async def accept_request(self, connection_id: str, acting_user_id: str) -> ActionResult:
        return self._respond(connection_id, acting_user_id, ConnectionStatus.ACCEPTED)

    async def reject_request(self, connection_id: str, acting_user_id: str) -> ActionResult:
        return self._respond(connection_id, acting_user_id, ConnectionStatus.REJECTED)

    async def remove_connection(self, connection_id: str, acting_user_id: str) -> ActionResult:
        connection = self._connections.get_by_id(connection_id)
        if connection is None:
            return ActionResult.fail("Connection not found")

        if not connection.involves(acting_user_id):
            return ActionResult.fail("You are not authorized to remove this connection")

        self._connections.delete(connection_id)
        logger.info("Connection removed: %s by %s", connection_id, acting_user_id)
        return ActionResult.ok("Connection removed", resource_id=connection_id)

    async def list_connections(self, user_id: str) -> list[ConnectionView]:
        records = self._connections.list_for_user(user_id, ConnectionStatus.ACCEPTED)
        profiles = self._profiles([c.other_party(user_id) for c in records])

        views = []
        for connection in records:
            other = profiles.get(connection.other_party(user_id))
            if other is None:
                continue
            views.append(
                ConnectionView(
                    id=connection.id,
                    user=other,
                    status=connection.status,
                    created_at=connection.created_at,
                    updated_at=connection.updated_at,
                )
            )
        return views

    async def list_pending_received(self, user_id: str) -> list[ConnectionRequestView]:
        records = self._connections.list_pending_received(user_id)
        profiles = self._profiles([c.requester_id for c in records])

        return [
            ConnectionRequestView(
                id=connection.id,
                requester=profiles[connection.requester_id],
                created_at=connection.created_at,
            )
            for connection in records
            if connection.requester_id in profiles
        ]

    async def suggest_users(self, user_id: str, limit: int = 10) -> list[PublicProfile]:
        """
        Suggest users to connect with.

        Excludes the user and everyone they share a record with, whatever
        its status, so pending and rejected pairs are not suggested again.
        """
        limit = max(1, min(limit, MAX_SUGGESTIONS))

        excluded = {user_id}
        for connection in self._connections.list_for_user(user_id):
            excluded.add(connection.other_party(user_id))

        candidates = self._users.list_excluding(sorted(excluded))
        picked = random.sample(candidates, min(limit, len(candidates)))
        return [user.to_public_profile() for user in picked]

    async def get_connected_user_ids(self, user_id: str) -> list[str]:
        records = self._connections.list_for_user(user_id, ConnectionStatus.ACCEPTED)
        return [c.other_party(user_id) for c in records]

    def _respond(
        self,
        connection_id: str,
        acting_user_id: str,
        status: ConnectionStatus,
    ) -> ActionResult:
        verb = "accept" if status == ConnectionStatus.ACCEPTED else "reject"

        connection = self._connections.get_by_id(connection_id)
        if connection is None:
            return ActionResult.fail("Connection request not found")

        if connection.addressee_id != acting_user_id:
            logger.debug("User %s may not %s connection %s", acting_user_id, verb, connection_id)
            return ActionResult.fail(f"You are not authorized to {verb} this request")

        if connection.status != ConnectionStatus.PENDING:
            return ActionResult.fail("This request is no longer pending")

        updated: Optional[ConnectionRecord] = self._connections.update_status(connection_id, status)
        if updated is None:
            # Answered concurrently
            return ActionResult.fail("This request is no longer pending")

        logger.info("Connection %s: %s", status.value, connection_id)
        return ActionResult.ok(f"Connection request {status.value}", resource_id=connection_id)

    def _existing_failure(self, connection: ConnectionRecord) -> ActionResult:
        return ActionResult.fail(_EXISTING_MESSAGES[connection.status])

    def _profiles(self, user_ids: list[str]) -> dict[str, PublicProfile]:
        users = self._users.get_many(user_ids)
        return {user_id: user.to_public_profile() for user_id, user in users.items()}
