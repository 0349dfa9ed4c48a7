"""
Connection repository for database access.

Encapsulates all Supabase queries and data mapping for the connections
table. A pair of users has at most one record regardless of direction;
the schema enforces this with a unique index on the unordered pair.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import ConnectionRecord, ConnectionStatus


class ConnectionRepository(BaseRepository[ConnectionRecord]):
    """
    Repository for connection data access.

    Note: This repository does NOT perform authorization checks.
    The service layer verifies which party may act on a record.
    """

    table = "connections"

    def create(self, requester_id: str, addressee_id: str) -> ConnectionRecord:
        """
        Insert a pending connection request.

        Raises:
            DuplicateRecordError: If any record already exists for the pair.
        """
        result = self._execute(
            self._table().insert({
                "requester_id": requester_id,
                "addressee_id": addressee_id,
                "status": ConnectionStatus.PENDING.value,
            })
        )
        return self._map_to_connection(result.data[0])

    def get_by_id(self, connection_id: str) -> Optional[ConnectionRecord]:
        result = self._execute(
            self._table().select("*").eq("id", connection_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_connection(result.data[0])

    def find_between(self, user_a: str, user_b: str) -> Optional[ConnectionRecord]:
        """Find the record for a pair of users, in either direction."""
        result = self._execute(
            self._table()
            .select("*")
            .or_(
                f"and(requester_id.eq.{user_a},addressee_id.eq.{user_b}),"
                f"and(requester_id.eq.{user_b},addressee_id.eq.{user_a})"
            )
            .limit(1)
        )
        if not result.data:
            return None
        return self._map_to_connection(result.data[0])

    def update_status(
        self,
        connection_id: str,
        status: ConnectionStatus,
    ) -> Optional[ConnectionRecord]:
        """
        Set the status of a record and bump updated_at.

        The update only applies while the record is still pending, so two
        racing responses cannot both succeed.

        Returns:
            Updated record, or None if it was no longer pending.
        """
        data = {
            "status": status.value,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._execute(
            self._table()
            .update(data)
            .eq("id", connection_id)
            .eq("status", ConnectionStatus.PENDING.value)
        )
        if not result.data:
            return None
        return self._map_to_connection(result.data[0])

    def delete(self, connection_id: str) -> bool:
        result = self._execute(self._table().delete().eq("id", connection_id))
        return bool(result.data)

    def list_for_user(
        self,
        user_id: str,
        status: Optional[ConnectionStatus] = None,
    ) -> list[ConnectionRecord]:
        """
        List records in which the user is either party.

        Args:
            user_id: The user's ID.
            status: Optional status filter; all statuses when None.
        """
        query = (
            self._table()
            .select("*")
            .or_(f"requester_id.eq.{user_id},addressee_id.eq.{user_id}")
        )
        if status is not None:
            query = query.eq("status", status.value)
        result = self._execute(query.order("updated_at", desc=True))
        return [self._map_to_connection(row) for row in result.data]

    def list_pending_received(self, user_id: str) -> list[ConnectionRecord]:
        """Pending requests addressed to the user, newest first."""
        result = self._execute(
            self._table()
            .select("*")
            .eq("addressee_id", user_id)
            .eq("status", ConnectionStatus.PENDING.value)
            .order("created_at", desc=True)
        )
        return [self._map_to_connection(row) for row in result.data]

    def count_accepted(self, user_id: str) -> int:
        result = self._execute(
            self._table()
            .select("id", count="exact")
            .or_(f"requester_id.eq.{user_id},addressee_id.eq.{user_id}")
            .eq("status", ConnectionStatus.ACCEPTED.value)
        )
        return result.count or 0

    def _map_to_connection(self, data: dict[str, Any]) -> ConnectionRecord:
        """Map database row to ConnectionRecord model."""
        return ConnectionRecord(
            id=str(data["id"]),
            requester_id=str(data["requester_id"]),
            addressee_id=str(data["addressee_id"]),
            status=ConnectionStatus(data["status"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
