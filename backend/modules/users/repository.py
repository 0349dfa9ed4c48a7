"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import UserRecord

SEARCH_LIMIT = 20

_SEARCH_COLUMNS = ("first_name", "last_name", "email", "headline")


def _quote_filter_value(value: str) -> str:
    """Quote a value for a PostgREST or() filter, escaping reserved characters."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for identity data access.

    Emails are lower-cased on the way in so lookups and the unique index
    are case-insensitive.

    Note: This repository does NOT perform authorization checks.
    """

    table = "users"

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a new user.

        Args:
            data: Column values (email, password_hash, first_name, ...)

        Returns:
            Created UserRecord with generated ID and timestamps.

        Raises:
            DuplicateRecordError: If the email is already registered.
        """
        row = dict(data)
        row["email"] = row["email"].lower()
        result = self._execute(self._table().insert(row))
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._execute(self._table().select("*").eq("id", user_id).limit(1))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._execute(
            self._table().select("*").eq("email", email.lower()).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def exists(self, user_id: str) -> bool:
        result = self._execute(self._table().select("id").eq("id", user_id).limit(1))
        return bool(result.data)

    def get_many(self, user_ids: list[str]) -> dict[str, UserRecord]:
        """
        Load several users at once.

        Returns:
            Mapping of user ID to record; unknown IDs are simply absent.
        """
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        result = self._execute(self._table().select("*").in_("id", ids))
        return {str(row["id"]): self._map_to_user(row) for row in result.data}

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        """
        Update the given columns and bump updated_at.

        Returns:
            The updated record, or None if the user does not exist.
        """
        values = dict(data)
        values["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = self._execute(self._table().update(values).eq("id", user_id))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Note: Connections, posts, comments and likes are deleted via CASCADE.
        """
        result = self._execute(self._table().delete().eq("id", user_id))
        return bool(result.data)

    def search(self, query: str, limit: int = SEARCH_LIMIT) -> list[UserRecord]:
        """
        Case-insensitive substring search over names, email and headline.
        """
        pattern = _quote_filter_value(f"%{query}%")
        filters = ",".join(f"{column}.ilike.{pattern}" for column in _SEARCH_COLUMNS)
        result = self._execute(
            self._table().select("*").or_(filters).order("first_name").limit(limit)
        )
        return [self._map_to_user(row) for row in result.data]

    def list_excluding(self, excluded_ids: list[str]) -> list[UserRecord]:
        """List every user whose ID is not in excluded_ids."""
        query = self._table().select("*")
        if excluded_ids:
            query = query.not_.in_("id", list(dict.fromkeys(excluded_ids)))
        result = self._execute(query)
        return [self._map_to_user(row) for row in result.data]

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            headline=data.get("headline"),
            bio=data.get("bio"),
            avatar_url=data.get("avatar_url"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
