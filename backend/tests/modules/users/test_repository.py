"""Tests for users repository."""

import pytest
from datetime import datetime, timezone

from postgrest.exceptions import APIError

from shared.exceptions import DuplicateRecordError
from modules.users.repository import UserRepository

from tests.conftest import mock_supabase


def create_mock_user_data(user_id: str = "user-123", email: str = "alice@example.com") -> dict:
    """Helper to create a users row."""
    now = datetime.now(timezone.utc).isoformat()
    return {
        "id": user_id,
        "email": email,
        "password_hash": "$2b$04$hash",
        "first_name": "Alice",
        "last_name": "Martin",
        "headline": "Engineer",
        "bio": None,
        "avatar_url": None,
        "created_at": now,
        "updated_at": now,
    }


class TestCreate:
    def test_create_lowercases_email(self):
        """Should insert the email lower-cased."""
        db, query = mock_supabase([create_mock_user_data()])
        user = UserRepository(db).create({
            "email": "Alice@Example.COM",
            "password_hash": "h",
            "first_name": "Alice",
            "last_name": "Martin",
        })

        db.table.assert_called_with("users")
        inserted = query.insert.call_args.args[0]
        assert inserted["email"] == "alice@example.com"
        assert user.id == "user-123"

    def test_create_duplicate_email(self):
        """A unique violation should surface as DuplicateRecordError."""
        db, query = mock_supabase()
        query.execute.side_effect = APIError(
            {"message": "duplicate key", "code": "23505", "hint": None, "details": None}
        )
        with pytest.raises(DuplicateRecordError):
            UserRepository(db).create({
                "email": "a@x.com",
                "password_hash": "h",
                "first_name": "A",
                "last_name": "B",
            })


class TestGet:
    def test_get_by_id_found(self):
        db, query = mock_supabase([create_mock_user_data()])
        user = UserRepository(db).get_by_id("user-123")
        query.eq.assert_called_with("id", "user-123")
        assert user.email == "alice@example.com"
        assert user.headline == "Engineer"

    def test_get_by_id_missing(self):
        db, _ = mock_supabase([])
        assert UserRepository(db).get_by_id("nope") is None

    def test_get_by_email_is_case_insensitive(self):
        """Lookup should lower-case the email before querying."""
        db, query = mock_supabase([create_mock_user_data()])
        UserRepository(db).get_by_email("ALICE@example.com")
        query.eq.assert_called_with("email", "alice@example.com")

    def test_exists(self):
        db, _ = mock_supabase([{"id": "user-123"}])
        assert UserRepository(db).exists("user-123") is True

    def test_get_many_returns_mapping(self):
        db, query = mock_supabase([
            create_mock_user_data("u1", "a@x.com"),
            create_mock_user_data("u2", "b@x.com"),
        ])
        users = UserRepository(db).get_many(["u1", "u2", "u1"])

        query.in_.assert_called_once_with("id", ["u1", "u2"])
        assert set(users) == {"u1", "u2"}

    def test_get_many_empty_skips_query(self):
        db, query = mock_supabase()
        assert UserRepository(db).get_many([]) == {}
        query.execute.assert_not_called()


class TestUpdateDelete:
    def test_update_bumps_updated_at(self):
        db, query = mock_supabase([create_mock_user_data()])
        UserRepository(db).update("user-123", {"headline": "CTO"})

        values = query.update.call_args.args[0]
        assert values["headline"] == "CTO"
        assert "updated_at" in values
        query.eq.assert_called_with("id", "user-123")

    def test_update_missing_user(self):
        db, _ = mock_supabase([])
        assert UserRepository(db).update("nope", {"headline": "x"}) is None

    def test_delete(self):
        db, query = mock_supabase([create_mock_user_data()])
        assert UserRepository(db).delete("user-123") is True
        query.delete.assert_called_once()

    def test_delete_missing(self):
        db, _ = mock_supabase([])
        assert UserRepository(db).delete("nope") is False


class TestSearch:
    def test_search_matches_four_columns(self):
        """Should OR an ilike filter over names, email and headline."""
        db, query = mock_supabase([create_mock_user_data()])
        results = UserRepository(db).search("ali")

        filters = query.or_.call_args.args[0]
        for column in ("first_name", "last_name", "email", "headline"):
            assert f'{column}.ilike."%ali%"' in filters
        query.limit.assert_called_with(20)
        assert len(results) == 1

    def test_search_escapes_quotes(self):
        db, query = mock_supabase([])
        UserRepository(db).search('a"b')
        assert '\\"' in query.or_.call_args.args[0]

    def test_list_excluding(self):
        db, query = mock_supabase([create_mock_user_data("u3")])
        users = UserRepository(db).list_excluding(["u1", "u2"])
        query.in_.assert_called_once_with("id", ["u1", "u2"])
        assert [u.id for u in users] == ["u3"]
