"""Tests for the demo data loader."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from run_seed import build_seed, seed

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def data():
    return build_seed(NOW, password_hash="$2b$04$hash")


def make_conn(users_exist: bool):
    conn = MagicMock()
    cur = conn.cursor.return_value.__enter__.return_value
    cur.fetchone.return_value = (users_exist,)
    return conn, cur


class TestBuildSeed:
    def test_row_counts(self, data):
        assert [(table, len(rows)) for table, rows in data.items()] == [
            ("users", 5),
            ("connections", 6),
            ("posts", 6),
            ("comments", 6),
            ("likes", 16),
        ]

    def test_one_pending_request_for_alice(self, data):
        alice = data["users"][0]["id"]
        pending = [c for c in data["connections"] if c["status"] == "pending"]
        assert len(pending) == 1
        assert pending[0]["addressee_id"] == alice

    def test_pairs_are_unique_in_either_direction(self, data):
        pairs = [frozenset((c["requester_id"], c["addressee_id"])) for c in data["connections"]]
        assert len(set(pairs)) == len(pairs)

    def test_likes_are_unique_per_user(self, data):
        likes = [(like["post_id"], like["user_id"]) for like in data["likes"]]
        assert len(set(likes)) == len(likes)

    def test_comments_follow_their_post(self, data):
        posts = {post["id"]: post for post in data["posts"]}
        for comment in data["comments"]:
            assert comment["created_at"] > posts[comment["post_id"]]["created_at"]

    def test_emails_are_lower_case_and_hash_shared(self, data):
        for user in data["users"]:
            assert user["email"] == user["email"].lower()
            assert user["password_hash"] == "$2b$04$hash"


class TestSeed:
    def test_skips_when_users_exist(self, data):
        """An already populated database must be left untouched."""
        conn, cur = make_conn(users_exist=True)

        assert seed(conn, data) is False

        cur.executemany.assert_not_called()
        conn.commit.assert_not_called()

    def test_inserts_every_table_in_order(self, data):
        conn, cur = make_conn(users_exist=False)

        assert seed(conn, data) is True

        statements = [call.args[0] for call in cur.executemany.call_args_list]
        assert [s.split()[2] for s in statements] == ["users", "connections", "posts", "comments", "likes"]
        assert len(cur.executemany.call_args_list[0].args[1]) == 5
        conn.commit.assert_called_once()

    def test_rolls_back_on_failure(self, data):
        conn, cur = make_conn(users_exist=False)
        cur.executemany.side_effect = RuntimeError("insert failed")

        with pytest.raises(RuntimeError):
            seed(conn, data)

        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()
