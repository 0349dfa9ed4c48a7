"""
Tests for user profile API endpoints.
"""

import pytest
from unittest.mock import AsyncMock, patch
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_auth_service, get_user_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser
from modules.users.models import UserProfile

from tests.conftest import make_test_settings

client = TestClient(app)

CURRENT_USER = AuthenticatedUser(id="user-123", email="alice@example.com")


def make_profile(user_id: str = "user-123", **overrides) -> UserProfile:
    values = {
        "id": user_id,
        "email": "alice@example.com",
        "first_name": "Alice",
        "last_name": "Martin",
        "created_at": datetime.now(timezone.utc),
        "connections_count": 3,
        "posts_count": 2,
    }
    values.update(overrides)
    return UserProfile(**values)


@pytest.fixture
def mock_service():
    service = AsyncMock()
    app.dependency_overrides[get_user_service] = lambda: service
    app.dependency_overrides[get_current_user] = lambda: CURRENT_USER
    yield service
    app.dependency_overrides.clear()


class TestMyProfile:
    def test_get_me(self, mock_service):
        """Should return the caller's profile with counts and full name."""
        mock_service.get_profile.return_value = make_profile()

        response = client.get("/api/users/me")

        assert response.status_code == 200
        data = response.json()
        assert data["full_name"] == "Alice Martin"
        assert data["connections_count"] == 3
        assert "password_hash" not in data
        mock_service.get_profile.assert_awaited_once_with("user-123")

    def test_get_me_deleted_account(self, mock_service):
        mock_service.get_profile.return_value = None
        response = client.get("/api/users/me")
        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_update_me(self, mock_service):
        mock_service.update_profile.return_value = make_profile(headline="CTO")

        response = client.put("/api/users/me", json={"headline": "CTO"})

        assert response.status_code == 200
        assert response.json()["headline"] == "CTO"
        user_id, request = mock_service.update_profile.await_args.args
        assert user_id == "user-123"
        assert request.headline == "CTO"
        assert request.first_name is None

    def test_update_rejects_empty_first_name(self, mock_service):
        response = client.put("/api/users/me", json={"first_name": ""})
        assert response.status_code == 422

    def test_delete_me(self, mock_service):
        mock_service.delete_account.return_value = True
        response = client.delete("/api/users/me")
        assert response.status_code == 204

    def test_delete_me_missing(self, mock_service):
        mock_service.delete_account.return_value = False
        response = client.delete("/api/users/me")
        assert response.status_code == 404


class TestAvatarUpload:
    def test_upload(self, mock_service):
        mock_service.upload_avatar.return_value = "https://cdn.example.com/a.png"

        response = client.post(
            "/api/users/me/avatar",
            files={"file": ("me.png", b"\x89PNG data", "image/png")},
        )

        assert response.status_code == 200
        assert response.json() == {"avatar_url": "https://cdn.example.com/a.png"}
        args = mock_service.upload_avatar.await_args.args
        assert args == ("user-123", "me.png", b"\x89PNG data", "image/png")

    def test_rejects_unsupported_extension(self, mock_service):
        response = client.post(
            "/api/users/me/avatar",
            files={"file": ("me.exe", b"MZ", "application/octet-stream")},
        )
        assert response.status_code == 400
        mock_service.upload_avatar.assert_not_awaited()

    def test_rejects_empty_file(self, mock_service):
        response = client.post(
            "/api/users/me/avatar",
            files={"file": ("me.png", b"", "image/png")},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_rejects_oversized_file(self, mock_service):
        with patch(
            "modules.users.routes.get_settings",
            return_value=make_test_settings(max_avatar_bytes=4),
        ):
            response = client.post(
                "/api/users/me/avatar",
                files={"file": ("me.png", b"12345", "image/png")},
            )
        assert response.status_code == 400
        assert response.json()["detail"] == "File too large"


class TestSearchAndLookup:
    def test_search(self, mock_service):
        mock_service.search_users.return_value = [make_profile()]
        response = client.get("/api/users/search", params={"q": "ali"})
        assert response.status_code == 200
        assert len(response.json()) == 1
        mock_service.search_users.assert_awaited_once_with("ali")

    def test_search_is_not_treated_as_user_id(self, mock_service):
        """/search must not be routed to the /{user_id} lookup."""
        mock_service.search_users.return_value = []
        client.get("/api/users/search")
        mock_service.get_profile.assert_not_awaited()

    def test_get_other_user(self, mock_service):
        mock_service.get_profile.return_value = make_profile("user-456")
        response = client.get("/api/users/user-456")
        assert response.status_code == 200
        assert response.json()["id"] == "user-456"

    def test_get_unknown_user(self, mock_service):
        mock_service.get_profile.return_value = None
        response = client.get("/api/users/user-999")
        assert response.status_code == 404


class TestRequiresAuth:
    def test_profile_requires_token(self):
        """Without a token the auth dependency should reject the request."""
        app.dependency_overrides[get_auth_service] = lambda: AsyncMock()
        try:
            response = client.get("/api/users/me")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 401
