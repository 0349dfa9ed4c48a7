"""
Tests for connections API endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_connection_service
from api.middleware.auth import get_current_user
from shared.models import ActionResult, AuthenticatedUser, PublicProfile
from modules.connections.models import ConnectionRequestView, ConnectionStatus, ConnectionView

client = TestClient(app)

CURRENT_USER = AuthenticatedUser(id="user-123", email="alice@example.com")

BOB = PublicProfile(id="user-456", first_name="Bob", last_name="Stone", headline="Designer")


@pytest.fixture
def mock_service():
    service = AsyncMock()
    app.dependency_overrides[get_connection_service] = lambda: service
    app.dependency_overrides[get_current_user] = lambda: CURRENT_USER
    yield service
    app.dependency_overrides.clear()


class TestListEndpoints:
    def test_list_connections(self, mock_service):
        now = datetime.now(timezone.utc)
        mock_service.list_connections.return_value = [
            ConnectionView(
                id="conn-1",
                user=BOB,
                status=ConnectionStatus.ACCEPTED,
                created_at=now,
                updated_at=now,
            )
        ]

        response = client.get("/api/connections")

        assert response.status_code == 200
        data = response.json()
        assert data[0]["user"]["full_name"] == "Bob Stone"
        assert data[0]["status"] == "accepted"
        mock_service.list_connections.assert_awaited_once_with("user-123")

    def test_list_pending(self, mock_service):
        mock_service.list_pending_received.return_value = [
            ConnectionRequestView(id="conn-2", requester=BOB, created_at=datetime.now(timezone.utc))
        ]
        response = client.get("/api/connections/pending")
        assert response.status_code == 200
        assert response.json()[0]["requester"]["id"] == "user-456"

    def test_suggestions_pass_limit(self, mock_service):
        mock_service.suggest_users.return_value = [BOB]
        response = client.get("/api/connections/suggestions", params={"limit": 5})
        assert response.status_code == 200
        mock_service.suggest_users.assert_awaited_once_with("user-123", 5)

    def test_suggestions_default_limit(self, mock_service):
        mock_service.suggest_users.return_value = []
        client.get("/api/connections/suggestions")
        mock_service.suggest_users.assert_awaited_once_with("user-123", 10)


class TestActions:
    def test_send_request(self, mock_service):
        mock_service.send_request.return_value = ActionResult.ok(
            "Connection request sent", resource_id="conn-1"
        )
        response = client.post("/api/connections/request/user-456")

        assert response.status_code == 200
        assert response.json()["resource_id"] == "conn-1"
        mock_service.send_request.assert_awaited_once_with("user-123", "user-456")

    def test_send_request_failure_is_400(self, mock_service):
        mock_service.send_request.return_value = ActionResult.fail(
            "You cannot send a connection request to yourself"
        )
        response = client.post("/api/connections/request/user-123")

        assert response.status_code == 400
        assert response.json()["detail"] == "You cannot send a connection request to yourself"

    def test_accept(self, mock_service):
        mock_service.accept_request.return_value = ActionResult.ok("Connection request accepted")
        response = client.put("/api/connections/conn-1/accept")
        assert response.status_code == 200
        mock_service.accept_request.assert_awaited_once_with("conn-1", "user-123")

    def test_reject_not_authorized(self, mock_service):
        mock_service.reject_request.return_value = ActionResult.fail(
            "You are not authorized to reject this request"
        )
        response = client.put("/api/connections/conn-1/reject")
        assert response.status_code == 400

    def test_remove(self, mock_service):
        mock_service.remove_connection.return_value = ActionResult.ok("Connection removed")
        response = client.delete("/api/connections/conn-1")
        assert response.status_code == 200
        assert response.json()["message"] == "Connection removed"
